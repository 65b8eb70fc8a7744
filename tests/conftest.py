"""Pytest configuration and fixtures for schedule-mcp tests."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from schedule_mcp import Task, TaskDependency


def day(n: int, month: int = 1) -> datetime:
    """Midnight on the given day of 2024."""
    return datetime(2024, month, n)


@pytest.fixture
def apply_update():
    """Async task-mutation callback that records nothing and always succeeds."""
    return AsyncMock(return_value=None)


@pytest.fixture
def chain_tasks():
    """A -> B -> C, each starting when the previous one finishes."""
    return [
        Task(id="a", title="Design", start_date=day(1), end_date=day(6), duration=5),
        Task(id="b", title="Build", start_date=day(6), end_date=day(11), duration=5),
        Task(id="c", title="Ship", start_date=day(11), end_date=day(14), duration=3),
    ]


@pytest.fixture
def chain_dependencies():
    return [
        TaskDependency(id="ab", predecessor_id="a", successor_id="b"),
        TaskDependency(id="bc", predecessor_id="b", successor_id="c"),
    ]


@pytest.fixture
def parallel_tasks():
    """A fans out to a long branch B and a short branch D; both feed C."""
    return [
        Task(id="a", title="Plan", start_date=day(1), end_date=day(6), duration=5),
        Task(id="b", title="Long branch", start_date=day(6), end_date=day(16), duration=10),
        Task(id="d", title="Short branch", start_date=day(6), end_date=day(11), duration=5),
        Task(id="c", title="Merge", start_date=day(16), end_date=day(19), duration=3),
    ]


@pytest.fixture
def parallel_dependencies():
    return [
        TaskDependency(id="ab", predecessor_id="a", successor_id="b"),
        TaskDependency(id="ad", predecessor_id="a", successor_id="d"),
        TaskDependency(id="bc", predecessor_id="b", successor_id="c"),
        TaskDependency(id="dc", predecessor_id="d", successor_id="c"),
    ]


@pytest.fixture
def cyclic_tasks():
    return [
        Task(id="a", title="A", start_date=day(1), end_date=day(2), duration=1),
        Task(id="b", title="B", start_date=day(2), end_date=day(3), duration=1),
        Task(id="c", title="C", start_date=day(3), end_date=day(4), duration=1),
    ]


@pytest.fixture
def cyclic_dependencies():
    """A -> B -> C -> A, all finish-to-start."""
    return [
        TaskDependency(id="ab", predecessor_id="a", successor_id="b"),
        TaskDependency(id="bc", predecessor_id="b", successor_id="c"),
        TaskDependency(id="ca", predecessor_id="c", successor_id="a"),
    ]
