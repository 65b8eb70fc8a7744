"""Parser helpers for task and dependency snapshots."""

from collections.abc import Iterable, Mapping
from typing import Any

from schedule_mcp.models.task import Task, TaskDependency

TaskLike = Task | Mapping[str, Any]
DependencyLike = TaskDependency | Mapping[str, Any]


def _parse_task(task: TaskLike) -> Task:
    """
    Parse a task snapshot into a Task.

    Args:
        task: Task instance or dictionary (camelCase or snake_case keys)

    Returns:
        Task instance with validated data
    """
    if isinstance(task, Task):
        return task
    return Task.model_validate(task)


def _parse_tasks(tasks: Iterable[TaskLike]) -> list[Task]:
    """
    Parse a sequence of task snapshots.

    Args:
        tasks: Task instances or dictionaries

    Returns:
        List of Task instances, in input order
    """
    return [_parse_task(t) for t in tasks]


def _parse_dependencies(dependencies: Iterable[DependencyLike]) -> list[TaskDependency]:
    """
    Parse a sequence of dependency snapshots.

    Raises:
        DependencyValidationError: if a dependency links a task to itself
    """
    return [d if isinstance(d, TaskDependency) else TaskDependency.model_validate(d) for d in dependencies]


def _index_tasks(tasks: Iterable[Task]) -> dict[str, Task]:
    """Map task id to task. Later duplicates replace earlier ones."""
    return {t.id: t for t in tasks}
