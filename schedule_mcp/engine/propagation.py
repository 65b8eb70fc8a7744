"""
Schedule propagation.

Cascades one task's date change along outgoing dependencies. The traversal is
a pure generator of ``DateUpdate`` commands; ``propagate_schedule`` is the thin
async executor that hands each command to the host's mutation callback, one
at a time and in order.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator

from schedule_mcp.engine.graph import ScheduleGraph, find_cycle
from schedule_mcp.enums import DependencyType, ErrorKind
from schedule_mcp.errors import PropagationError
from schedule_mcp.models.results import DateUpdate
from schedule_mcp.models.task import DateFields, Task, TaskDependency
from schedule_mcp.utils.dates import add_days
from schedule_mcp.utils.logger import get_logger
from schedule_mcp.utils.parsers import (
    DependencyLike,
    TaskLike,
    _index_tasks,
    _parse_dependencies,
    _parse_task,
    _parse_tasks,
)

logger = get_logger(__name__)

ApplyUpdate = Callable[[str, DateFields], Awaitable[None]]


def successor_dates(dependency: TaskDependency, predecessor: Task, successor: Task) -> DateFields | None:
    """
    Dates the successor must take to satisfy one dependency.

    The date pinned by the constraint comes from the predecessor plus lag; the
    other one is derived from the successor's own duration.

    Returns:
        New dates, or None when the predecessor lacks a start or end date
    """
    if predecessor.start_date is None or predecessor.end_date is None:
        return None

    lag = dependency.lag
    duration = successor.duration_days

    if dependency.type == DependencyType.FS:
        start = add_days(predecessor.end_date, lag)
        end = add_days(start, duration)
    elif dependency.type == DependencyType.SS:
        start = add_days(predecessor.start_date, lag)
        end = add_days(start, duration)
    elif dependency.type == DependencyType.FF:
        end = add_days(predecessor.end_date, lag)
        start = add_days(end, -duration)
    else:  # SF
        end = add_days(predecessor.start_date, lag)
        start = add_days(end, -duration)

    return DateFields(start_date=start, end_date=end)


def _prepare(
    changed_task_id: str,
    updated_task: TaskLike,
    tasks: Iterable[TaskLike],
    dependencies: Iterable[DependencyLike],
) -> tuple[Task, dict[str, Task], ScheduleGraph]:
    by_id = _index_tasks(_parse_tasks(tasks))
    if changed_task_id not in by_id:
        raise PropagationError(
            ErrorKind.UNKNOWN_TASK,
            f"Task '{changed_task_id}' is not part of the task snapshot",
            task_id=changed_task_id,
        )
    root = _parse_task(updated_task)
    by_id[changed_task_id] = root
    graph = ScheduleGraph.build(by_id.values(), _parse_dependencies(dependencies))

    cycle = find_cycle(graph, roots=[changed_task_id])
    if cycle:
        raise PropagationError(
            ErrorKind.CYCLE_SUSPECTED,
            f"Circular dependency reachable from '{changed_task_id}': {' -> '.join(cycle + [cycle[0]])}",
            task_id=cycle[0],
        )
    return root, by_id, graph


def _walk(changed_task_id: str, root: Task, by_id: dict[str, Task], graph: ScheduleGraph) -> Iterator[DateUpdate]:
    visited = {changed_task_id}

    # Explicit stack of (dependency, anchor task, depth); pushed in reverse so
    # dependencies are handled in the order they were supplied.
    stack = [(dep, root, 1) for dep in reversed(graph.successors(changed_task_id))]

    while stack:
        dep, anchor, depth = stack.pop()
        successor_id = dep.successor_id
        if successor_id in visited:
            logger.debug("Skipping %s via %s: already updated in this pass", successor_id, dep.id)
            continue

        successor = by_id[successor_id]
        fields = successor_dates(dep, anchor, successor)
        if fields is None:
            logger.debug("Skipping %s via %s: predecessor %s has no dates", successor_id, dep.id, anchor.id)
            continue

        visited.add(successor_id)
        logger.debug(
            "%s %s -> %s: %s..%s (depth %d)",
            dep.type.value,
            dep.predecessor_id,
            successor_id,
            fields.start_date.isoformat(),
            fields.end_date.isoformat(),
            depth,
        )
        yield DateUpdate(task_id=successor_id, fields=fields, dependency_id=dep.id, depth=depth)

        moved = successor.model_copy(update={"start_date": fields.start_date, "end_date": fields.end_date})
        stack.extend((d, moved, depth + 1) for d in reversed(graph.successors(successor_id)))


def iter_propagation(
    changed_task_id: str,
    updated_task: TaskLike,
    tasks: Iterable[TaskLike],
    dependencies: Iterable[DependencyLike],
) -> Iterator[DateUpdate]:
    """
    Lazily yield the date updates caused by a change to one task.

    The changed task is not yielded. Each downstream task is updated at most
    once per pass: the first value that reaches it wins. The snapshot is
    checked before the first update is yielded.

    Raises:
        PropagationError: UNKNOWN_TASK if the changed task is not in the
            snapshot, CYCLE_SUSPECTED if a cycle is reachable from it
    """
    root, by_id, graph = _prepare(changed_task_id, updated_task, tasks, dependencies)
    yield from _walk(changed_task_id, root, by_id, graph)


def plan_propagation(
    changed_task_id: str,
    updated_task: TaskLike,
    tasks: Iterable[TaskLike],
    dependencies: Iterable[DependencyLike],
) -> list[DateUpdate]:
    """
    Compute every date update for a change before anything is applied.

    Raises:
        PropagationError: CYCLE_SUSPECTED or UNKNOWN_TASK
    """
    return list(iter_propagation(changed_task_id, updated_task, tasks, dependencies))


async def propagate_schedule(
    changed_task_id: str,
    updated_task: TaskLike,
    tasks: Iterable[TaskLike],
    dependencies: Iterable[DependencyLike],
    apply_update: ApplyUpdate,
) -> list[DateUpdate]:
    """
    Propagate a task's new dates to all downstream tasks.

    Each update is awaited before the next one is sent, so a successor always
    sees its predecessor's committed state. If ``apply_update`` raises, no
    further updates are sent and the exception propagates; updates already
    applied stay applied.

    Args:
        changed_task_id: Id of the task whose dates changed
        updated_task: The task with its new dates
        tasks: Snapshot of every task in the project
        dependencies: Snapshot of every dependency in the project
        apply_update: Async callback persisting ``(task_id, DateFields)``

    Returns:
        The updates that were applied, in order
    """
    updates = plan_propagation(changed_task_id, updated_task, tasks, dependencies)
    applied: list[DateUpdate] = []

    for update in updates:
        try:
            await apply_update(update.task_id, update.fields)
        except Exception:
            logger.error(
                "apply_update failed for task %s (%d of %d updates applied)",
                update.task_id,
                len(applied),
                len(updates),
            )
            raise
        applied.append(update)

    logger.info("Propagated change to %s across %d task(s)", changed_task_id, len(applied))
    return applied


def apply_date_updates(tasks: Iterable[TaskLike], updates: Iterable[DateUpdate]) -> list[Task]:
    """Return a new task list with ``updates`` applied; the input is left untouched."""
    by_task = {u.task_id: u.fields for u in updates}
    result: list[Task] = []
    for task in _parse_tasks(tasks):
        fields = by_task.get(task.id)
        if fields is None:
            result.append(task)
        else:
            result.append(task.model_copy(update={"start_date": fields.start_date, "end_date": fields.end_date}))
    return result
