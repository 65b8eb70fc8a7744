"""
Critical Path Method (CPM).

Forward and backward passes over the active dependency graph in whole days,
producing per-task total float and the set of critical tasks.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from schedule_mcp.config import EngineSettings, get_settings
from schedule_mcp.engine.graph import ScheduleGraph, find_cycle, topological_order
from schedule_mcp.enums import DependencyType, ErrorKind, ScheduleRisk
from schedule_mcp.errors import CriticalPathError
from schedule_mcp.models.results import CriticalPathResult, ScheduleEfficiency, TaskSchedule
from schedule_mcp.models.task import Task, TaskDependency
from schedule_mcp.utils.dates import day_number, from_day_number
from schedule_mcp.utils.logger import get_logger
from schedule_mcp.utils.parsers import DependencyLike, TaskLike, _index_tasks, _parse_dependencies, _parse_tasks

logger = get_logger(__name__)

# Day zero when no task in the snapshot carries a start date.
EPOCH = date(1970, 1, 1)


def _earliest_start_via(
    dep: TaskDependency, es: dict[str, int], ef: dict[str, int], duration: int
) -> int:
    """Earliest start a successor may take under one incoming dependency."""
    pred = dep.predecessor_id
    if dep.type == DependencyType.FS:
        return ef[pred] + dep.lag
    if dep.type == DependencyType.SS:
        return es[pred] + dep.lag
    if dep.type == DependencyType.FF:
        return ef[pred] + dep.lag - duration
    return es[pred] + dep.lag - duration  # SF


def _latest_finish_via(
    dep: TaskDependency, ls: dict[str, int], lf: dict[str, int], duration: int
) -> int:
    """Latest finish a predecessor may take under one outgoing dependency."""
    succ = dep.successor_id
    if dep.type == DependencyType.FS:
        return ls[succ] - dep.lag
    if dep.type == DependencyType.SS:
        return ls[succ] - dep.lag + duration
    if dep.type == DependencyType.FF:
        return lf[succ] - dep.lag
    return lf[succ] - dep.lag + duration  # SF


def _fallback_start(tasks: Iterable[Task], project_start: date | None) -> int:
    if project_start is not None:
        return day_number(project_start)
    starts = [day_number(t.start_date) for t in tasks if t.start_date is not None]
    return min(starts) if starts else day_number(EPOCH)


def compute_critical_path(
    tasks: Iterable[TaskLike],
    dependencies: Iterable[DependencyLike],
    *,
    project_start: date | None = None,
    project_end: date | None = None,
) -> CriticalPathResult:
    """
    Run CPM over a task/dependency snapshot.

    Tasks without predecessors start at their own start date (falling back to
    ``project_start``, then to the earliest start in the snapshot). Tasks
    without successors must finish by their due date, else ``project_end``,
    else their own earliest finish.

    Args:
        tasks: Snapshot of every task
        dependencies: Snapshot of every dependency; inactive ones are ignored
        project_start: Optional start for tasks lacking one
        project_end: Optional finish ceiling for end tasks without a due date

    Returns:
        CriticalPathResult with float per task and the critical set

    Raises:
        CriticalPathError: CYCLE_SUSPECTED when the graph is not acyclic
    """
    by_id = _index_tasks(_parse_tasks(tasks))
    graph = ScheduleGraph.build(by_id.values(), _parse_dependencies(dependencies))

    order = topological_order(graph)
    if order is None:
        cycle = find_cycle(graph) or []
        raise CriticalPathError(
            ErrorKind.CYCLE_SUSPECTED,
            "Circular dependency detected: " + " -> ".join(cycle + cycle[:1]),
            task_id=cycle[0] if cycle else None,
        )
    if not order:
        return CriticalPathResult()

    # Forward pass
    default_start = _fallback_start(by_id.values(), project_start)
    es: dict[str, int] = {}
    ef: dict[str, int] = {}
    for task_id in order:
        task = by_id[task_id]
        duration = task.duration_days
        incoming = graph.predecessors(task_id)
        if incoming:
            es[task_id] = max(_earliest_start_via(dep, es, ef, duration) for dep in incoming)
        elif task.start_date is not None:
            es[task_id] = day_number(task.start_date)
        else:
            es[task_id] = default_start
        ef[task_id] = es[task_id] + duration

    # Backward pass
    ceiling = day_number(project_end) if project_end is not None else None
    ls: dict[str, int] = {}
    lf: dict[str, int] = {}
    for task_id in reversed(order):
        task = by_id[task_id]
        duration = task.duration_days
        outgoing = graph.successors(task_id)
        if outgoing:
            lf[task_id] = min(_latest_finish_via(dep, ls, lf, duration) for dep in outgoing)
        elif task.due_date is not None:
            lf[task_id] = day_number(task.due_date)
        elif ceiling is not None:
            lf[task_id] = ceiling
        else:
            lf[task_id] = ef[task_id]
        ls[task_id] = lf[task_id] - duration

    schedules: dict[str, TaskSchedule] = {}
    float_by_task: dict[str, int] = {}
    critical: set[str] = set()
    for task_id in order:
        total_float = ls[task_id] - es[task_id]
        is_critical = total_float <= 0
        float_by_task[task_id] = total_float
        if is_critical:
            critical.add(task_id)
        schedules[task_id] = TaskSchedule(
            task_id=task_id,
            earliest_start=from_day_number(es[task_id]),
            earliest_finish=from_day_number(ef[task_id]),
            latest_start=from_day_number(ls[task_id]),
            latest_finish=from_day_number(lf[task_id]),
            total_float=total_float,
            is_critical=is_critical,
        )

    result = CriticalPathResult(
        critical_task_ids=critical,
        float_by_task=float_by_task,
        schedules=schedules,
        order=order,
        project_duration=max(ef.values()) - min(es.values()),
    )
    logger.info(
        "CPM over %d task(s), %d edge(s): %d critical, duration %d day(s)",
        len(order),
        graph.edge_count,
        len(critical),
        result.project_duration,
    )
    return result


def annotate_tasks(tasks: Iterable[TaskLike], result: CriticalPathResult) -> list[Task]:
    """Copies of ``tasks`` with ``total_float`` and ``is_critical`` filled in from ``result``."""
    annotated: list[Task] = []
    for task in _parse_tasks(tasks):
        if task.id in result.float_by_task:
            task = task.model_copy(
                update={
                    "total_float": float(result.float_by_task[task.id]),
                    "is_critical": task.id in result.critical_task_ids,
                }
            )
        annotated.append(task)
    return annotated


def find_bottleneck_tasks(
    tasks: Iterable[TaskLike],
    dependencies: Iterable[DependencyLike],
    threshold: int | None = None,
    *,
    settings: EngineSettings | None = None,
) -> list[Task]:
    """
    Tasks that are not critical but have little float left.

    Returns:
        Annotated tasks with ``0 < float <= threshold``, least float first
    """
    if threshold is None:
        threshold = (settings or get_settings()).bottleneck_threshold_days
    task_list = _parse_tasks(tasks)
    result = compute_critical_path(task_list, dependencies)
    annotated = annotate_tasks(task_list, result)
    bottlenecks = [t for t in annotated if t.total_float is not None and 0 < t.total_float <= threshold]
    return sorted(bottlenecks, key=lambda t: t.total_float or 0.0)


def calculate_schedule_efficiency(
    tasks: Iterable[TaskLike],
    dependencies: Iterable[DependencyLike],
    *,
    settings: EngineSettings | None = None,
) -> ScheduleEfficiency:
    """Summarise how much of a schedule is critical or nearly so."""
    threshold = (settings or get_settings()).bottleneck_threshold_days
    result = compute_critical_path(tasks, dependencies)
    floats = list(result.float_by_task.values())
    if not floats:
        return ScheduleEfficiency(
            critical_task_ratio=0.0, average_float=0.0, bottleneck_tasks=0, schedule_risk=ScheduleRisk.LOW
        )

    count = len(floats)
    ratio = result.critical_path_length / count
    bottlenecks = len([f for f in floats if 0 < f <= threshold])

    if ratio > 0.7 or bottlenecks > count * 0.3:
        risk = ScheduleRisk.HIGH
    elif ratio > 0.5 or bottlenecks > count * 0.2:
        risk = ScheduleRisk.MEDIUM
    else:
        risk = ScheduleRisk.LOW

    return ScheduleEfficiency(
        critical_task_ratio=ratio,
        average_float=sum(floats) / count,
        bottleneck_tasks=bottlenecks,
        schedule_risk=risk,
    )
