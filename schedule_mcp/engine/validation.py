"""
Schedule validation.

Independent, read-only checks over a task/dependency snapshot. Each check
returns ``ValidationIssue`` records; ``validate_schedule`` runs them all and
splits the findings into errors and warnings. Nothing here raises for a bad
schedule and nothing mutates its inputs.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from schedule_mcp.config import EngineSettings, get_settings
from schedule_mcp.engine.graph import ScheduleGraph, find_cycle
from schedule_mcp.enums import DependencyType, IssueType
from schedule_mcp.models.results import ValidationIssue, ValidationResult
from schedule_mcp.models.task import Task, TaskDependency
from schedule_mcp.utils.logger import get_logger
from schedule_mcp.utils.parsers import DependencyLike, TaskLike, _index_tasks, _parse_dependencies, _parse_tasks

logger = get_logger(__name__)

WARNING_TYPES = frozenset(
    {
        IssueType.TIGHT_SCHEDULE,
        IssueType.RESOURCE_OVERLOAD,
        IssueType.DUPLICATE_DEPENDENCY,
        IssueType.REDUNDANT_DEPENDENCY,
        IssueType.UNUSUAL_LAG,
    }
)


def check_references(tasks: list[Task], dependencies: list[TaskDependency]) -> list[ValidationIssue]:
    """Dependencies pointing at tasks missing from the snapshot."""
    task_ids = {t.id for t in tasks}
    issues: list[ValidationIssue] = []
    for dep in dependencies:
        for role, task_id in (("predecessor", dep.predecessor_id), ("successor", dep.successor_id)):
            if task_id not in task_ids:
                issues.append(
                    ValidationIssue(
                        type=IssueType.INVALID_REFERENCE,
                        message=f"Dependency {dep.id}: invalid {role} task ID '{task_id}'",
                        task_id=task_id,
                        dependency_id=dep.id,
                    )
                )
    return issues


def check_self_dependencies(dependencies: list[TaskDependency]) -> list[ValidationIssue]:
    """Self-loops that slipped past model validation (e.g. built with ``model_construct``)."""
    return [
        ValidationIssue(
            type=IssueType.SELF_DEPENDENCY,
            message=f"Dependency {dep.id}: task '{dep.predecessor_id}' cannot depend on itself",
            task_id=dep.predecessor_id,
            dependency_id=dep.id,
        )
        for dep in dependencies
        if dep.predecessor_id == dep.successor_id
    ]


def check_circular_dependencies(tasks: list[Task], dependencies: list[TaskDependency]) -> list[ValidationIssue]:
    """At most one error for the first cycle found among active dependencies."""
    graph = ScheduleGraph.build(tasks, dependencies)
    cycle = find_cycle(graph)
    if not cycle:
        return []
    return [
        ValidationIssue(
            type=IssueType.CIRCULAR_DEPENDENCY,
            message="Circular dependency detected in the schedule: " + " -> ".join(cycle + cycle[:1]),
            task_id=cycle[0],
        )
    ]


def check_deadlines(tasks: list[Task], settings: EngineSettings) -> list[ValidationIssue]:
    """Missed due dates (errors) and tasks with almost no float (warnings)."""
    issues: list[ValidationIssue] = []
    for task in tasks:
        if task.end_date is not None and task.due_date is not None and task.end_date > task.due_date:
            issues.append(
                ValidationIssue(
                    type=IssueType.NEGATIVE_FLOAT,
                    message=f'Task "{task.label}" cannot be completed by its due date',
                    task_id=task.id,
                )
            )

        if task.total_float is not None and task.total_float < settings.tight_schedule_threshold_days:
            issues.append(
                ValidationIssue(
                    type=IssueType.TIGHT_SCHEDULE,
                    message=f'Task "{task.label}" has very little schedule flexibility ({task.total_float:g} days)',
                    task_id=task.id,
                )
            )
    return issues


def check_date_conflicts(tasks: list[Task], dependencies: list[TaskDependency]) -> list[ValidationIssue]:
    """Active FS dependencies whose successor starts before the predecessor ends."""
    by_id = _index_tasks(tasks)
    issues: list[ValidationIssue] = []
    for dep in dependencies:
        if not dep.is_active or dep.type != DependencyType.FS:
            continue
        predecessor = by_id.get(dep.predecessor_id)
        successor = by_id.get(dep.successor_id)
        if predecessor is None or successor is None:
            continue
        if predecessor.end_date is None or successor.start_date is None:
            continue
        if successor.start_date < predecessor.end_date:
            issues.append(
                ValidationIssue(
                    type=IssueType.DATE_CONFLICT,
                    message=f'Task "{successor.label}" starts before "{predecessor.label}" finishes',
                    task_id=successor.id,
                    dependency_id=dep.id,
                )
            )
    return issues


def check_duplicates(dependencies: list[TaskDependency]) -> list[ValidationIssue]:
    """Repeated dependencies and task pairs linked by several dependency types."""
    issues: list[ValidationIssue] = []
    seen: set[tuple[str, str, DependencyType]] = set()
    types_by_pair: dict[tuple[str, str], set[DependencyType]] = defaultdict(set)

    active = [d for d in dependencies if d.is_active]
    for dep in active:
        types_by_pair[(dep.predecessor_id, dep.successor_id)].add(dep.type)

    for dep in active:
        key = (dep.predecessor_id, dep.successor_id, dep.type)
        if key in seen:
            issues.append(
                ValidationIssue(
                    type=IssueType.DUPLICATE_DEPENDENCY,
                    message=(
                        f"Dependency {dep.id}: duplicate {dep.type.value} dependency between "
                        f"tasks {dep.predecessor_id} and {dep.successor_id}"
                    ),
                    dependency_id=dep.id,
                )
            )
            continue
        seen.add(key)
        if len(types_by_pair[(dep.predecessor_id, dep.successor_id)]) > 1:
            issues.append(
                ValidationIssue(
                    type=IssueType.REDUNDANT_DEPENDENCY,
                    message=f"Dependency {dep.id}: multiple dependencies between same tasks may be redundant",
                    dependency_id=dep.id,
                )
            )
    return issues


def check_lag_values(dependencies: list[TaskDependency], settings: EngineSettings) -> list[ValidationIssue]:
    """Lags or leads larger than the configured bound."""
    limit = settings.unusual_lag_days
    return [
        ValidationIssue(
            type=IssueType.UNUSUAL_LAG,
            message=f"Dependency {dep.id}: unusual lag value {dep.lag} days. Consider reviewing.",
            dependency_id=dep.id,
        )
        for dep in dependencies
        if abs(dep.lag) > limit
    ]


def validate_schedule(
    tasks: Iterable[TaskLike],
    dependencies: Iterable[DependencyLike],
    *,
    settings: EngineSettings | None = None,
) -> ValidationResult:
    """
    Run every schedule check and aggregate the findings.

    Args:
        tasks: Snapshot of every task (``total_float`` is read if present)
        dependencies: Snapshot of every dependency
        settings: Optional settings override

    Returns:
        ValidationResult; ``is_valid`` is True when there are no errors
    """
    settings = settings or get_settings()
    task_list = _parse_tasks(tasks)
    dep_list = _parse_dependencies(dependencies)

    findings: list[ValidationIssue] = []
    findings += check_references(task_list, dep_list)
    findings += check_self_dependencies(dep_list)
    findings += check_circular_dependencies(task_list, dep_list)
    findings += check_deadlines(task_list, settings)
    findings += check_date_conflicts(task_list, dep_list)
    findings += check_duplicates(dep_list)
    findings += check_lag_values(dep_list, settings)

    errors = [f for f in findings if f.type not in WARNING_TYPES]
    warnings = [f for f in findings if f.type in WARNING_TYPES]
    logger.debug("Validated %d task(s): %d error(s), %d warning(s)", len(task_list), len(errors), len(warnings))
    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
