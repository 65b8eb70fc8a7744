"""Core MCP tool definitions for the scheduling engine."""

import json

from mcp.types import ToolAnnotations

from schedule_mcp.engine.critical_path import annotate_tasks, compute_critical_path
from schedule_mcp.engine.propagation import plan_propagation
from schedule_mcp.engine.validation import validate_schedule
from schedule_mcp.enums import ResponseFormat
from schedule_mcp.errors import CriticalPathError, SchedulingError
from schedule_mcp.models.inputs import CriticalPathInput, PropagateInput, ValidateInput
from schedule_mcp.server import mcp
from schedule_mcp.utils.formatters import (
    _format_critical_path_concise,
    _format_critical_path_markdown,
    _format_updates_concise,
    _format_updates_markdown,
    _format_validation_concise,
    _format_validation_markdown,
)
from schedule_mcp.utils.logger import get_logger
from schedule_mcp.utils.parsers import _index_tasks

logger = get_logger(__name__)


@mcp.tool(
    name="schedule_propagate",
    annotations=ToolAnnotations(
        title="Preview Date Propagation",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_propagate(params: PropagateInput) -> str:
    """
    Preview how a change to one task's dates cascades through its dependencies.

    USE THIS WHEN:
    - A task was moved or resized and you need the new dates of everything downstream
    - Checking the impact of a proposed date change before committing it

    DO NOT USE WHEN:
    - You want slack/critical tasks → use schedule_critical_path
    - You want to check a schedule for errors → use schedule_validate

    DEPENDENCY TYPES:
    - FS: successor starts at predecessor end + lag
    - SS: successor starts at predecessor start + lag
    - FF: successor ends at predecessor end + lag
    - SF: successor ends at predecessor start + lag

    Args:
        params: PropagateInput with the snapshot, the changed task id and its new dates

    Returns:
        The date updates that would be applied, in application order

    Examples:
        - Move task "a" to end on 2024-01-15: task_id="a", updated_task={"id": "a", "startDate": ..., "endDate": "2024-01-15"}
    """
    try:
        updates = plan_propagation(params.task_id, params.updated_task, params.tasks, params.dependencies)
    except SchedulingError as e:
        return f"Error: {e}"

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"task_id": params.task_id, "count": len(updates), "updates": [u.model_dump(mode="json") for u in updates]},
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return _format_updates_concise(updates)

    return _format_updates_markdown(params.task_id, updates, _index_tasks(params.tasks))


@mcp.tool(
    name="schedule_critical_path",
    annotations=ToolAnnotations(
        title="Critical Path",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_critical_path(params: CriticalPathInput) -> str:
    """
    Compute total float for every task and the set of critical tasks (CPM).

    USE THIS WHEN:
    - Finding which tasks cannot slip without delaying the project
    - Getting earliest/latest start and finish dates per task

    DO NOT USE WHEN:
    - You only want near-critical tasks → use schedule_bottlenecks
    - You want a risk summary → use schedule_efficiency

    Args:
        params: CriticalPathInput with the snapshot and critical_only flag

    Returns:
        Float and ES/EF/LS/LF per task, critical tasks marked
    """
    try:
        result = compute_critical_path(params.tasks, params.dependencies)
    except CriticalPathError as e:
        return f"Error: {e}\nTip: Use schedule_validate to locate the circular dependency."

    if params.response_format == ResponseFormat.JSON:
        schedules = [result.schedules[t] for t in result.order]
        if params.critical_only:
            schedules = [s for s in schedules if s.is_critical]
        return json.dumps(
            {
                "critical_task_ids": sorted(result.critical_task_ids),
                "float_by_task": result.float_by_task,
                "project_duration": result.project_duration,
                "schedules": [s.model_dump(mode="json") for s in schedules],
            },
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return _format_critical_path_concise(result)

    return _format_critical_path_markdown(result, _index_tasks(params.tasks), params.critical_only)


@mcp.tool(
    name="schedule_validate",
    annotations=ToolAnnotations(
        title="Validate Schedule",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_validate(params: ValidateInput) -> str:
    """
    Check a schedule for structural errors and warnings.

    USE THIS WHEN:
    - Before committing a set of date changes
    - After a propagation failed part way, to surface any inconsistency

    CHECKS:
    - Errors: circular_dependency, negative_float (missed due date), date_conflict
      (FS successor starts before predecessor ends), invalid_reference, self_dependency
    - Warnings: tight_schedule (float under 1 day), duplicate_dependency,
      redundant_dependency, unusual_lag

    Args:
        params: ValidateInput with the snapshot and annotate_float flag

    Returns:
        Validation status with every error and warning
    """
    tasks = list(params.tasks)
    if params.annotate_float:
        try:
            tasks = annotate_tasks(tasks, compute_critical_path(tasks, params.dependencies))
        except CriticalPathError as e:
            # The validator reports the cycle itself.
            logger.debug("Skipping float annotation: %s", e)

    result = validate_schedule(tasks, params.dependencies)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(result.model_dump(mode="json"), indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        return _format_validation_concise(result)

    return _format_validation_markdown(result)
