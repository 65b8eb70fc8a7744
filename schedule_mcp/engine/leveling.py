"""Boundary to the external resource leveling service."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Protocol

from schedule_mcp.models.leveling import LevelingResult
from schedule_mcp.models.task import Task
from schedule_mcp.utils.logger import get_logger
from schedule_mcp.utils.parsers import TaskLike, _parse_tasks

logger = get_logger(__name__)

UpdateAllocation = Callable[[str, float], Awaitable[None]]


class ResourceLeveler(Protocol):
    """Host-provided resource service."""

    async def perform_resource_leveling(self, project_id: str, tasks: list[Task]) -> LevelingResult:
        raise NotImplementedError


async def apply_resource_leveling(
    project_id: str,
    tasks: Iterable[TaskLike],
    leveler: ResourceLeveler,
    update_allocation: UpdateAllocation,
) -> LevelingResult:
    """
    Ask the leveling service for adjustments and apply them in order.

    Service and callback failures propagate unchanged; adjustments applied
    before a failure are not undone.

    Args:
        project_id: Project whose resources are leveled
        tasks: Snapshot of the project's tasks
        leveler: External leveling service
        update_allocation: Async callback persisting ``(assignment_id, new_allocation)``

    Returns:
        The service's LevelingResult
    """
    result = await leveler.perform_resource_leveling(project_id, _parse_tasks(tasks))

    for adjustment in result.adjustments:
        assignment_id = adjustment.original_assignment.id
        logger.debug(
            "Leveling %s: %.1f%% -> %.1f%% (%s)",
            assignment_id,
            adjustment.original_assignment.allocation_percentage,
            adjustment.new_allocation,
            adjustment.reason,
        )
        await update_allocation(assignment_id, adjustment.new_allocation)

    logger.info("Applied %d leveling adjustment(s) for project %s", len(result.adjustments), project_id)
    return result
