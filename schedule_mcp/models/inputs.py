"""Input models for Schedule MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from schedule_mcp.enums import ChainDirection, ResponseFormat
from schedule_mcp.models.task import Task, TaskDependency

# ============================================================================
# Shared snapshot input
# ============================================================================


class ScheduleSnapshotInput(BaseModel):
    """Base input carrying a task/dependency snapshot."""

    model_config = ConfigDict(str_strip_whitespace=True)

    tasks: list[Task] = Field(..., description="Every task in the project (id, startDate, endDate, duration, ...)")
    dependencies: list[TaskDependency] = Field(
        default_factory=list,
        description="Every dependency (id, predecessorId, successorId, type FS/SS/FF/SF, lag, isActive)",
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable, 'json' for machine-readable, 'concise' for short",
    )


# ============================================================================
# Core Tool Input Models
# ============================================================================


class PropagateInput(ScheduleSnapshotInput):
    """Input model for a dry-run date propagation."""

    task_id: str = Field(..., description="ID of the task whose dates changed", min_length=1)
    updated_task: Task = Field(..., description="The changed task with its new start/end dates")

    @field_validator("task_id")
    @classmethod
    def validate_task_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Task ID cannot be empty")
        return v.strip()


class CriticalPathInput(ScheduleSnapshotInput):
    """Input model for the critical path calculation."""

    critical_only: bool = Field(default=False, description="Only list critical tasks")


class ValidateInput(ScheduleSnapshotInput):
    """Input model for schedule validation."""

    annotate_float: bool = Field(
        default=True,
        description="Compute float with CPM first so tight-schedule warnings can be reported",
    )


# ============================================================================
# Analysis Tool Input Models
# ============================================================================


class BottlenecksInput(ScheduleSnapshotInput):
    """Input model for near-critical task detection."""

    threshold: int | None = Field(
        default=None, description="Maximum float (days) for a task to count as a bottleneck", ge=0, le=365
    )


class EfficiencyInput(ScheduleSnapshotInput):
    """Input model for schedule efficiency metrics."""


class DependencyChainsInput(ScheduleSnapshotInput):
    """Input model for listing dependency chains of a task."""

    task_id: str = Field(..., description="Task to start the chains from", min_length=1)
    direction: ChainDirection = Field(
        default=ChainDirection.PREDECESSORS,
        description="'predecessors' walks what the task waits on, 'successors' what waits on it",
    )
    limit: int = Field(default=20, description="Maximum number of chains to return", ge=1, le=200)


class CheckDependencyInput(ScheduleSnapshotInput):
    """Input model for checking a proposed dependency before creating it."""

    dependency: TaskDependency = Field(..., description="The proposed dependency")
