"""Output models produced by the scheduling engine."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from schedule_mcp.enums import IssueType, ScheduleRisk
from schedule_mcp.models.task import DateFields


class DateUpdate(BaseModel):
    """One apply command emitted by the propagation traversal."""

    task_id: str
    fields: DateFields
    dependency_id: str
    depth: int = Field(..., ge=1, description="Hops from the changed task")


class ValidationIssue(BaseModel):
    """A single error or warning found by the validator."""

    type: IssueType
    message: str
    task_id: str | None = None
    dependency_id: str | None = None


class ValidationResult(BaseModel):
    """Aggregated validator output."""

    is_valid: bool
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)

    def issues_of(self, issue_type: IssueType) -> list[ValidationIssue]:
        """All errors and warnings of one type."""
        return [i for i in self.errors + self.warnings if i.type == issue_type]


class TaskSchedule(BaseModel):
    """CPM figures for one task."""

    task_id: str
    earliest_start: date
    earliest_finish: date
    latest_start: date
    latest_finish: date
    total_float: int
    is_critical: bool


class CriticalPathResult(BaseModel):
    """Result of a forward/backward CPM pass."""

    critical_task_ids: set[str] = Field(default_factory=set)
    float_by_task: dict[str, int] = Field(default_factory=dict)
    schedules: dict[str, TaskSchedule] = Field(default_factory=dict)
    order: list[str] = Field(default_factory=list, description="Topological order of task ids")
    project_duration: int = 0

    @property
    def critical_path_length(self) -> int:
        return len(self.critical_task_ids)

    @property
    def total_float(self) -> int:
        return sum(self.float_by_task.values())

    def critical_tasks_in_order(self) -> list[TaskSchedule]:
        """Critical task schedules sorted by earliest start, then topological position."""
        position = {task_id: i for i, task_id in enumerate(self.order)}
        critical = [self.schedules[t] for t in self.critical_task_ids if t in self.schedules]
        return sorted(critical, key=lambda s: (s.earliest_start, position.get(s.task_id, 0)))


class ScheduleEfficiency(BaseModel):
    """Summary figures describing how much slack a schedule carries."""

    critical_task_ratio: float
    average_float: float
    bottleneck_tasks: int
    schedule_risk: ScheduleRisk
