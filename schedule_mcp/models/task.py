"""Core task and dependency models for Schedule MCP."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from schedule_mcp.enums import DependencyType, ErrorKind, TaskStatus
from schedule_mcp.errors import DependencyValidationError


def _coerce_datetime(value: Any) -> Any:
    """Accept plain dates and YYYY-MM-DD strings as midnight datetimes."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and len(value) == 10:
        try:
            parsed = date.fromisoformat(value)
        except ValueError:
            return value
        return datetime(parsed.year, parsed.month, parsed.day)
    return value


def _to_naive_utc(value: datetime | None) -> datetime | None:
    """Offset-aware timestamps become naive UTC so every snapshot date compares."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


# Snapshots arrive from the host application in camelCase; Python code uses snake_case.
SNAPSHOT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class Task(BaseModel):
    """Model representing one scheduled task as seen by the engine."""

    model_config = SNAPSHOT_CONFIG

    id: str = Field(..., min_length=1)
    title: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    duration: int | None = Field(default=None, ge=0, description="Planned duration in days")
    due_date: datetime | None = None
    status: TaskStatus = TaskStatus.TODO
    is_milestone: bool = False
    total_float: float | None = Field(default=None, alias="float", description="Days of slack")
    is_critical: bool | None = None
    project_id: str | None = None

    @field_validator("start_date", "end_date", "due_date", mode="before")
    @classmethod
    def _coerce_dates(cls, v: Any) -> Any:
        return _coerce_datetime(v)

    @field_validator("start_date", "end_date", "due_date")
    @classmethod
    def _normalize_dates(cls, v: datetime | None) -> datetime | None:
        return _to_naive_utc(v)

    @model_validator(mode="after")
    def _check_date_order(self) -> Task:
        if self.start_date is not None and self.end_date is not None and self.end_date < self.start_date:
            raise DependencyValidationError(
                ErrorKind.INVALID_DATE_RANGE,
                f"Task '{self.id}' ends ({self.end_date.isoformat()}) before it starts "
                f"({self.start_date.isoformat()})",
                task_id=self.id,
            )
        return self

    @property
    def duration_days(self) -> int:
        """Duration used for scheduling: stored value, else the date span, else a default."""
        if self.duration is not None:
            return self.duration
        if self.start_date is not None and self.end_date is not None:
            return (self.end_date - self.start_date).days
        return 0 if self.is_milestone else 1

    @property
    def label(self) -> str:
        return self.title or self.id


class TaskDependency(BaseModel):
    """A typed precedence constraint between two tasks."""

    model_config = SNAPSHOT_CONFIG

    id: str = Field(..., min_length=1)
    predecessor_id: str = Field(..., min_length=1)
    successor_id: str = Field(..., min_length=1)
    type: DependencyType = DependencyType.FS
    lag: int = Field(default=0, description="Signed day offset; negative values are leads")
    is_active: bool = True

    @model_validator(mode="after")
    def _reject_self_loop(self) -> TaskDependency:
        if self.predecessor_id == self.successor_id:
            raise DependencyValidationError(
                ErrorKind.SELF_DEPENDENCY,
                f"Dependency '{self.id}': task '{self.predecessor_id}' cannot depend on itself",
                task_id=self.predecessor_id,
            )
        return self


class DateFields(BaseModel):
    """Date payload handed to the task-mutation callback."""

    model_config = SNAPSHOT_CONFIG

    start_date: datetime
    end_date: datetime

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _coerce_dates(cls, v: Any) -> Any:
        return _coerce_datetime(v)

    @field_validator("start_date", "end_date")
    @classmethod
    def _normalize_dates(cls, v: datetime) -> datetime:
        return _to_naive_utc(v)
