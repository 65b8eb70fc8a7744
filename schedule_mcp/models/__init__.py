"""Pydantic models for Schedule MCP."""

from schedule_mcp.models.inputs import (
    BottlenecksInput,
    CheckDependencyInput,
    CriticalPathInput,
    DependencyChainsInput,
    EfficiencyInput,
    PropagateInput,
    ScheduleSnapshotInput,
    ValidateInput,
)
from schedule_mcp.models.leveling import LevelingAdjustment, LevelingResult, ResourceAssignment
from schedule_mcp.models.results import (
    CriticalPathResult,
    DateUpdate,
    ScheduleEfficiency,
    TaskSchedule,
    ValidationIssue,
    ValidationResult,
)
from schedule_mcp.models.task import DateFields, Task, TaskDependency

__all__ = [
    # Task models
    "Task",
    "TaskDependency",
    "DateFields",
    # Result models
    "DateUpdate",
    "TaskSchedule",
    "CriticalPathResult",
    "ScheduleEfficiency",
    "ValidationIssue",
    "ValidationResult",
    # Resource leveling models
    "ResourceAssignment",
    "LevelingAdjustment",
    "LevelingResult",
    # Tool input models
    "ScheduleSnapshotInput",
    "PropagateInput",
    "CriticalPathInput",
    "ValidateInput",
    "BottlenecksInput",
    "EfficiencyInput",
    "DependencyChainsInput",
    "CheckDependencyInput",
]
