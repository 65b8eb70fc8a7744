"""Enums for Schedule MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # Minimal output for chaining
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class TaskStatus(str, Enum):
    """Lifecycle status of a scheduled task."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    COMPLETED = "COMPLETED"
    ON_HOLD = "ON_HOLD"


class DependencyType(str, Enum):
    """Precedence relation between a predecessor and a successor."""

    FS = "FS"  # Finish -> Start
    SS = "SS"  # Start -> Start
    FF = "FF"  # Finish -> Finish
    SF = "SF"  # Start -> Finish


class IssueType(str, Enum):
    """Kinds of diagnostics reported by the schedule validator."""

    # Errors
    CIRCULAR_DEPENDENCY = "circular_dependency"
    NEGATIVE_FLOAT = "negative_float"
    RESOURCE_CONFLICT = "resource_conflict"
    DATE_CONFLICT = "date_conflict"
    INVALID_REFERENCE = "invalid_reference"
    SELF_DEPENDENCY = "self_dependency"

    # Warnings
    TIGHT_SCHEDULE = "tight_schedule"
    RESOURCE_OVERLOAD = "resource_overload"
    DUPLICATE_DEPENDENCY = "duplicate_dependency"
    REDUNDANT_DEPENDENCY = "redundant_dependency"
    UNUSUAL_LAG = "unusual_lag"


class ErrorKind(str, Enum):
    """Structural failure kinds carried by engine exceptions."""

    CYCLE_SUSPECTED = "CycleSuspected"
    SELF_DEPENDENCY = "SelfDependency"
    INVALID_DATE_RANGE = "InvalidDateRange"
    UNKNOWN_TASK = "UnknownTask"


class ChainDirection(str, Enum):
    """Direction to walk when collecting dependency chains."""

    PREDECESSORS = "predecessors"
    SUCCESSORS = "successors"


class ScheduleRisk(str, Enum):
    """Coarse schedule risk rating."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
