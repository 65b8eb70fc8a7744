"""
Schedule MCP.

A dependency-driven scheduling engine: propagates date changes along FS/SS/FF/SF
dependencies, computes float and the critical path, and validates schedules.
The engine is exposed both as a Python library and as read-only MCP tools.
"""

# Re-export enums
from schedule_mcp.enums import (
    ChainDirection,
    DependencyType,
    ErrorKind,
    IssueType,
    ResponseFormat,
    ScheduleRisk,
    TaskStatus,
)

# Re-export errors and configuration
from schedule_mcp.errors import (
    CriticalPathError,
    DependencyValidationError,
    PropagationError,
    SchedulingError,
)
from schedule_mcp.config import EngineSettings, get_settings

# Re-export models
from schedule_mcp.models import (
    BottlenecksInput,
    CheckDependencyInput,
    CriticalPathInput,
    CriticalPathResult,
    DateFields,
    DateUpdate,
    DependencyChainsInput,
    EfficiencyInput,
    LevelingAdjustment,
    LevelingResult,
    PropagateInput,
    ResourceAssignment,
    ScheduleEfficiency,
    ScheduleSnapshotInput,
    Task,
    TaskDependency,
    TaskSchedule,
    ValidateInput,
    ValidationIssue,
    ValidationResult,
)

# Re-export engine
from schedule_mcp.engine import (
    ResourceLeveler,
    ScheduleGraph,
    annotate_tasks,
    apply_date_updates,
    apply_resource_leveling,
    calculate_schedule_efficiency,
    compute_critical_path,
    find_bottleneck_tasks,
    find_cycle,
    get_dependency_chains,
    iter_propagation,
    plan_propagation,
    propagate_schedule,
    successor_dates,
    topological_order,
    validate_schedule,
    would_create_cycle,
)

# Re-export MCP server instance
from schedule_mcp.server import mcp

# Re-export tools
from schedule_mcp.tools import (
    schedule_bottlenecks,
    schedule_check_dependency,
    schedule_critical_path,
    schedule_dependency_chains,
    schedule_efficiency,
    schedule_propagate,
    schedule_validate,
)

# Re-export utilities (including private functions used by tests)
from schedule_mcp.utils import (
    _format_critical_path_concise,
    _format_critical_path_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _format_updates_concise,
    _format_updates_markdown,
    _format_validation_concise,
    _format_validation_markdown,
    _parse_dependencies,
    _parse_task,
    _parse_tasks,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "TaskStatus",
    "DependencyType",
    "IssueType",
    "ErrorKind",
    "ChainDirection",
    "ScheduleRisk",
    # Errors
    "SchedulingError",
    "DependencyValidationError",
    "PropagationError",
    "CriticalPathError",
    # Configuration
    "EngineSettings",
    "get_settings",
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
    # Engine
    "ScheduleGraph",
    "find_cycle",
    "topological_order",
    "get_dependency_chains",
    "would_create_cycle",
    "successor_dates",
    "iter_propagation",
    "plan_propagation",
    "propagate_schedule",
    "apply_date_updates",
    "compute_critical_path",
    "annotate_tasks",
    "find_bottleneck_tasks",
    "calculate_schedule_efficiency",
    "validate_schedule",
    "ResourceLeveler",
    "apply_resource_leveling",
    # Utility functions
    "_parse_task",
    "_parse_tasks",
    "_parse_dependencies",
    "_format_task_concise",
    "_format_tasks_concise",
    "_format_task_markdown",
    "_format_tasks_markdown",
    "_format_updates_markdown",
    "_format_updates_concise",
    "_format_critical_path_markdown",
    "_format_critical_path_concise",
    "_format_validation_markdown",
    "_format_validation_concise",
    # Core tools
    "schedule_propagate",
    "schedule_critical_path",
    "schedule_validate",
    # Analysis tools
    "schedule_bottlenecks",
    "schedule_efficiency",
    "schedule_dependency_chains",
    "schedule_check_dependency",
    # MCP server instance
    "mcp",
]
