"""Scheduling engine: propagation, critical path, validation."""

from schedule_mcp.engine.critical_path import (
    annotate_tasks,
    calculate_schedule_efficiency,
    compute_critical_path,
    find_bottleneck_tasks,
)
from schedule_mcp.engine.graph import (
    ScheduleGraph,
    find_cycle,
    get_dependency_chains,
    topological_order,
    would_create_cycle,
)
from schedule_mcp.engine.leveling import ResourceLeveler, apply_resource_leveling
from schedule_mcp.engine.propagation import (
    apply_date_updates,
    iter_propagation,
    plan_propagation,
    propagate_schedule,
    successor_dates,
)
from schedule_mcp.engine.validation import validate_schedule

__all__ = [
    # Graph
    "ScheduleGraph",
    "find_cycle",
    "topological_order",
    "get_dependency_chains",
    "would_create_cycle",
    # Propagation
    "successor_dates",
    "iter_propagation",
    "plan_propagation",
    "propagate_schedule",
    "apply_date_updates",
    # Critical path
    "compute_critical_path",
    "annotate_tasks",
    "find_bottleneck_tasks",
    "calculate_schedule_efficiency",
    # Validation
    "validate_schedule",
    # Resource leveling
    "ResourceLeveler",
    "apply_resource_leveling",
]
