"""MCP tool definitions for Schedule MCP."""

# Import all tools to register them with the MCP server
from schedule_mcp.tools.analysis import (
    schedule_bottlenecks,
    schedule_check_dependency,
    schedule_dependency_chains,
    schedule_efficiency,
)
from schedule_mcp.tools.core import (
    schedule_critical_path,
    schedule_propagate,
    schedule_validate,
)

__all__ = [
    # Core tools
    "schedule_propagate",
    "schedule_critical_path",
    "schedule_validate",
    # Analysis tools
    "schedule_bottlenecks",
    "schedule_efficiency",
    "schedule_dependency_chains",
    "schedule_check_dependency",
]
