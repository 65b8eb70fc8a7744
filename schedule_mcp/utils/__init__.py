"""Utility functions for Schedule MCP."""

from schedule_mcp.utils.formatters import (
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
)
from schedule_mcp.utils.parsers import _index_tasks, _parse_dependencies, _parse_task, _parse_tasks

__all__ = [
    "_parse_task",
    "_parse_tasks",
    "_parse_dependencies",
    "_index_tasks",
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
]
