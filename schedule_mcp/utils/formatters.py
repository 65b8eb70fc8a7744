"""Formatting utilities for schedule output."""

from schedule_mcp.models.results import CriticalPathResult, DateUpdate, ValidationIssue, ValidationResult
from schedule_mcp.models.task import Task


def _short_date(value) -> str:
    return value.isoformat()[:10] if value is not None else "?"


def _format_task_concise(task: Task) -> str:
    """
    Format a single task in concise format for token efficiency.

    Output: "#design: Design (2024-01-01..2024-01-05, 4d, float:0, critical)"
    """
    meta = [f"{_short_date(task.start_date)}..{_short_date(task.end_date)}", f"{task.duration_days}d"]
    if task.total_float is not None:
        meta.append(f"float:{task.total_float:g}")
    if task.is_critical:
        meta.append("critical")
    if task.is_milestone:
        meta.append("milestone")

    title = task.title[:50] if task.title else "Untitled"
    return f"#{task.id}: {title} ({', '.join(meta)})"


def _format_tasks_concise(tasks: list[Task], title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | critical
    #a: Task A (...)
    #b: Task B (...)
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"
    return "\n".join([header] + [_format_task_concise(t) for t in tasks])


def _format_task_markdown(task: Task) -> str:
    """Format a single task as markdown."""
    lines = []

    icon = "🔴 " if task.is_critical else ""
    lines.append(f"### {icon}[{task.id}] {task.label}")

    details = [f"**Status**: {task.status.value}"]
    details.append(f"**Dates**: {_short_date(task.start_date)} → {_short_date(task.end_date)}")
    details.append(f"**Duration**: {task.duration_days}d")
    if task.due_date:
        details.append(f"**Due**: {_short_date(task.due_date)}")
    if task.total_float is not None:
        details.append(f"**Float**: {task.total_float:g}d")
    if task.is_milestone:
        details.append("**Milestone**")

    lines.append(" | ".join(details))
    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[Task], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]
    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")
    return "\n".join(lines)


def _format_updates_markdown(task_id: str, updates: list[DateUpdate], tasks_by_id: dict[str, Task]) -> str:
    """Format propagated date updates as markdown."""
    lines = [f"# Schedule impact of changing '{task_id}'", ""]
    if not updates:
        lines.append("No downstream tasks are affected.")
        return "\n".join(lines)

    lines.append(f"*{len(updates)} task(s) would move*")
    lines.append("")
    for u in updates:
        task = tasks_by_id.get(u.task_id)
        label = task.label if task else u.task_id
        old = f"{_short_date(task.start_date)} → {_short_date(task.end_date)}" if task else "?"
        new = f"{_short_date(u.fields.start_date)} → {_short_date(u.fields.end_date)}"
        indent = "  " * (u.depth - 1)
        lines.append(f"{indent}- [{u.task_id}] {label}: {old} ⇒ **{new}** (via {u.dependency_id})")
    return "\n".join(lines)


def _format_updates_concise(updates: list[DateUpdate]) -> str:
    """One line per update: "#b: 2024-01-12..2024-01-15"."""
    if not updates:
        return "0 updates"
    lines = [f"{len(updates)} update(s)"]
    for u in updates:
        lines.append(f"#{u.task_id}: {_short_date(u.fields.start_date)}..{_short_date(u.fields.end_date)}")
    return "\n".join(lines)


def _format_critical_path_markdown(
    result: CriticalPathResult, tasks_by_id: dict[str, Task], critical_only: bool = False
) -> str:
    """Format a CPM result as a markdown table."""
    lines = [
        "# Critical Path",
        f"*{result.critical_path_length} critical task(s) of {len(result.schedules)} | "
        f"project duration {result.project_duration} day(s)*",
        "",
    ]
    if not result.schedules:
        lines.append("No tasks found.")
        return "\n".join(lines)

    lines.append("| Task | ES | EF | LS | LF | Float | Critical |")
    lines.append("|---|---|---|---|---|---|---|")
    for task_id in result.order:
        s = result.schedules[task_id]
        if critical_only and not s.is_critical:
            continue
        task = tasks_by_id.get(task_id)
        label = task.label if task else task_id
        lines.append(
            f"| {label} | {s.earliest_start} | {s.earliest_finish} | {s.latest_start} | "
            f"{s.latest_finish} | {s.total_float} | {'yes' if s.is_critical else ''} |"
        )
    return "\n".join(lines)


def _format_critical_path_concise(result: CriticalPathResult) -> str:
    """Critical chain in start order plus the float of every other task."""
    chain = " > ".join(s.task_id for s in result.critical_tasks_in_order())
    lines = [f"critical: {chain or '-'}"]
    slack = [f"{t}:{f}" for t, f in result.float_by_task.items() if t not in result.critical_task_ids]
    if slack:
        lines.append("float: " + ", ".join(slack))
    return "\n".join(lines)


def _format_issue(issue: ValidationIssue) -> str:
    refs = []
    if issue.task_id:
        refs.append(f"task:{issue.task_id}")
    if issue.dependency_id:
        refs.append(f"dep:{issue.dependency_id}")
    suffix = f" ({', '.join(refs)})" if refs else ""
    return f"[{issue.type.value}] {issue.message}{suffix}"


def _format_validation_markdown(result: ValidationResult) -> str:
    """Format validator output as markdown."""
    status = "✅ Schedule is valid" if result.is_valid else "❌ Schedule has errors"
    lines = ["# Schedule Validation", status, ""]

    for heading, issues in (("Errors", result.errors), ("Warnings", result.warnings)):
        lines.append(f"### {heading} ({len(issues)})")
        if issues:
            lines.extend(f"- {_format_issue(i)}" for i in issues)
        else:
            lines.append("(None)")
        lines.append("")

    return "\n".join(lines).rstrip()


def _format_validation_concise(result: ValidationResult) -> str:
    """Format validator output compactly."""
    head = f"{'valid' if result.is_valid else 'invalid'} | {len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    return "\n".join([head] + [_format_issue(i) for i in result.errors + result.warnings])
