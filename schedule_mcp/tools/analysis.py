"""Schedule analysis tools: bottlenecks, efficiency, dependency chains."""

import json

from mcp.types import ToolAnnotations

from schedule_mcp.engine.critical_path import calculate_schedule_efficiency, find_bottleneck_tasks
from schedule_mcp.engine.graph import get_dependency_chains, would_create_cycle
from schedule_mcp.enums import ChainDirection, ResponseFormat, ScheduleRisk
from schedule_mcp.errors import CriticalPathError
from schedule_mcp.models.inputs import (
    BottlenecksInput,
    CheckDependencyInput,
    DependencyChainsInput,
    EfficiencyInput,
)
from schedule_mcp.server import mcp
from schedule_mcp.utils.formatters import _format_tasks_concise, _format_tasks_markdown
from schedule_mcp.utils.parsers import _index_tasks


@mcp.tool(
    name="schedule_bottlenecks",
    annotations=ToolAnnotations(
        title="Near-Critical Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_bottlenecks(params: BottlenecksInput) -> str:
    """
    List tasks that are not critical yet but have little float left.

    USE THIS WHEN:
    - Looking for tasks that become critical after a small slip
    - Deciding where a buffer would help most

    DO NOT USE WHEN:
    - You want the critical tasks themselves → use schedule_critical_path

    Args:
        params: BottlenecksInput with the snapshot and optional threshold (days)

    Returns:
        Tasks with 0 < float <= threshold, least float first
    """
    try:
        tasks = find_bottleneck_tasks(params.tasks, params.dependencies, params.threshold)
    except CriticalPathError as e:
        return f"Error: {e}"

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"count": len(tasks), "tasks": [t.model_dump(mode="json", by_alias=True) for t in tasks]},
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, "bottlenecks")

    return _format_tasks_markdown(tasks, "Bottleneck Tasks")


@mcp.tool(
    name="schedule_efficiency",
    annotations=ToolAnnotations(
        title="Schedule Efficiency",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_efficiency(params: EfficiencyInput) -> str:
    """
    Summarise schedule risk: critical ratio, average float, bottleneck count.

    RISK RATING:
    - high: more than 70% of tasks critical, or more than 30% bottlenecks
    - medium: more than 50% critical, or more than 20% bottlenecks
    - low: otherwise

    Args:
        params: EfficiencyInput with the snapshot

    Returns:
        Efficiency metrics and a low/medium/high risk rating
    """
    try:
        efficiency = calculate_schedule_efficiency(params.tasks, params.dependencies)
    except CriticalPathError as e:
        return f"Error: {e}"

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(efficiency.model_dump(mode="json"), indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        return (
            f"risk:{efficiency.schedule_risk.value} critical:{efficiency.critical_task_ratio:.0%} "
            f"avg_float:{efficiency.average_float:.1f}d bottlenecks:{efficiency.bottleneck_tasks}"
        )

    icon = {ScheduleRisk.LOW: "🟢", ScheduleRisk.MEDIUM: "🟡", ScheduleRisk.HIGH: "🔴"}[efficiency.schedule_risk]
    lines = [
        "# Schedule Efficiency",
        "",
        f"- **Risk**: {icon} {efficiency.schedule_risk.value.upper()}",
        f"- **Critical tasks**: {efficiency.critical_task_ratio:.0%}",
        f"- **Average float**: {efficiency.average_float:.1f} day(s)",
        f"- **Bottleneck tasks**: {efficiency.bottleneck_tasks}",
    ]
    return "\n".join(lines)


@mcp.tool(
    name="schedule_dependency_chains",
    annotations=ToolAnnotations(
        title="Dependency Chains",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_dependency_chains(params: DependencyChainsInput) -> str:
    """
    List every dependency chain leading into or out of a task.

    DIRECTION OPTIONS:
    - "predecessors": chains of tasks this task waits on
    - "successors": chains of tasks waiting on this task (impact analysis)

    Args:
        params: DependencyChainsInput with task_id, direction and limit

    Returns:
        One line per chain, e.g. "a → b → c"
    """
    by_id = _index_tasks(params.tasks)
    if params.task_id not in by_id:
        return f"Error: Task '{params.task_id}' not found.\nTip: Pass the task in the tasks snapshot."

    # One extra chain tells whether the listing was cut short.
    chains = get_dependency_chains(params.task_id, params.dependencies, params.direction, limit=params.limit + 1)
    truncated = len(chains) > params.limit
    chains = chains[: params.limit]
    count = f"{len(chains)}+" if truncated else str(len(chains))

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "task_id": params.task_id,
                "direction": params.direction.value,
                "count": len(chains),
                "truncated": truncated,
                "chains": chains,
            },
            indent=2,
        )

    arrow = " ← " if params.direction == ChainDirection.PREDECESSORS else " → "
    if params.response_format == ResponseFormat.CONCISE:
        return "\n".join([f"{count} chain(s)"] + [arrow.join(c) for c in chains])

    lines = [f"# {params.direction.value.capitalize()} of {by_id[params.task_id].label}", f"*{count} chain(s)*", ""]
    for chain in chains:
        lines.append("- " + arrow.join(by_id[t].label if t in by_id else t for t in chain))
    if truncated:
        lines.append(f"- … more chains not shown (raise limit above {params.limit})")
    return "\n".join(lines)


@mcp.tool(
    name="schedule_check_dependency",
    annotations=ToolAnnotations(
        title="Check New Dependency",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def schedule_check_dependency(params: CheckDependencyInput) -> str:
    """
    Check whether a proposed dependency would create a circular reference.

    USE THIS WHEN:
    - Before creating a dependency between two existing tasks

    Args:
        params: CheckDependencyInput with the snapshot and the proposed dependency

    Returns:
        Whether the dependency can be added safely
    """
    dep = params.dependency
    task_ids = {t.id for t in params.tasks}
    missing = [t for t in (dep.predecessor_id, dep.successor_id) if t not in task_ids]
    creates_cycle = would_create_cycle(dep, params.dependencies)

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {"dependency": dep.model_dump(mode="json"), "creates_cycle": creates_cycle, "missing_tasks": missing},
            indent=2,
        )

    if missing:
        return f"Error: Unknown task(s): {', '.join(missing)}"
    if creates_cycle:
        return (
            f"❌ {dep.predecessor_id} → {dep.successor_id} ({dep.type.value}) would create a circular dependency: "
            f"{dep.successor_id} already leads to {dep.predecessor_id}."
        )
    return f"✅ {dep.predecessor_id} → {dep.successor_id} ({dep.type.value}) can be added safely."
