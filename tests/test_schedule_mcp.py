"""Tests for the Schedule MCP server tools, formatters and input models."""

import json
from unittest.mock import patch
from datetime import datetime

import pytest
from pydantic import ValidationError

from schedule_mcp import (
    BottlenecksInput,
    ChainDirection,
    CheckDependencyInput,
    CriticalPathInput,
    DependencyChainsInput,
    DependencyType,
    DependencyValidationError,
    EfficiencyInput,
    IssueType,
    PropagateInput,
    ResponseFormat,
    Task,
    ValidateInput,
    ValidationIssue,
    ValidationResult,
    mcp,
    schedule_bottlenecks,
    schedule_check_dependency,
    schedule_critical_path,
    schedule_dependency_chains,
    schedule_efficiency,
    schedule_propagate,
    schedule_validate,
)
from schedule_mcp import (
    _format_task_concise as format_task_concise,
)
from schedule_mcp import (
    _format_task_markdown as format_task_markdown,
)
from schedule_mcp import (
    _format_tasks_concise as format_tasks_concise,
)
from schedule_mcp import (
    _format_tasks_markdown as format_tasks_markdown,
)
from schedule_mcp import (
    _format_updates_concise as format_updates_concise,
)
from schedule_mcp import (
    _format_validation_concise as format_validation_concise,
)
from schedule_mcp import (
    _format_validation_markdown as format_validation_markdown,
)

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def chain_snapshot():
    """A -> B -> C as the host application would send it (camelCase dicts)."""
    return {
        "tasks": [
            {"id": "a", "title": "Design", "startDate": "2024-01-01", "endDate": "2024-01-06", "duration": 5},
            {"id": "b", "title": "Build", "startDate": "2024-01-06", "endDate": "2024-01-11", "duration": 5},
            {"id": "c", "title": "Ship", "startDate": "2024-01-11", "endDate": "2024-01-14", "duration": 3},
        ],
        "dependencies": [
            {"id": "ab", "predecessorId": "a", "successorId": "b", "type": "FS", "lag": 0},
            {"id": "bc", "predecessorId": "b", "successorId": "c", "type": "FS", "lag": 0},
        ],
    }


@pytest.fixture
def parallel_snapshot():
    """A fans out to B (10 days) and D (5 days); both feed C."""
    return {
        "tasks": [
            {"id": "a", "title": "Plan", "startDate": "2024-01-01", "endDate": "2024-01-06", "duration": 5},
            {"id": "b", "title": "Long branch", "startDate": "2024-01-06", "endDate": "2024-01-16", "duration": 10},
            {"id": "d", "title": "Short branch", "startDate": "2024-01-06", "endDate": "2024-01-11", "duration": 5},
            {"id": "c", "title": "Merge", "startDate": "2024-01-16", "endDate": "2024-01-19", "duration": 3},
        ],
        "dependencies": [
            {"id": "ab", "predecessorId": "a", "successorId": "b"},
            {"id": "ad", "predecessorId": "a", "successorId": "d"},
            {"id": "bc", "predecessorId": "b", "successorId": "c"},
            {"id": "dc", "predecessorId": "d", "successorId": "c"},
        ],
    }


@pytest.fixture
def cyclic_snapshot():
    return {
        "tasks": [
            {"id": "a", "title": "A", "startDate": "2024-01-01", "endDate": "2024-01-02"},
            {"id": "b", "title": "B", "startDate": "2024-01-02", "endDate": "2024-01-03"},
            {"id": "c", "title": "C", "startDate": "2024-01-03", "endDate": "2024-01-04"},
        ],
        "dependencies": [
            {"id": "ab", "predecessorId": "a", "successorId": "b"},
            {"id": "bc", "predecessorId": "b", "successorId": "c"},
            {"id": "ca", "predecessorId": "c", "successorId": "a"},
        ],
    }


@pytest.fixture
def moved_design():
    """Task "a" pushed to finish on January 8th."""
    return {"id": "a", "title": "Design", "startDate": "2024-01-03", "endDate": "2024-01-08", "duration": 5}


# ============================================================================
# Input Model Tests
# ============================================================================


class TestInputModels:
    """Tests for Pydantic input models."""

    def test_snapshot_defaults(self, chain_snapshot):
        """Test default values shared by every tool input."""
        params = CriticalPathInput(tasks=chain_snapshot["tasks"])
        assert params.dependencies == []
        assert params.response_format == ResponseFormat.MARKDOWN
        assert params.critical_only is False

    def test_snapshot_parses_camel_case(self, chain_snapshot):
        """Test that nested tasks and dependencies accept camelCase keys."""
        params = ValidateInput(**chain_snapshot)
        assert params.tasks[0].start_date == datetime(2024, 1, 1)
        assert params.dependencies[0].predecessor_id == "a"
        assert params.dependencies[0].type == DependencyType.FS
        assert params.annotate_float is True

    def test_propagate_input_strips_task_id(self, chain_snapshot, moved_design):
        """Test task_id whitespace is stripped."""
        params = PropagateInput(**chain_snapshot, task_id="  a  ", updated_task=moved_design)
        assert params.task_id == "a"
        assert params.updated_task.end_date == datetime(2024, 1, 8)

    def test_propagate_input_empty_task_id_fails(self, chain_snapshot, moved_design):
        """Test blank task_id is rejected."""
        with pytest.raises(ValidationError):
            PropagateInput(**chain_snapshot, task_id="   ", updated_task=moved_design)

    def test_propagate_input_requires_updated_task(self, chain_snapshot):
        """Test updated_task is required."""
        with pytest.raises(ValidationError):
            PropagateInput(**chain_snapshot, task_id="a")

    def test_self_dependency_in_snapshot_fails(self, chain_snapshot):
        """Test a dependency from a task to itself is rejected at parse time."""
        with pytest.raises(DependencyValidationError):
            ValidateInput(
                tasks=chain_snapshot["tasks"],
                dependencies=[{"id": "aa", "predecessorId": "a", "successorId": "a"}],
            )

    def test_bottlenecks_threshold_validation(self, chain_snapshot):
        """Test threshold bounds."""
        assert BottlenecksInput(**chain_snapshot).threshold is None
        assert BottlenecksInput(**chain_snapshot, threshold=5).threshold == 5
        with pytest.raises(ValidationError):
            BottlenecksInput(**chain_snapshot, threshold=-1)
        with pytest.raises(ValidationError):
            BottlenecksInput(**chain_snapshot, threshold=1000)

    def test_dependency_chains_input(self, chain_snapshot):
        """Test chain input defaults and limit bounds."""
        params = DependencyChainsInput(**chain_snapshot, task_id="c")
        assert params.direction == ChainDirection.PREDECESSORS
        assert params.limit == 20
        with pytest.raises(ValidationError):
            DependencyChainsInput(**chain_snapshot, task_id="c", limit=0)

    def test_invalid_response_format(self, chain_snapshot):
        """Test unknown response formats are rejected."""
        with pytest.raises(ValidationError):
            EfficiencyInput(**chain_snapshot, response_format="xml")


# ============================================================================
# Enum Tests
# ============================================================================


class TestEnums:
    """Tests for enum values exposed to clients."""

    def test_response_format_values(self):
        """Test ResponseFormat enum values."""
        assert ResponseFormat.MARKDOWN.value == "markdown"
        assert ResponseFormat.JSON.value == "json"
        assert ResponseFormat.CONCISE.value == "concise"

    def test_dependency_type_values(self):
        """Test DependencyType enum values."""
        assert [t.value for t in DependencyType] == ["FS", "SS", "FF", "SF"]

    def test_issue_type_values(self):
        """Test a sample of IssueType values."""
        assert IssueType.CIRCULAR_DEPENDENCY.value == "circular_dependency"
        assert IssueType.TIGHT_SCHEDULE.value == "tight_schedule"


# ============================================================================
# Formatter Tests
# ============================================================================


class TestFormatTaskConcise:
    """Tests for concise task formatting."""

    def test_format_task_concise_critical(self):
        """Test a critical task with float."""
        task = Task(
            id="a",
            title="Design",
            start_date=datetime(2024, 1, 1),
            end_date=datetime(2024, 1, 6),
            duration=5,
            total_float=0,
            is_critical=True,
        )
        assert format_task_concise(task) == "#a: Design (2024-01-01..2024-01-06, 5d, float:0, critical)"

    def test_format_task_concise_untitled(self):
        """Test a task without dates or title."""
        assert format_task_concise(Task(id="x")) == "#x: Untitled (?..?, 1d)"

    def test_format_task_concise_milestone(self):
        """Test milestone indicator."""
        assert "milestone" in format_task_concise(Task(id="m", is_milestone=True))

    def test_format_tasks_concise_empty(self):
        """Test empty list."""
        assert format_tasks_concise([]) == "0 tasks"

    def test_format_tasks_concise_with_title(self):
        """Test header with a title."""
        result = format_tasks_concise([Task(id="a"), Task(id="b")], "bottlenecks")
        assert result.splitlines()[0] == "2 task(s) | bottlenecks"


class TestFormatTaskMarkdown:
    """Tests for markdown task formatting."""

    def test_format_basic_task(self):
        """Test formatting a basic task."""
        result = format_task_markdown(Task(id="a", title="Design"))
        assert "### [a] Design" in result
        assert "**Status**: TODO" in result
        assert "**Duration**: 1d" in result

    def test_format_critical_task_with_float(self):
        """Test critical icon and float display."""
        task = Task(id="a", title="Design", total_float=0, is_critical=True, due_date=datetime(2024, 2, 1))
        result = format_task_markdown(task)
        assert "🔴" in result
        assert "**Float**: 0d" in result
        assert "**Due**: 2024-02-01" in result

    def test_format_empty_list(self):
        """Test formatting an empty list."""
        assert format_tasks_markdown([], "Bottleneck Tasks") == "# Bottleneck Tasks\n\nNo tasks found."

    def test_format_multiple_tasks(self):
        """Test formatting several tasks."""
        result = format_tasks_markdown([Task(id="a"), Task(id="b")])
        assert "# Tasks" in result
        assert "*2 task(s)*" in result


class TestFormatValidation:
    """Tests for validation result formatting."""

    def test_valid_result_markdown(self):
        """Test a clean result."""
        result = format_validation_markdown(ValidationResult(is_valid=True))
        assert "✅ Schedule is valid" in result
        assert "### Errors (0)" in result
        assert "(None)" in result

    def test_invalid_result_markdown(self):
        """Test errors are listed with their references."""
        issue = ValidationIssue(
            type=IssueType.DATE_CONFLICT, message="Task B starts early", task_id="b", dependency_id="ab"
        )
        result = format_validation_markdown(ValidationResult(is_valid=False, errors=[issue]))
        assert "❌ Schedule has errors" in result
        assert "- [date_conflict] Task B starts early (task:b, dep:ab)" in result

    def test_concise(self):
        """Test concise summary line."""
        issue = ValidationIssue(type=IssueType.UNUSUAL_LAG, message="Lag too big", dependency_id="ab")
        result = format_validation_concise(ValidationResult(is_valid=True, warnings=[issue]))
        assert result == "valid | 0 error(s), 1 warning(s)\n[unusual_lag] Lag too big (dep:ab)"

    def test_updates_concise_empty(self):
        """Test no updates."""
        assert format_updates_concise([]) == "0 updates"


# ============================================================================
# Tool Function Tests
# ============================================================================


class TestServerRegistration:
    """Tests for MCP tool registration."""

    @pytest.mark.asyncio
    async def test_all_tools_registered(self):
        """Test every schedule tool is exposed by the server."""
        names = {tool.name for tool in await mcp.list_tools()}
        assert names >= {
            "schedule_propagate",
            "schedule_critical_path",
            "schedule_validate",
            "schedule_bottlenecks",
            "schedule_efficiency",
            "schedule_dependency_chains",
            "schedule_check_dependency",
        }

    @pytest.mark.asyncio
    async def test_tools_are_read_only(self):
        """Test no tool advertises side effects."""
        for tool in await mcp.list_tools():
            assert tool.annotations.readOnlyHint is True
            assert tool.annotations.destructiveHint is False

    def test_run_uses_stdio_by_default(self):
        """Test run starts the server on the stdio transport."""
        from schedule_mcp.server import run

        with patch.object(mcp, "run") as mock_run:
            run()
        mock_run.assert_called_once_with(transport="stdio")

    def test_run_with_sse(self):
        """Test run forwards the requested transport."""
        from schedule_mcp.server import run

        with patch.object(mcp, "run") as mock_run:
            run("sse")
        mock_run.assert_called_once_with(transport="sse")


class TestSchedulePropagate:
    """Tests for the schedule_propagate tool."""

    @pytest.mark.asyncio
    async def test_propagate_markdown(self, chain_snapshot, moved_design):
        """Test markdown preview of a cascade."""
        params = PropagateInput(**chain_snapshot, task_id="a", updated_task=moved_design)
        result = await schedule_propagate(params)

        assert "# Schedule impact of changing 'a'" in result
        assert "*2 task(s) would move*" in result
        assert "- [b] Build: 2024-01-06 → 2024-01-11 ⇒ **2024-01-08 → 2024-01-13** (via ab)" in result
        assert "  - [c] Ship:" in result

    @pytest.mark.asyncio
    async def test_propagate_concise(self, chain_snapshot, moved_design):
        """Test concise output."""
        params = PropagateInput(
            **chain_snapshot, task_id="a", updated_task=moved_design, response_format=ResponseFormat.CONCISE
        )
        result = await schedule_propagate(params)
        assert result == "2 update(s)\n#b: 2024-01-08..2024-01-13\n#c: 2024-01-13..2024-01-16"

    @pytest.mark.asyncio
    async def test_propagate_json(self, chain_snapshot, moved_design):
        """Test JSON output."""
        params = PropagateInput(
            **chain_snapshot, task_id="a", updated_task=moved_design, response_format=ResponseFormat.JSON
        )
        data = json.loads(await schedule_propagate(params))

        assert data["task_id"] == "a"
        assert data["count"] == 2
        assert data["updates"][0]["task_id"] == "b"
        assert data["updates"][0]["fields"]["start_date"].startswith("2024-01-08")
        assert data["updates"][1]["depth"] == 2

    @pytest.mark.asyncio
    async def test_propagate_leaf_task(self, chain_snapshot):
        """Test moving a task without successors."""
        moved = {"id": "c", "title": "Ship", "startDate": "2024-01-20", "endDate": "2024-01-23"}
        params = PropagateInput(**chain_snapshot, task_id="c", updated_task=moved)
        assert "No downstream tasks are affected." in await schedule_propagate(params)

    @pytest.mark.asyncio
    async def test_propagate_cycle_error(self, cyclic_snapshot):
        """Test that a reachable cycle is reported instead of propagated."""
        moved = {"id": "a", "startDate": "2024-01-01", "endDate": "2024-01-05"}
        params = PropagateInput(**cyclic_snapshot, task_id="a", updated_task=moved)
        result = await schedule_propagate(params)
        assert result.startswith("Error: CycleSuspected:")
        assert "a -> b -> c -> a" in result

    @pytest.mark.asyncio
    async def test_propagate_unknown_task(self, chain_snapshot):
        """Test error for a task outside the snapshot."""
        params = PropagateInput(**chain_snapshot, task_id="zzz", updated_task={"id": "zzz"})
        result = await schedule_propagate(params)
        assert result.startswith("Error: UnknownTask:")


class TestScheduleCriticalPath:
    """Tests for the schedule_critical_path tool."""

    @pytest.mark.asyncio
    async def test_critical_path_markdown(self, parallel_snapshot):
        """Test markdown table output."""
        result = await schedule_critical_path(CriticalPathInput(**parallel_snapshot))

        assert "# Critical Path" in result
        assert "*3 critical task(s) of 4 | project duration 18 day(s)*" in result
        assert "| Short branch | 2024-01-06 | 2024-01-11 | 2024-01-11 | 2024-01-16 | 5 |  |" in result
        assert "| Long branch | 2024-01-06 | 2024-01-16 | 2024-01-06 | 2024-01-16 | 0 | yes |" in result

    @pytest.mark.asyncio
    async def test_critical_only(self, parallel_snapshot):
        """Test that non-critical rows are hidden."""
        result = await schedule_critical_path(CriticalPathInput(**parallel_snapshot, critical_only=True))
        assert "Short branch" not in result
        assert "Merge" in result

    @pytest.mark.asyncio
    async def test_critical_path_concise(self, parallel_snapshot):
        """Test concise output."""
        params = CriticalPathInput(**parallel_snapshot, response_format=ResponseFormat.CONCISE)
        assert await schedule_critical_path(params) == "critical: a > b > c\nfloat: d:5"

    @pytest.mark.asyncio
    async def test_critical_path_json(self, parallel_snapshot):
        """Test JSON output."""
        params = CriticalPathInput(**parallel_snapshot, response_format=ResponseFormat.JSON, critical_only=True)
        data = json.loads(await schedule_critical_path(params))

        assert data["critical_task_ids"] == ["a", "b", "c"]
        assert data["float_by_task"]["d"] == 5
        assert data["project_duration"] == 18
        assert [s["task_id"] for s in data["schedules"]] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_critical_path_cycle(self, cyclic_snapshot):
        """Test error with a tip for cyclic schedules."""
        result = await schedule_critical_path(CriticalPathInput(**cyclic_snapshot))
        assert result.startswith("Error: CycleSuspected:")
        assert "Tip: Use schedule_validate" in result


class TestScheduleValidate:
    """Tests for the schedule_validate tool."""

    @pytest.mark.asyncio
    async def test_validate_with_float_annotation(self, chain_snapshot):
        """Test that a fully critical chain is valid but flagged as tight."""
        params = ValidateInput(**chain_snapshot, response_format=ResponseFormat.CONCISE)
        result = await schedule_validate(params)
        assert result.splitlines()[0] == "valid | 0 error(s), 3 warning(s)"
        assert "[tight_schedule]" in result

    @pytest.mark.asyncio
    async def test_validate_without_float_annotation(self, chain_snapshot):
        """Test that skipping CPM leaves no float-based warnings."""
        params = ValidateInput(**chain_snapshot, annotate_float=False, response_format=ResponseFormat.CONCISE)
        assert await schedule_validate(params) == "valid | 0 error(s), 0 warning(s)"

    @pytest.mark.asyncio
    async def test_validate_cycle_markdown(self, cyclic_snapshot):
        """Test a cyclic schedule is reported, not raised."""
        result = await schedule_validate(ValidateInput(**cyclic_snapshot))
        assert "❌ Schedule has errors" in result
        assert "[circular_dependency] Circular dependency detected in the schedule: a -> b -> c -> a" in result

    @pytest.mark.asyncio
    async def test_validate_json(self, cyclic_snapshot):
        """Test JSON output."""
        params = ValidateInput(**cyclic_snapshot, response_format=ResponseFormat.JSON)
        data = json.loads(await schedule_validate(params))

        assert data["is_valid"] is False
        types = [e["type"] for e in data["errors"]]
        assert types.count("circular_dependency") == 1
        assert "date_conflict" in types


class TestScheduleBottlenecks:
    """Tests for the schedule_bottlenecks tool."""

    @pytest.mark.asyncio
    async def test_no_bottlenecks(self, parallel_snapshot):
        """Test default threshold finds nothing when the only slack is 5 days."""
        result = await schedule_bottlenecks(BottlenecksInput(**parallel_snapshot))
        assert result == "# Bottleneck Tasks\n\nNo tasks found."

    @pytest.mark.asyncio
    async def test_bottlenecks_with_threshold(self, parallel_snapshot):
        """Test a larger threshold picks up the short branch."""
        result = await schedule_bottlenecks(BottlenecksInput(**parallel_snapshot, threshold=5))
        assert "[d] Short branch" in result
        assert "**Float**: 5d" in result

    @pytest.mark.asyncio
    async def test_bottlenecks_concise(self, parallel_snapshot):
        """Test concise output."""
        params = BottlenecksInput(**parallel_snapshot, threshold=5, response_format=ResponseFormat.CONCISE)
        result = await schedule_bottlenecks(params)
        assert result == "1 task(s) | bottlenecks\n#d: Short branch (2024-01-06..2024-01-11, 5d, float:5)"

    @pytest.mark.asyncio
    async def test_bottlenecks_json(self, parallel_snapshot):
        """Test JSON output uses the snapshot's camelCase keys."""
        params = BottlenecksInput(**parallel_snapshot, threshold=5, response_format=ResponseFormat.JSON)
        data = json.loads(await schedule_bottlenecks(params))
        assert data["count"] == 1
        assert data["tasks"][0]["id"] == "d"
        assert data["tasks"][0]["float"] == 5
        assert data["tasks"][0]["isCritical"] is False


class TestScheduleEfficiency:
    """Tests for the schedule_efficiency tool."""

    @pytest.mark.asyncio
    async def test_efficiency_concise(self, chain_snapshot):
        """Test concise output for an all-critical chain."""
        params = EfficiencyInput(**chain_snapshot, response_format=ResponseFormat.CONCISE)
        assert await schedule_efficiency(params) == "risk:high critical:100% avg_float:0.0d bottlenecks:0"

    @pytest.mark.asyncio
    async def test_efficiency_markdown(self, parallel_snapshot):
        """Test markdown output."""
        result = await schedule_efficiency(EfficiencyInput(**parallel_snapshot))
        assert "# Schedule Efficiency" in result
        assert "🔴 HIGH" in result
        assert "**Critical tasks**: 75%" in result

    @pytest.mark.asyncio
    async def test_efficiency_json(self, parallel_snapshot):
        """Test JSON output."""
        params = EfficiencyInput(**parallel_snapshot, response_format=ResponseFormat.JSON)
        data = json.loads(await schedule_efficiency(params))
        assert data["critical_task_ratio"] == 0.75
        assert data["average_float"] == 1.25
        assert data["schedule_risk"] == "high"

    @pytest.mark.asyncio
    async def test_efficiency_cycle(self, cyclic_snapshot):
        """Test error for cyclic schedules."""
        result = await schedule_efficiency(EfficiencyInput(**cyclic_snapshot))
        assert result.startswith("Error: CycleSuspected:")


class TestScheduleDependencyChains:
    """Tests for the schedule_dependency_chains tool."""

    @pytest.mark.asyncio
    async def test_predecessor_chains_markdown(self, parallel_snapshot):
        """Test markdown output with task titles."""
        result = await schedule_dependency_chains(DependencyChainsInput(**parallel_snapshot, task_id="c"))
        assert "# Predecessors of Merge" in result
        assert "*2 chain(s)*" in result
        assert "- Merge ← Long branch ← Plan" in result
        assert "- Merge ← Short branch ← Plan" in result

    @pytest.mark.asyncio
    async def test_successor_chains_concise(self, parallel_snapshot):
        """Test concise output walking successors."""
        params = DependencyChainsInput(
            **parallel_snapshot,
            task_id="a",
            direction=ChainDirection.SUCCESSORS,
            response_format=ResponseFormat.CONCISE,
        )
        assert await schedule_dependency_chains(params) == "2 chain(s)\na → b → c\na → d → c"

    @pytest.mark.asyncio
    async def test_chains_limit(self, parallel_snapshot):
        """Test the limit truncates chains and flags the cut."""
        params = DependencyChainsInput(**parallel_snapshot, task_id="c", limit=1, response_format=ResponseFormat.JSON)
        data = json.loads(await schedule_dependency_chains(params))
        assert data["count"] == 1
        assert data["truncated"] is True
        assert data["chains"] == [["c", "b", "a"]]

        markdown = await schedule_dependency_chains(DependencyChainsInput(**parallel_snapshot, task_id="c", limit=1))
        assert "*1+ chain(s)*" in markdown
        assert "- … more chains not shown (raise limit above 1)" in markdown

    @pytest.mark.asyncio
    async def test_chains_exact_limit_not_truncated(self, parallel_snapshot):
        """Test a limit equal to the chain count is not reported as truncated."""
        params = DependencyChainsInput(**parallel_snapshot, task_id="c", limit=2, response_format=ResponseFormat.JSON)
        data = json.loads(await schedule_dependency_chains(params))
        assert data["count"] == 2
        assert data["truncated"] is False

    @pytest.mark.asyncio
    async def test_chains_layered_graph_stays_bounded(self):
        """Test a deep layered graph with billions of paths returns only the limit."""
        tasks = [{"id": "s"}]
        deps = []
        previous = ["s"]
        for layer in range(32):
            current = [f"{layer}a", f"{layer}b"]
            tasks += [{"id": t} for t in current]
            deps += [
                {"id": f"{p}-{t}", "predecessorId": p, "successorId": t} for p in previous for t in current
            ]
            previous = current

        params = DependencyChainsInput(
            tasks=tasks,
            dependencies=deps,
            task_id="s",
            direction=ChainDirection.SUCCESSORS,
            limit=5,
            response_format=ResponseFormat.JSON,
        )
        data = json.loads(await schedule_dependency_chains(params))

        assert data["count"] == 5
        assert data["truncated"] is True
        assert all(len(chain) == 33 for chain in data["chains"])

    @pytest.mark.asyncio
    async def test_chains_unknown_task(self, parallel_snapshot):
        """Test error for a task outside the snapshot."""
        result = await schedule_dependency_chains(DependencyChainsInput(**parallel_snapshot, task_id="zzz"))
        assert result.startswith("Error: Task 'zzz' not found.")


class TestScheduleCheckDependency:
    """Tests for the schedule_check_dependency tool."""

    @pytest.mark.asyncio
    async def test_dependency_creates_cycle(self, chain_snapshot):
        """Test a back edge is refused."""
        params = CheckDependencyInput(
            **chain_snapshot, dependency={"id": "ca", "predecessorId": "c", "successorId": "a"}
        )
        result = await schedule_check_dependency(params)
        assert result.startswith("❌ c → a (FS) would create a circular dependency")

    @pytest.mark.asyncio
    async def test_dependency_safe(self, chain_snapshot):
        """Test a forward edge is accepted."""
        params = CheckDependencyInput(
            **chain_snapshot, dependency={"id": "ac", "predecessorId": "a", "successorId": "c", "type": "SS"}
        )
        assert await schedule_check_dependency(params) == "✅ a → c (SS) can be added safely."

    @pytest.mark.asyncio
    async def test_dependency_unknown_task(self, chain_snapshot):
        """Test missing tasks are reported."""
        params = CheckDependencyInput(
            **chain_snapshot, dependency={"id": "ax", "predecessorId": "a", "successorId": "x"}
        )
        assert await schedule_check_dependency(params) == "Error: Unknown task(s): x"

    @pytest.mark.asyncio
    async def test_dependency_json(self, chain_snapshot):
        """Test JSON output."""
        params = CheckDependencyInput(
            **chain_snapshot,
            dependency={"id": "ca", "predecessorId": "c", "successorId": "a"},
            response_format=ResponseFormat.JSON,
        )
        data = json.loads(await schedule_check_dependency(params))
        assert data["creates_cycle"] is True
        assert data["missing_tasks"] == []
        assert data["dependency"]["predecessor_id"] == "c"
