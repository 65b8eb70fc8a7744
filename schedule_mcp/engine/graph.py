"""Dependency graph construction and traversal helpers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from schedule_mcp.enums import ChainDirection
from schedule_mcp.models.task import Task, TaskDependency


class ScheduleGraph:
    """
    Directed graph over task ids built from active dependencies.

    Built fresh for each engine call. Edges whose predecessor or successor is
    not in the task snapshot are left out, as are inactive dependencies.
    Adjacency lists keep the order in which dependencies were supplied.
    """

    def __init__(self, task_ids: list[str]) -> None:
        self.task_ids = task_ids
        self._outgoing: dict[str, list[TaskDependency]] = {t: [] for t in task_ids}
        self._incoming: dict[str, list[TaskDependency]] = {t: [] for t in task_ids}

    @classmethod
    def build(cls, tasks: Iterable[Task], dependencies: Iterable[TaskDependency]) -> ScheduleGraph:
        graph = cls(list(dict.fromkeys(t.id for t in tasks)))
        for dep in dependencies:
            graph.add(dep)
        return graph

    @classmethod
    def from_dependencies(cls, dependencies: Iterable[TaskDependency]) -> ScheduleGraph:
        """Graph whose nodes are the task ids named by the dependencies themselves."""
        deps = list(dependencies)
        graph = cls(list(dict.fromkeys(t for dep in deps for t in (dep.predecessor_id, dep.successor_id))))
        for dep in deps:
            graph.add(dep)
        return graph

    def add(self, dep: TaskDependency) -> bool:
        """Add an edge; returns False when it is skipped."""
        if not dep.is_active:
            return False
        if dep.predecessor_id not in self._outgoing or dep.successor_id not in self._incoming:
            return False
        self._outgoing[dep.predecessor_id].append(dep)
        self._incoming[dep.successor_id].append(dep)
        return True

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._outgoing

    def successors(self, task_id: str) -> list[TaskDependency]:
        return self._outgoing.get(task_id, [])

    def predecessors(self, task_id: str) -> list[TaskDependency]:
        return self._incoming.get(task_id, [])

    @property
    def edge_count(self) -> int:
        return sum(len(v) for v in self._outgoing.values())


def topological_order(graph: ScheduleGraph) -> list[str] | None:
    """
    Kahn's algorithm.

    Returns:
        Task ids in dependency order, or None when the graph has a cycle
    """
    in_degree = {t: len(graph.predecessors(t)) for t in graph.task_ids}
    queue = deque(t for t in graph.task_ids if in_degree[t] == 0)
    order: list[str] = []

    while queue:
        current = queue.popleft()
        order.append(current)
        for dep in graph.successors(current):
            in_degree[dep.successor_id] -= 1
            if in_degree[dep.successor_id] == 0:
                queue.append(dep.successor_id)

    if len(order) < len(graph.task_ids):
        return None
    return order


def find_cycle(graph: ScheduleGraph, roots: Iterable[str] | None = None) -> list[str] | None:
    """
    Depth-first search with an explicit recursion stack.

    Args:
        graph: Graph to search
        roots: Task ids to start from (defaults to every task, in order)

    Returns:
        The tasks forming the first cycle found, starting at the task where the
        back edge closed it, or None when no cycle is reachable
    """
    visited: set[str] = set()
    starts = list(roots) if roots is not None else graph.task_ids

    for start in starts:
        if start in visited or start not in graph:
            continue

        # Each frame is (task id, iterator position into its successors).
        path: list[str] = [start]
        on_path = {start}
        positions = [0]
        visited.add(start)

        while path:
            current = path[-1]
            edges = graph.successors(current)
            pos = positions[-1]
            if pos >= len(edges):
                path.pop()
                positions.pop()
                on_path.discard(current)
                continue

            positions[-1] = pos + 1
            nxt = edges[pos].successor_id
            if nxt in on_path:
                return path[path.index(nxt):]
            if nxt not in visited:
                visited.add(nxt)
                path.append(nxt)
                on_path.add(nxt)
                positions.append(0)

    return None


def reachable_from(graph: ScheduleGraph, task_id: str) -> set[str]:
    """Every task reachable from ``task_id`` along outgoing edges (excluding itself unless on a cycle)."""
    seen: set[str] = set()
    stack = [dep.successor_id for dep in graph.successors(task_id)]
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        stack.extend(dep.successor_id for dep in graph.successors(current))
    return seen


def get_dependency_chains(
    task_id: str,
    dependencies: Iterable[TaskDependency],
    direction: ChainDirection = ChainDirection.PREDECESSORS,
    limit: int | None = None,
) -> list[list[str]]:
    """
    Enumerate every simple path from ``task_id`` to the end of the graph.

    Walks predecessors or successors depending on ``direction``. A task already
    on the current path is not entered again, so cycles end a chain instead of
    looping.

    The number of chains grows exponentially on layered graphs; pass ``limit``
    to stop after that many chains have been found.

    Returns:
        One list of task ids per chain, each starting with ``task_id``
    """
    neighbours: dict[str, list[str]] = {}
    for dep in dependencies:
        if not dep.is_active:
            continue
        if direction == ChainDirection.PREDECESSORS:
            neighbours.setdefault(dep.successor_id, []).append(dep.predecessor_id)
        else:
            neighbours.setdefault(dep.predecessor_id, []).append(dep.successor_id)

    chains: list[list[str]] = []
    stack: list[list[str]] = [[task_id]]
    while stack:
        chain = stack.pop()
        nexts = [n for n in neighbours.get(chain[-1], []) if n not in chain]
        if not nexts:
            chains.append(chain)
            if limit is not None and len(chains) >= limit:
                break
            continue
        for n in reversed(nexts):
            stack.append(chain + [n])
    return chains


def would_create_cycle(new_dependency: TaskDependency, dependencies: Iterable[TaskDependency]) -> bool:
    """Check whether adding ``new_dependency`` to ``dependencies`` closes a loop."""
    graph = ScheduleGraph.from_dependencies([*dependencies, new_dependency])
    return new_dependency.predecessor_id in reachable_from(graph, new_dependency.successor_id)
