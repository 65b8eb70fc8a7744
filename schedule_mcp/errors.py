"""Structural errors raised by the scheduling engine.

Diagnostics found by the validator are never raised; they are returned as
``ValidationIssue`` records. The exceptions here are reserved for inputs the
engine refuses to operate on.
"""

from __future__ import annotations

from schedule_mcp.enums import ErrorKind


class SchedulingError(Exception):
    """Base class for structural scheduling failures."""

    def __init__(self, kind: ErrorKind, message: str, task_id: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.task_id = task_id

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


# Not a ValueError subclass: pydantic re-raises it from validators unwrapped.
class DependencyValidationError(SchedulingError):
    """A task or dependency is malformed at construction time."""


class PropagationError(SchedulingError):
    """Date propagation refused to run or had to abort."""


class CriticalPathError(SchedulingError):
    """The critical path cannot be computed for the given graph."""
