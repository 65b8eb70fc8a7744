"""Models exchanged with the external resource leveling service."""

from pydantic import BaseModel, Field


class ResourceAssignment(BaseModel):
    """A resource allocated to a task."""

    id: str
    task_id: str
    resource_id: str
    allocation_percentage: float = Field(default=100.0, ge=0)


class LevelingAdjustment(BaseModel):
    """A change proposed by the leveling service."""

    original_assignment: ResourceAssignment
    new_allocation: float = Field(..., ge=0)
    reason: str = ""


class LevelingResult(BaseModel):
    """Response of ``perform_resource_leveling``."""

    leveled_assignments: list[ResourceAssignment] = Field(default_factory=list)
    adjustments: list[LevelingAdjustment] = Field(default_factory=list)
