"""
Configuration for the scheduling engine.

Values are read from environment variables once and cached; the validator and
the analysis helpers also accept an explicit ``settings`` argument.
"""

import os
from functools import lru_cache

from pydantic import BaseModel, Field


class EngineSettings(BaseModel):
    """Tunable thresholds and logging level."""

    log_level: str = Field(default="WARNING", description="Level for the schedule_mcp logger")
    tight_schedule_threshold_days: float = Field(
        default=1.0, description="Float below this raises a tight_schedule warning", ge=0
    )
    bottleneck_threshold_days: int = Field(
        default=2, description="Upper float bound for a task to count as a bottleneck", ge=0
    )
    unusual_lag_days: int = Field(default=365, description="Absolute lag above this is flagged", ge=0)

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from SCHEDULE_MCP_* environment variables."""
        return cls(
            log_level=os.getenv("SCHEDULE_MCP_LOG_LEVEL", "WARNING").upper(),
            tight_schedule_threshold_days=float(os.getenv("SCHEDULE_MCP_TIGHT_THRESHOLD_DAYS", "1.0")),
            bottleneck_threshold_days=int(os.getenv("SCHEDULE_MCP_BOTTLENECK_THRESHOLD_DAYS", "2")),
            unusual_lag_days=int(os.getenv("SCHEDULE_MCP_UNUSUAL_LAG_DAYS", "365")),
        )


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Return the process-wide settings, loading them on first use."""
    return EngineSettings.from_env()
