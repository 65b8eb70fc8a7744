"""
FastMCP server for Schedule MCP.

Tools register themselves on ``mcp`` when ``schedule_mcp.tools`` is imported,
which importing the package already does; ``run`` only starts the transport.
"""

from typing import Literal

from mcp.server.fastmcp import FastMCP

from schedule_mcp.utils.logger import get_logger

logger = get_logger(__name__)

SERVER_INSTRUCTIONS = (
    "Read-only scheduling engine. Every tool takes a snapshot of the project: "
    "tasks (id, startDate, endDate, duration, dueDate) and dependencies "
    "(predecessorId, successorId, type FS/SS/FF/SF, lag in days, isActive). "
    "Nothing is persisted; apply returned dates in the host application."
)

mcp = FastMCP("schedule_mcp", instructions=SERVER_INSTRUCTIONS)


def run(transport: Literal["stdio", "sse"] = "stdio") -> None:
    """Serve the schedule tools over ``transport`` (stdio for MCP clients)."""
    logger.info("Starting schedule_mcp server over %s", transport)
    mcp.run(transport=transport)


if __name__ == "__main__":
    run()
