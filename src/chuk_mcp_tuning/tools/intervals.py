"""
Interval tools - MCP tools for the named interval library.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tuning.constants import ErrorMessages
from chuk_mcp_tuning.intervals import IntervalLibrary
from chuk_mcp_tuning.models.interval import RatioSummary

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_interval_tools(
    mcp: ChukMCPServer,
    library: IntervalLibrary,
) -> dict[str, Any]:
    """
    Register interval library tools with the MCP server.

    Args:
        mcp: The MCP server instance
        library: The interval library

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_list_interval_sets() -> str:
        """
        List available interval sets.

        Returns all sets from the library and project with their intervals.

        Returns:
            JSON string with list of interval sets

        Example:
            tuning_list_interval_sets()
        """
        try:
            sets = library.list_sets()

            return json.dumps(
                {
                    "status": "success",
                    "sets": [
                        {
                            "name": s.name,
                            "description": s.description,
                            "intervals": [
                                {"name": i.name, "ratio": str(i.to_ratio())} for i in s.intervals
                            ],
                        }
                        for s in sets
                    ],
                    "count": len(sets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list interval sets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_list_interval_sets"] = tuning_list_interval_sets

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_describe_interval(name: str) -> str:
        """
        Describe a named interval.

        Args:
            name: Interval name or alias (e.g., 'perfect fifth', 'P5')

        Returns:
            JSON string with the interval, its ratio, cents and limit

        Example:
            tuning_describe_interval(name="harmonic seventh")
        """
        try:
            interval = library.find(name)
            if interval is None:
                message = ErrorMessages.INTERVAL_NOT_FOUND.format(name=name)
                return json.dumps({"status": "error", "message": message})

            return json.dumps(
                {
                    "status": "success",
                    "interval": {
                        "name": interval.name,
                        "description": interval.description,
                        "aliases": interval.aliases,
                        **RatioSummary.from_ratio(interval.to_ratio()).model_dump(),
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_describe_interval"] = tuning_describe_interval

    return tools
