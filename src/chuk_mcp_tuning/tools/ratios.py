"""
Ratio tools - MCP tools for just-interval arithmetic.

Every result is a normalized, reduced ratio within one octave.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tuning.core import Ratio
from chuk_mcp_tuning.models.interval import RatioSummary

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _success(ratio: Ratio, **extra: Any) -> str:
    return json.dumps(
        {"status": "success", **extra, "ratio": RatioSummary.from_ratio(ratio).model_dump()}
    )


def register_ratio_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register ratio arithmetic tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_ratio(ratio: str) -> str:
        """
        Normalize a ratio into one octave.

        Folds the ratio into [1, 2] by powers of two and reduces it.
        Any octave-equivalent of unison other than 1/1 becomes 2/1.

        Args:
            ratio: Ratio notation, e.g. '3/2', '10:8', '3'

        Returns:
            JSON string with numerator, denominator, frequency ratio, cents and limit

        Example:
            tuning_ratio(ratio="10/8")
        """
        try:
            return _success(Ratio.parse(ratio))
        except Exception as e:
            logger.exception("Failed to parse ratio")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_ratio"] = tuning_ratio

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_multiply(a: str, b: str) -> str:
        """
        Stack two intervals.

        Args:
            a: First ratio, e.g. '4/3'
            b: Second ratio, e.g. '3/2'

        Returns:
            JSON string with the product, folded into the octave

        Example:
            tuning_multiply(a="5/4", b="6/5")
        """
        try:
            return _success(Ratio.parse(a) * Ratio.parse(b))
        except Exception as e:
            logger.exception("Failed to multiply ratios")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_multiply"] = tuning_multiply

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_divide(a: str, b: str) -> str:
        """
        Take one interval away from another.

        Args:
            a: Ratio to divide, e.g. '3/2'
            b: Divisor ratio, e.g. '4/3'

        Returns:
            JSON string with the quotient, folded into the octave

        Example:
            tuning_divide(a="3/2", b="4/3")
        """
        try:
            return _success(Ratio.parse(a) / Ratio.parse(b))
        except Exception as e:
            logger.exception("Failed to divide ratios")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_divide"] = tuning_divide

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_complement(ratio: str) -> str:
        """
        Invert an interval within the octave.

        Args:
            ratio: Ratio to invert, e.g. '3/2'

        Returns:
            JSON string with the complement (2/1 divided by the ratio)

        Example:
            tuning_complement(ratio="5/4")
        """
        try:
            return _success(Ratio.parse(ratio).complement())
        except Exception as e:
            logger.exception("Failed to complement ratio")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_complement"] = tuning_complement

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_pow(ratio: str, exponent: int) -> str:
        """
        Stack an interval on itself.

        Negative exponents stack the complement. Zero gives unison.

        Args:
            ratio: Ratio to stack, e.g. '3/2'
            exponent: Number of times to stack it

        Returns:
            JSON string with the result, folded into the octave

        Example:
            tuning_pow(ratio="3/2", exponent=4)
        """
        try:
            return _success(Ratio.parse(ratio).pow(exponent), exponent=exponent)
        except Exception as e:
            logger.exception("Failed to raise ratio to a power")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_pow"] = tuning_pow

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_limit(ratio: str) -> str:
        """
        Get the harmonic (prime) limit of an interval.

        Args:
            ratio: Ratio to classify, e.g. '7/4'

        Returns:
            JSON string with the limit and the normalized ratio

        Example:
            tuning_limit(ratio="22/21")
        """
        try:
            r = Ratio.parse(ratio)
            return _success(r, limit=r.limit())
        except Exception as e:
            logger.exception("Failed to compute limit")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_limit"] = tuning_limit

    return tools
