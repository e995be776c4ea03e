"""
Core tuning primitives - the Radix layer.

These are the exact invariants everything else composes on:
- Ratio: A just interval, normalized into [1, 2] and reduced
- Edo / EdoInterval: Equal divisions of the octave and their steps
- InvalidRatioError / RatioOverflowError: Arithmetic failures
"""

from chuk_mcp_tuning.core.edo import Edo, EdoInterval
from chuk_mcp_tuning.core.errors import InvalidRatioError, RatioOverflowError
from chuk_mcp_tuning.core.ratio import Ratio

__all__ = [
    # Ratio
    "Ratio",
    # EDO
    "Edo",
    "EdoInterval",
    # Errors
    "InvalidRatioError",
    "RatioOverflowError",
]
