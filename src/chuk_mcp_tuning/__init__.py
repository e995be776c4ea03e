"""
CHUK Tuning - exact just-intonation intervals.

Ratios are folded into one octave and kept in lowest terms; stack,
divide, invert and classify them, then render them to MIDI.
"""

from chuk_mcp_tuning.constants import PlaybackMode
from chuk_mcp_tuning.core import (
    Edo,
    EdoInterval,
    InvalidRatioError,
    Ratio,
    RatioOverflowError,
)

__version__ = "0.1.0"

__all__ = [
    "Edo",
    "EdoInterval",
    "InvalidRatioError",
    "PlaybackMode",
    "Ratio",
    "RatioOverflowError",
]
