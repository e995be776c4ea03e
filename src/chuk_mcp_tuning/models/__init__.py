"""
Pydantic models for the tuning system.

This module provides:
- PlaybackSettings: Rendering parameters for playback
- NamedInterval: A just interval with a conventional name
- IntervalSet: A collection of named intervals
- RatioSummary: Serializable view of a Ratio
"""

from chuk_mcp_tuning.models.interval import IntervalSet, NamedInterval, RatioSummary
from chuk_mcp_tuning.models.playback import PlaybackSettings

__all__ = [
    "IntervalSet",
    "NamedInterval",
    "PlaybackSettings",
    "RatioSummary",
]
