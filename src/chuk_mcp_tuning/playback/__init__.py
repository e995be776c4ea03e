"""
Playback - hear a ratio.

Renders the root and upper tone of a ratio to MIDI and emits them either
together (chord) or in sequence (interval).
"""

from chuk_mcp_tuning.constants import PlaybackMode
from chuk_mcp_tuning.playback.midi import (
    TICKS_PER_BEAT,
    ToneEvent,
    events_to_midi,
    frequency_to_midi,
    ratio_to_events,
    render_ratio,
)
from chuk_mcp_tuning.playback.player import play

__all__ = [
    "TICKS_PER_BEAT",
    "PlaybackMode",
    "ToneEvent",
    "events_to_midi",
    "frequency_to_midi",
    "play",
    "ratio_to_events",
    "render_ratio",
]
