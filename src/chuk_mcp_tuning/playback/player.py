"""
Player - send a rendered ratio to a MIDI output port.

Blocks in real time while the messages are sent. Opening a port needs a
mido backend (python-rtmidi by default).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import mido

from chuk_mcp_tuning.constants import PlaybackMode
from chuk_mcp_tuning.playback.midi import render_ratio

if TYPE_CHECKING:
    from chuk_mcp_tuning.core import Ratio
    from chuk_mcp_tuning.models.playback import PlaybackSettings

logger = logging.getLogger(__name__)


def play(
    ratio: Ratio,
    mode: PlaybackMode,
    settings: PlaybackSettings | None = None,
    port_name: str | None = None,
) -> None:
    """
    Play a ratio as two tones.

    Args:
        ratio: The interval to play
        mode: CHORD (together) or INTERVAL (one after the other)
        settings: Rendering parameters
        port_name: MIDI output port; None opens the backend default
    """
    mid = render_ratio(ratio, mode, settings)
    logger.info(f"Playing {ratio} as {mode.value} ({mid.length:.2f}s)")

    with mido.open_output(port_name) as port:
        for message in mid.play():
            port.send(message)
        port.reset()
