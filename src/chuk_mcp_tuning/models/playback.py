"""
Playback settings - how a ratio is rendered as two tones.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from chuk_mcp_tuning.constants import (
    DEFAULT_AMPLITUDE,
    DEFAULT_BASE_FREQUENCY,
    DEFAULT_PITCH_BEND_RANGE,
    DEFAULT_TEMPO_BPM,
    DEFAULT_TONE_SECONDS,
)


class PlaybackSettings(BaseModel):
    """
    Rendering parameters for ratio playback.

    The root tone sounds at base_frequency; the upper tone at
    base_frequency times the ratio.
    """

    base_frequency: float = Field(
        DEFAULT_BASE_FREQUENCY, gt=0, description="Root tone frequency in Hz"
    )
    tone_seconds: float = Field(DEFAULT_TONE_SECONDS, gt=0, description="Length of each tone")
    amplitude: float = Field(DEFAULT_AMPLITUDE, ge=0, le=1, description="Tone amplitude (0-1)")
    tempo_bpm: int = Field(DEFAULT_TEMPO_BPM, ge=20, le=300, description="MIDI tempo")
    pitch_bend_range: int = Field(
        DEFAULT_PITCH_BEND_RANGE, ge=1, le=24, description="Pitch bend range in semitones"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_yaml(cls, path: Path) -> PlaybackSettings:
        """Load settings from a YAML file; missing keys take their defaults."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data.get("playback", data))
