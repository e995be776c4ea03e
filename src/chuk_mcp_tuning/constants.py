"""
Constants and enums for the tuning system.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class PlaybackMode(str, Enum):
    """How the two tones of a ratio are emitted."""

    CHORD = "chord"  # Both tones at once
    INTERVAL = "interval"  # Root, then the upper tone


# Playback defaults
DEFAULT_BASE_FREQUENCY = 220.0  # A3
DEFAULT_TONE_SECONDS = 1.0
DEFAULT_AMPLITUDE = 0.2
DEFAULT_TEMPO_BPM = 120
DEFAULT_PITCH_BEND_RANGE = 2  # Semitones, GM default

# Channels for the two tones; separate so pitch bends don't interfere
ROOT_CHANNEL = 0
UPPER_CHANNEL = 1


class ErrorMessages:
    """Standardized error messages."""

    INTERVAL_NOT_FOUND = "Interval '{name}' not found."
    INVALID_MODE = "Invalid playback mode: '{mode}'. Expected 'chord' or 'interval'."
