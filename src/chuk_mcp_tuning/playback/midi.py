"""
MIDI rendering - a ratio as two tones.

The root and upper tone go to separate channels, each with its own pitch
bend, so just frequencies survive the 12-note MIDI grid.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_tuning.constants import ROOT_CHANNEL, UPPER_CHANNEL, PlaybackMode
from chuk_mcp_tuning.models.playback import PlaybackSettings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_tuning.core import Ratio


# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480

# A4 reference
A4_MIDI = 69
A4_FREQUENCY = 440.0

# 14-bit pitchwheel range as mido exposes it
PITCHWHEEL_MIN = -8192
PITCHWHEEL_MAX = 8191


@dataclass(frozen=True)
class ToneEvent:
    """
    A single bent MIDI note.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    bend: int  # Pitchwheel value (-8192..8191)
    start_ticks: int
    duration_ticks: int
    velocity: int  # 0-127
    channel: int = ROOT_CHANNEL

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not PITCHWHEEL_MIN <= self.bend <= PITCHWHEEL_MAX:
            raise ValueError(f"Bend must be -8192-8191, got {self.bend}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def frequency_to_midi(frequency: float, bend_range: int = 2) -> tuple[int, int]:
    """
    Split a frequency into the nearest MIDI note and a pitch bend.

    Args:
        frequency: Frequency in Hz
        bend_range: Synth pitch bend range in semitones

    Returns:
        (note, bend) where bend is a pitchwheel value
    """
    if frequency <= 0:
        raise ValueError(f"Frequency must be positive, got {frequency}")
    exact = A4_MIDI + 12 * math.log2(frequency / A4_FREQUENCY)
    note = round(exact)
    bend = round((exact - note) / bend_range * 8192)
    return note, max(PITCHWHEEL_MIN, min(PITCHWHEEL_MAX, bend))


def seconds_to_ticks(
    seconds: float, tempo_bpm: int, ticks_per_beat: int = TICKS_PER_BEAT
) -> int:
    """Convert a duration in seconds to ticks at the given tempo."""
    return round(seconds * tempo_bpm / 60 * ticks_per_beat)


def amplitude_to_velocity(amplitude: float) -> int:
    """Convert amplitude from 0.0-1.0 range to 0-127."""
    return max(0, min(127, int(amplitude * 127)))


def ratio_to_events(
    ratio: Ratio,
    mode: PlaybackMode,
    settings: PlaybackSettings | None = None,
) -> list[ToneEvent]:
    """
    Lay out the root and upper tone of a ratio.

    CHORD starts both tones together; INTERVAL starts the upper tone
    when the root ends.
    """
    settings = settings or PlaybackSettings()
    duration = seconds_to_ticks(settings.tone_seconds, settings.tempo_bpm)
    velocity = amplitude_to_velocity(settings.amplitude)

    root_note, root_bend = frequency_to_midi(settings.base_frequency, settings.pitch_bend_range)
    upper_note, upper_bend = frequency_to_midi(
        settings.base_frequency * ratio.to_frequency_ratio(), settings.pitch_bend_range
    )
    upper_start = 0 if mode == PlaybackMode.CHORD else duration

    return [
        ToneEvent(
            pitch=root_note,
            bend=root_bend,
            start_ticks=0,
            duration_ticks=duration,
            velocity=velocity,
            channel=ROOT_CHANNEL,
        ),
        ToneEvent(
            pitch=upper_note,
            bend=upper_bend,
            start_ticks=upper_start,
            duration_ticks=duration,
            velocity=velocity,
            channel=UPPER_CHANNEL,
        ),
    ]


def events_to_midi(
    events: Sequence[ToneEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of ToneEvents to a MidiFile.

    Args:
        events: Sequence of ToneEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved or played
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    # (absolute ticks, order at equal ticks, message)
    # note_off first, then the bend, then the note it bends
    messages: list[tuple[int, int, Message]] = []

    for event in events:
        messages.append(
            (
                event.start_ticks,
                1,
                Message("pitchwheel", channel=event.channel, pitch=event.bend, time=0),
            )
        )
        messages.append(
            (
                event.start_ticks,
                2,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                0,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    messages.sort(key=lambda x: (x[0], x[1]))

    # Convert to delta times
    current_time = 0
    for abs_time, _, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def render_ratio(
    ratio: Ratio,
    mode: PlaybackMode,
    settings: PlaybackSettings | None = None,
) -> MidiFile:
    """
    Render a ratio as a MidiFile in the given playback mode.

    Example:
        mid = render_ratio(Ratio(7, 6), PlaybackMode.CHORD)
        mid.save("septimal_minor_third.mid")
    """
    settings = settings or PlaybackSettings()
    events = ratio_to_events(ratio, mode, settings)
    return events_to_midi(events, tempo_bpm=settings.tempo_bpm)
