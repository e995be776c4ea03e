"""
Playback tests - ratios rendered to MIDI.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_tuning.constants import ROOT_CHANNEL, UPPER_CHANNEL, PlaybackMode
from chuk_mcp_tuning.core import Ratio
from chuk_mcp_tuning.models.playback import PlaybackSettings
from chuk_mcp_tuning.playback import (
    TICKS_PER_BEAT,
    ToneEvent,
    events_to_midi,
    frequency_to_midi,
    ratio_to_events,
    render_ratio,
)
from chuk_mcp_tuning.playback.midi import amplitude_to_velocity, seconds_to_ticks


class TestToneEvent:
    """Test ToneEvent validation."""

    def test_create_valid_event(self) -> None:
        event = ToneEvent(pitch=60, bend=-1357, start_ticks=0, duration_ticks=960, velocity=25)
        assert event.channel == ROOT_CHANNEL

    def test_bend_range(self) -> None:
        with pytest.raises(ValueError, match="Bend must be"):
            ToneEvent(pitch=60, bend=9000, start_ticks=0, duration_ticks=960, velocity=25)

    def test_pitch_range(self) -> None:
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            ToneEvent(pitch=128, bend=0, start_ticks=0, duration_ticks=960, velocity=25)


class TestConversions:
    """Test frequency and timing helpers."""

    def test_reference_pitches(self) -> None:
        assert frequency_to_midi(440.0) == (69, 0)
        assert frequency_to_midi(220.0) == (57, 0)

    def test_septimal_minor_third_is_bent_down(self) -> None:
        """7/6 above A3 is about a third of a semitone flat of C4."""
        note, bend = frequency_to_midi(220.0 * 7 / 6)
        assert note == 60
        assert -1400 < bend < -1300

    def test_wider_bend_range_halves_bend(self) -> None:
        _, narrow = frequency_to_midi(220.0 * 7 / 6, bend_range=2)
        _, wide = frequency_to_midi(220.0 * 7 / 6, bend_range=4)
        assert abs(wide - narrow / 2) <= 1

    def test_invalid_frequency(self) -> None:
        with pytest.raises(ValueError):
            frequency_to_midi(0)

    def test_seconds_to_ticks(self) -> None:
        assert seconds_to_ticks(1.0, 120) == 2 * TICKS_PER_BEAT
        assert seconds_to_ticks(0.5, 60) == TICKS_PER_BEAT

    def test_amplitude_to_velocity(self) -> None:
        assert amplitude_to_velocity(0.2) == 25
        assert amplitude_to_velocity(1.5) == 127
        assert amplitude_to_velocity(0.0) == 0


class TestRatioToEvents:
    """Test tone layout per playback mode."""

    def test_chord_starts_together(self) -> None:
        root, upper = ratio_to_events(Ratio(3, 2), PlaybackMode.CHORD)
        assert root.start_ticks == upper.start_ticks == 0
        assert root.channel == ROOT_CHANNEL
        assert upper.channel == UPPER_CHANNEL

    def test_interval_is_sequential(self) -> None:
        root, upper = ratio_to_events(Ratio(3, 2), PlaybackMode.INTERVAL)
        assert root.start_ticks == 0
        assert upper.start_ticks == root.duration_ticks == 960

    def test_upper_tone_frequency(self) -> None:
        """A perfect fifth above A3 lands just sharp of E4."""
        root, upper = ratio_to_events(Ratio(3, 2), PlaybackMode.CHORD)
        assert root.pitch == 57
        assert upper.pitch == 64
        assert 0 < upper.bend < 100

    def test_octave(self) -> None:
        root, upper = ratio_to_events(Ratio(2, 1), PlaybackMode.CHORD)
        assert upper.pitch == root.pitch + 12
        assert upper.bend == 0

    def test_settings(self) -> None:
        settings = PlaybackSettings(base_frequency=440.0, tone_seconds=0.5, amplitude=1.0)
        root, upper = ratio_to_events(Ratio(2, 1), PlaybackMode.INTERVAL, settings)
        assert root.pitch == 69
        assert root.velocity == 127
        assert upper.start_ticks == 480


class TestEventsToMidi:
    """Test MIDI file construction."""

    def test_empty_events(self) -> None:
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_chord_message_order(self) -> None:
        mid = render_ratio(Ratio(7, 6), PlaybackMode.CHORD)
        types = [msg.type for msg in mid.tracks[0]]
        assert types == [
            "set_tempo",
            "pitchwheel",
            "pitchwheel",
            "note_on",
            "note_on",
            "note_off",
            "note_off",
            "end_of_track",
        ]

    def test_interval_message_order(self) -> None:
        mid = render_ratio(Ratio(7, 6), PlaybackMode.INTERVAL)
        track = mid.tracks[0]
        types = [msg.type for msg in track]
        assert types == [
            "set_tempo",
            "pitchwheel",
            "note_on",
            "note_off",
            "pitchwheel",
            "note_on",
            "note_off",
            "end_of_track",
        ]
        # Root ends exactly where the upper tone begins
        assert track[3].time == 960
        assert track[4].time == 0
        assert track[6].time == 960

    def test_bend_applies_to_upper_channel(self) -> None:
        mid = render_ratio(Ratio(7, 6), PlaybackMode.CHORD)
        bends = {msg.channel: msg.pitch for msg in mid.tracks[0] if msg.type == "pitchwheel"}
        assert bends[ROOT_CHANNEL] == 0
        assert bends[UPPER_CHANNEL] < 0

    def test_length(self) -> None:
        assert render_ratio(Ratio(3, 2), PlaybackMode.CHORD).length == pytest.approx(1.0)
        assert render_ratio(Ratio(3, 2), PlaybackMode.INTERVAL).length == pytest.approx(2.0)

    def test_save_and_reload(self, temp_midi_path: Path) -> None:
        render_ratio(Ratio(5, 4), PlaybackMode.INTERVAL).save(str(temp_midi_path))
        loaded = MidiFile(str(temp_midi_path))
        note_ons = [msg for msg in loaded.tracks[0] if msg.type == "note_on"]
        assert len(note_ons) == 2
