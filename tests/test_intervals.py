"""
Tests for the interval library and models.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_tuning.core import Ratio
from chuk_mcp_tuning.intervals import IntervalLibrary
from chuk_mcp_tuning.models import NamedInterval, PlaybackSettings, RatioSummary


class TestNamedInterval:
    """Tests for the NamedInterval model."""

    def test_to_ratio(self) -> None:
        interval = NamedInterval(name="major third", ratio="10/8")
        assert interval.to_ratio() == Ratio(5, 4)

    def test_invalid_ratio_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NamedInterval(name="broken", ratio="3/0")

    def test_matches(self) -> None:
        interval = NamedInterval(name="major second", ratio="9/8", aliases=["M2"])
        assert interval.matches("Major Second")
        assert interval.matches("M2")
        assert not interval.matches("m2")


class TestRatioSummary:
    """Tests for RatioSummary."""

    def test_from_ratio(self) -> None:
        summary = RatioSummary.from_ratio(Ratio(3, 2))
        assert summary.ratio == "3/2"
        assert summary.frequency_ratio == 1.5
        assert summary.cents == pytest.approx(701.955)
        assert summary.limit == 3


class TestPlaybackSettings:
    """Tests for PlaybackSettings."""

    def test_defaults(self) -> None:
        settings = PlaybackSettings()
        assert settings.base_frequency == 220.0
        assert settings.tone_seconds == 1.0
        assert settings.amplitude == 0.2

    def test_invalid(self) -> None:
        with pytest.raises(ValidationError):
            PlaybackSettings(amplitude=2.0)
        with pytest.raises(ValidationError):
            PlaybackSettings(base_frequency=0)

    def test_from_yaml(self, temp_dir: Path) -> None:
        path = temp_dir / "tuning.yaml"
        path.write_text("playback:\n  base_frequency: 261.63\n  tempo_bpm: 60\n")
        settings = PlaybackSettings.from_yaml(path)
        assert settings.base_frequency == 261.63
        assert settings.tempo_bpm == 60
        assert settings.tone_seconds == 1.0

    def test_from_empty_yaml(self, temp_dir: Path) -> None:
        path = temp_dir / "tuning.yaml"
        path.write_text("")
        assert PlaybackSettings.from_yaml(path) == PlaybackSettings()


class TestIntervalLibrary:
    """Tests for the IntervalLibrary loader."""

    def test_builtin_set(self) -> None:
        library = IntervalLibrary()
        names = [s.name for s in library.list_sets()]
        assert "just" in names

    def test_get_set(self) -> None:
        library = IntervalLibrary()
        just = library.get_set("just")
        assert just is not None
        assert all(i.to_ratio().denominator <= i.to_ratio().numerator for i in just.intervals)

    def test_get_missing_set(self) -> None:
        assert IntervalLibrary().get_set("nonexistent") is None

    def test_find_by_name_and_alias(self) -> None:
        library = IntervalLibrary()
        assert library.find("perfect fifth").to_ratio() == Ratio(3, 2)
        assert library.find("P5").to_ratio() == Ratio(3, 2)
        assert library.find("M2").to_ratio() == Ratio(9, 8)
        assert library.find("m2").to_ratio() == Ratio(16, 15)
        assert library.find("harmonic seventh").to_ratio().limit() == 7
        assert library.find("nope") is None

    def test_project_overrides_library(self, temp_dir: Path) -> None:
        (temp_dir / "just.yaml").write_text(
            "name: just\nintervals:\n  - name: fifth\n    ratio: '3/2'\n"
        )
        library = IntervalLibrary(project_path=temp_dir)

        just = library.get_set("just")
        assert just is not None
        assert [i.name for i in just.intervals] == ["fifth"]
        listed = {s.name: s for s in library.list_sets()}
        assert len(listed["just"].intervals) == 1

    def test_name_defaults_to_file_stem(self, temp_dir: Path) -> None:
        (temp_dir / "septimal.yaml").write_text(
            "intervals:\n  - name: subminor third\n    ratio: 7/6\n"
        )
        library = IntervalLibrary(project_path=temp_dir)
        assert library.get_set("septimal") is not None
        assert library.find("subminor third").to_ratio() == Ratio(7, 6)

    def test_invalid_file_skipped(self, temp_dir: Path) -> None:
        (temp_dir / "broken.yaml").write_text("intervals:\n  - name: nothing\n    ratio: 0/1\n")
        library = IntervalLibrary(library_path=temp_dir)
        assert library.get_set("broken") is None
        assert library.list_sets() == []

    def test_clear_cache(self, temp_dir: Path) -> None:
        path = temp_dir / "mine.yaml"
        path.write_text("intervals:\n  - name: fifth\n    ratio: 3/2\n")
        library = IntervalLibrary(library_path=temp_dir)
        assert len(library.get_set("mine").intervals) == 1

        path.write_text(
            "intervals:\n  - name: fifth\n    ratio: 3/2\n  - name: fourth\n    ratio: 4/3\n"
        )
        assert len(library.get_set("mine").intervals) == 1
        library.clear_cache()
        assert len(library.get_set("mine").intervals) == 2
