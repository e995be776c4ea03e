"""
Interval models - named just intervals and the sets they ship in.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_tuning.core import Ratio


class NamedInterval(BaseModel):
    """A just interval with a conventional name."""

    name: str = Field(..., description="Interval name")
    ratio: str = Field(..., description="Ratio notation, e.g. '3/2'")
    description: str = Field("", description="Human-readable description")
    aliases: list[str] = Field(default_factory=list, description="Alternative names")

    model_config = {"frozen": True}

    @field_validator("ratio")
    @classmethod
    def ratio_must_parse(cls, value: str) -> str:
        Ratio.parse(value)
        return value

    def to_ratio(self) -> Ratio:
        """The normalized Ratio for this interval."""
        return Ratio.parse(self.ratio)

    def matches(self, name: str) -> bool:
        """
        Check a name against this interval's name and aliases.

        Names match case-insensitively; aliases are exact, since M2 != m2.
        """
        wanted = name.strip()
        return wanted.lower() == self.name.lower() or wanted in self.aliases


class IntervalSet(BaseModel):
    """A named collection of intervals, loaded from one YAML file."""

    name: str = Field(..., description="Set name")
    description: str = Field("", description="Set description")
    intervals: list[NamedInterval] = Field(default_factory=list, description="Intervals")

    def find(self, name: str) -> NamedInterval | None:
        """Find an interval by name or alias."""
        for interval in self.intervals:
            if interval.matches(name):
                return interval
        return None


class RatioSummary(BaseModel):
    """Serializable view of a Ratio."""

    ratio: str
    numerator: int
    denominator: int
    frequency_ratio: float
    cents: float
    limit: int

    @classmethod
    def from_ratio(cls, ratio: Ratio) -> RatioSummary:
        """Summarize a Ratio."""
        return cls(
            ratio=str(ratio),
            numerator=ratio.numerator,
            denominator=ratio.denominator,
            frequency_ratio=ratio.to_frequency_ratio(),
            cents=round(ratio.cents, 3),
            limit=ratio.limit(),
        )
