"""
Equal division of the octave (EDO).

Pairs a step count with the division it belongs to. No pitch math here;
tempered intervals aren't rational and stay out of Ratio.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edo:
    """
    An equal division of the octave into `divisions` steps.

    Examples:
        Edo(12) = standard 12-tone equal temperament
        Edo(31) = 31-EDO
    """

    divisions: int

    def __post_init__(self) -> None:
        if self.divisions <= 0:
            raise ValueError(f"Divisions must be positive, got {self.divisions}")

    def interval(self, steps: int) -> EdoInterval:
        """Get the interval of `steps` steps in this division."""
        return EdoInterval(edo=self, steps=steps)

    def __str__(self) -> str:
        return f"{self.divisions}-EDO"


@dataclass(frozen=True)
class EdoInterval:
    """A number of steps within an EDO."""

    edo: Edo
    steps: int

    def __post_init__(self) -> None:
        if self.steps < 0:
            raise ValueError(f"Steps must be non-negative, got {self.steps}")

    def __str__(self) -> str:
        return f"{self.steps}\\{self.edo.divisions}"
