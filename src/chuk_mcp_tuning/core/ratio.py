"""
Ratio - an exact interval as a normalized, reduced fraction.

A Ratio always lies within one octave, [1, 2], and is always in lowest
terms. Every operation builds its result through the constructor, so
those invariants hold for every live value.

Terms are 64-bit signed integers; arithmetic that would overflow raises
RatioOverflowError instead of wrapping.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import ClassVar

from chuk_mcp_tuning.core.errors import InvalidRatioError
from chuk_mcp_tuning.core.math import (
    checked,
    checked_pow,
    greatest_prime_factor,
    normalize_pair,
    reduce,
)


@total_ordering
@dataclass(frozen=True)
class Ratio:
    """
    A just-intonation interval within one octave.

    Ratio(10, 8) == Ratio(5, 4)
    Ratio(1, 2) == Ratio(4, 1) == Ratio(2, 1)   # octave class collapses to 2/1
    Ratio(1, 1)                                 # only true unison stays 1/1

    Immutable and hashable.
    """

    numerator: int
    denominator: int = 1

    # Named intervals (defined after class)
    UNISON: ClassVar[Ratio]
    OCTAVE: ClassVar[Ratio]
    PERFECT_FIFTH: ClassVar[Ratio]
    PERFECT_FOURTH: ClassVar[Ratio]
    MAJOR_THIRD: ClassVar[Ratio]
    MINOR_THIRD: ClassVar[Ratio]
    SEPTIMAL_MINOR_THIRD: ClassVar[Ratio]
    MAJOR_SECOND: ClassVar[Ratio]

    def __post_init__(self) -> None:
        for term in (self.numerator, self.denominator):
            if isinstance(term, bool) or not isinstance(term, int):
                raise TypeError(f"Ratio terms must be integers, got {term!r}")
        if self.numerator <= 0 or self.denominator <= 0:
            raise InvalidRatioError(
                f"Ratio terms must be positive, got {self.numerator}/{self.denominator}"
            )
        checked(self.numerator)
        checked(self.denominator)

        numerator, denominator = normalize_pair(self.numerator, self.denominator)
        numerator, denominator = reduce(numerator, denominator)
        object.__setattr__(self, "numerator", numerator)
        object.__setattr__(self, "denominator", denominator)

    def complement(self) -> Ratio:
        """
        Octave inversion: the interval that completes this one to 2/1.

        3/2 -> 4/3
        5/4 -> 8/5
        """
        return Ratio(2, 1) / self

    def pow(self, exponent: int) -> Ratio:
        """
        Stack this interval `exponent` times, folded back into the octave.

        A negative exponent stacks the complement instead. Large exponents can
        overflow the 64-bit terms before folding; that raises RatioOverflowError.
        """
        if exponent == 0:
            return Ratio(1, 1)
        if exponent < 0:
            return self.complement().pow(-exponent)
        return Ratio(
            checked_pow(self.numerator, exponent),
            checked_pow(self.denominator, exponent),
        )

    def limit(self) -> int:
        """
        Harmonic (prime) limit: the largest prime in either term.

        Degenerate for 1/1 and 2/1, where a term of 1 contributes 2.
        """
        return max(
            greatest_prime_factor(self.numerator),
            greatest_prime_factor(self.denominator),
        )

    def to_frequency_ratio(self) -> float:
        """Frequency multiplier, e.g. 1.5 for 3/2."""
        return self.numerator / self.denominator

    @property
    def cents(self) -> float:
        """Size in cents (1200 per octave)."""
        return 1200 * math.log2(self.to_frequency_ratio())

    def to_fraction(self) -> Fraction:
        """Exact value as a Fraction."""
        return Fraction(self.numerator, self.denominator)

    @classmethod
    def from_fraction(cls, value: Fraction) -> Ratio:
        """Build a Ratio from a positive Fraction."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def parse(cls, notation: str) -> Ratio:
        """
        Parse a ratio from notation like '3/2', '7:6' or '3'.

        Args:
            notation: Ratio string

        Returns:
            Ratio object
        """
        text = notation.strip().replace(":", "/")
        parts = text.split("/")
        if len(parts) not in (1, 2):
            raise InvalidRatioError(f"Invalid ratio format: {notation}")
        try:
            terms = [int(part) for part in parts]
        except ValueError as e:
            raise InvalidRatioError(f"Invalid ratio format: {notation}") from e
        return cls(*terms)

    def __mul__(self, other: Ratio) -> Ratio:
        """Stack two intervals."""
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(
            checked(self.numerator * other.numerator),
            checked(self.denominator * other.denominator),
        )

    def __truediv__(self, other: Ratio) -> Ratio:
        """Remove one interval from another."""
        if not isinstance(other, Ratio):
            return NotImplemented
        return Ratio(
            checked(self.numerator * other.denominator),
            checked(self.denominator * other.numerator),
        )

    def __neg__(self) -> Ratio:
        """Negation in log-frequency space is octave inversion."""
        return self.complement()

    def __pow__(self, exponent: int) -> Ratio:
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __float__(self) -> float:
        return self.to_frequency_ratio()

    def __lt__(self, other: Ratio) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.numerator * other.denominator < other.numerator * self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


# Define named intervals
Ratio.UNISON = Ratio(1, 1)
Ratio.OCTAVE = Ratio(2, 1)
Ratio.PERFECT_FIFTH = Ratio(3, 2)
Ratio.PERFECT_FOURTH = Ratio(4, 3)
Ratio.MAJOR_THIRD = Ratio(5, 4)
Ratio.MINOR_THIRD = Ratio(6, 5)
Ratio.SEPTIMAL_MINOR_THIRD = Ratio(7, 6)
Ratio.MAJOR_SECOND = Ratio(9, 8)
