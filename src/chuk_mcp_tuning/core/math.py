"""
Numeric kernel - integer helpers behind the Ratio type.

Pure functions on positive integers:
- gcd / reduce: lowest terms
- normalize_pair: fold a pair into one octave, [1, 2]
- greatest_prime_factor: trial division, used for harmonic limit
- checked: fixed-width (signed 64-bit) overflow guard
"""

from __future__ import annotations

from chuk_mcp_tuning.core.errors import RatioOverflowError

# Ratio terms are signed 64-bit integers
INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


def checked(value: int) -> int:
    """Return value unchanged, or raise if it doesn't fit in a signed 64-bit integer."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise RatioOverflowError(f"Value {value} overflows a 64-bit ratio term")
    return value


def checked_pow(base: int, exponent: int) -> int:
    """Raise a non-negative base to a non-negative power, refusing 64-bit overflow."""
    # base >= 2**(bit_length - 1), so this bound already guarantees overflow
    if base > 1 and (base.bit_length() - 1) * exponent >= 63:
        raise RatioOverflowError(f"{base}**{exponent} overflows a 64-bit ratio term")
    return checked(base**exponent)


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by repeated remainder (Euclid).

    gcd(n, n) == n, and gcd(a, b) == b when b divides a.
    """
    while a % b > 0:
        a, b = b, a % b
    return b


def reduce(a: int, b: int) -> tuple[int, int]:
    """Divide both terms by their gcd. b must be non-zero."""
    g = gcd(a, b)
    return a // g, b // g


def normalize_pair(a: int, b: int) -> tuple[int, int]:
    """
    Scale a pair by powers of two until a/b lies in [1, 2].

    Comparisons use integer cross-products, so boundaries are exact.

    Edge cases:
        a/b == 2: returned as is
        a/b == 1: (1, 1) only when the pair is (1, 1), otherwise (2, 1)

    Args:
        a: Positive numerator
        b: Positive denominator

    Returns:
        The normalized (numerator, denominator), not yet reduced
    """
    while a < b:
        a = checked(a * 2)
    while a > 2 * b:
        b = checked(b * 2)

    if a == b:
        # Any octave-equivalent of unison other than 1/1 itself is the octave
        if a == 1:
            return 1, 1
        return 2, 1
    return a, b


def greatest_prime_factor(a: int) -> int:
    """
    Largest prime factor of a, by trial division from 2.

    greatest_prime_factor(1) returns 2: there is no prime factor, so
    callers shouldn't read that as a meaningful limit.
    """
    p = 2
    while a > 1:
        if a % p == 0:
            a //= p
        else:
            p += 1
    return p
