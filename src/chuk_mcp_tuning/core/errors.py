"""
Errors raised by the ratio arithmetic.
"""


class InvalidRatioError(ValueError):
    """A ratio term is zero or negative, or a ratio string can't be parsed."""


class RatioOverflowError(ArithmeticError):
    """An intermediate value left the signed 64-bit range."""
