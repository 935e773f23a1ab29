"""Example functions used by the console drivers and the tests."""

from __future__ import annotations

__all__ = [
    "quadratic",
    "dquadratic",
    "pole_at_half",
    "pole_at_five_quarters",
]


def quadratic(x: float) -> float:
    """Returns x^2 - 2x - 1."""
    return x * x - 2 * x - 1


def dquadratic(x: float) -> float:
    """Returns derivative of x^2 - 2x - 1: 2x - 2."""
    return 2 * x - 2


def pole_at_half(x: float) -> float:
    """Returns x / (2x - 1), which has a vertical asymptote at x = 0.5."""
    return x / (2 * x - 1)


def pole_at_five_quarters(x: float) -> float:
    """Returns (x^2 - 3) / (4x - 5), which has a vertical asymptote at x = 1.25."""
    return (x * x - 3) / (4 * x - 5)
