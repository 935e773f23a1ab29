"""Utility functions for the stepkit package."""

from .numerics import absolute_errors, as_float
from .types import FloatArray, RealFunction

__all__ = [
    "absolute_errors",
    "as_float",
    "FloatArray",
    "RealFunction",
]
