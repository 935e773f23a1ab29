"""Finite-difference derivative sequences."""

from .difference import (
    available_methods,
    central_difference_sequence,
    difference_sequence,
    forward_difference_sequence,
    register_difference_method,
    step_schedule,
)

__all__ = [
    "available_methods",
    "central_difference_sequence",
    "difference_sequence",
    "forward_difference_sequence",
    "register_difference_method",
    "step_schedule",
]
