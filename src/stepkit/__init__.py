"""Provides all stepkit methods."""

from importlib.metadata import PackageNotFoundError, version

from stepkit.config import StepConfig
from stepkit.finite.difference import (
    central_difference_sequence,
    difference_sequence,
    forward_difference_sequence,
    register_difference_method,
    step_schedule,
)
from stepkit.limits.estimator import estimate_limit, one_sided_estimates

try:
    __version__ = version("stepkit")
except PackageNotFoundError:
    pass

__all__ = [
    "StepConfig",
    "central_difference_sequence",
    "difference_sequence",
    "estimate_limit",
    "forward_difference_sequence",
    "one_sided_estimates",
    "register_difference_method",
    "step_schedule",
]
