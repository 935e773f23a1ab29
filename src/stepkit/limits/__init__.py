"""Numerical limit estimation."""

from .estimator import estimate_limit, one_sided_estimates

__all__ = ["estimate_limit", "one_sided_estimates"]
