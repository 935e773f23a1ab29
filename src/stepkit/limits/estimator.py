"""Two-sided numerical limit estimation.

The limit of ``f`` as ``x`` approaches ``target`` is estimated by probing
``f`` at ``target - step`` and ``target + step`` while halving ``step``.
The left- and right-sided values of the final iteration are compared
against a tolerance: if they agree, their average is the limit, otherwise
the limit is reported as ``nan`` (does not exist).

Examples:
--------
>>> from stepkit.limits.estimator import estimate_limit
>>> round(estimate_limit(2.0, 10, 0.1, 1e-3, lambda x: x**2 - 2 * x - 1), 4)
-1.0
>>> estimate_limit(0.5, 10, 0.1, 1e-3, lambda x: x / (2 * x - 1))
nan
"""

from __future__ import annotations

import numpy as np

from stepkit.logger import stepkit_logger
from stepkit.utils.numerics import as_float
from stepkit.utils.types import RealFunction

__all__ = [
    "one_sided_estimates",
    "estimate_limit",
]


def one_sided_estimates(
    target: float,
    iterations: int,
    initial_step: float,
    function: RealFunction,
) -> tuple[np.float64, np.float64]:
    """Returns the left- and right-sided values of the final iteration.

    Every iteration evaluates ``function`` on both sides of ``target`` and
    then halves the step; only the last pair is kept. With no iterations
    both values stay at ``0.0``.

    Args:
        target: Point the argument approaches.
        iterations: Number of halving iterations.
        initial_step: Distance from ``target`` at the first iteration.
        function: Real function of one real variable.

    Returns:
        A ``(left, right)`` tuple of ``np.float64`` values.
    """
    a = as_float(target)
    step = as_float(initial_step)
    left = np.float64(0.0)
    right = np.float64(0.0)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for _ in range(iterations):
            left = np.float64(function(a - step))
            right = np.float64(function(a + step))
            step /= 2.0

    return left, right


def estimate_limit(
    target: float,
    iterations: int,
    initial_step: float,
    tolerance: float,
    function: RealFunction,
) -> float:
    """Estimates the limit of ``function`` as its argument approaches ``target``.

    Args:
        target: Point the argument approaches.
        iterations: Number of halving iterations. With ``0`` iterations the
            sided values are never evaluated and the result is ``0.0``.
        initial_step: Distance from ``target`` at the first iteration.
        tolerance: Largest accepted ``|right - left|``.
        function: Real function of one real variable.

    Returns:
        The average of the final left- and right-sided values if they agree
        within ``tolerance``, otherwise ``nan``. Non-finite sided values
        always give ``nan``.
    """
    left, right = one_sided_estimates(target, iterations, initial_step, function)

    with np.errstate(invalid="ignore", over="ignore"):
        gap = abs(right - left)
        if gap <= tolerance:
            return float((left + right) / 2.0)

    stepkit_logger.debug(
        "Limit at %g does not exist within tolerance %g: left=%g, right=%g.",
        float(target), float(tolerance), float(left), float(right),
    )
    return float("nan")
