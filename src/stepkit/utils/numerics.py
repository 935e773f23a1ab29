"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from stepkit.utils.types import FloatArray

__all__ = [
    "as_float",
    "absolute_errors",
]


def as_float(x: float) -> np.float64:
    """Converts a scalar to ``np.float64``.

    Evaluating a user function at ``np.float64`` arguments keeps its
    arithmetic in IEEE-754 semantics, so ``1 / 0`` gives ``inf`` and
    ``0 / 0`` gives ``nan`` instead of raising ``ZeroDivisionError``.

    Args:
        x: Scalar input.

    Returns:
        The input as a NumPy double.
    """
    return np.float64(x)


def absolute_errors(values: ArrayLike, exact: float) -> FloatArray:
    """Computes the element-wise absolute error of approximations.

    Non-finite approximations give non-finite errors.

    Args:
        values: Sequence of approximations.
        exact: Reference value.

    Returns:
        1D array of ``|values[i] - exact|``.
    """
    vals = np.asarray(values, dtype=float)
    with np.errstate(invalid="ignore", over="ignore"):
        return np.abs(vals - float(exact))
