"""Tests for stepkit.utils.numerics."""

import numpy as np
from numpy.testing import assert_allclose

from stepkit.utils.numerics import absolute_errors, as_float


def test_as_float_gives_ieee_division():
    """Tests that arithmetic on converted values yields inf/nan instead of raising."""
    x = as_float(0.5)
    assert isinstance(x, np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        assert np.isinf(x / (2 * x - 1))
        assert np.isnan((x - x) / (x - x))


def test_absolute_errors_values():
    """Tests element-wise absolute errors."""
    assert_allclose(absolute_errors([2.1, 1.9, 2.0], 2.0), [0.1, 0.1, 0.0], atol=1e-15)


def test_absolute_errors_propagates_non_finite():
    """Tests that non-finite approximations give non-finite errors."""
    err = absolute_errors([np.nan, np.inf, 2.0], 2.0)
    assert np.isnan(err[0])
    assert np.isinf(err[1])
    assert err[2] == 0.0


def test_absolute_errors_empty():
    """Tests that an empty sequence gives an empty error array."""
    assert absolute_errors([], 1.0).shape == (0,)
