"""Forward- and central-difference derivative sequences.

Both schemes start from an initial step ``h`` and halve it after every
term, so entry ``i`` of a sequence uses the step ``h / 2**i``. Reading a
sequence in order shows how the approximation converges as the step
shrinks, and eventually how it degrades once round-off dominates.

Adding methods
--------------
Further schemes can be registered without modifying this module by calling
``register_difference_method``.

Examples:
--------
>>> from stepkit.finite.difference import difference_sequence
>>> f = lambda x: x**2 - 2 * x - 1
>>> seq = difference_sequence(2.0, 0.1, 4, f, method="central")
>>> seq.shape
(4,)
>>> difference_sequence(2.0, 0.1, 0, f, method="fd").size
0
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, Iterable, Mapping

import numpy as np

from stepkit.logger import stepkit_logger
from stepkit.utils.numerics import as_float
from stepkit.utils.types import FloatArray, RealFunction

__all__ = [
    "step_schedule",
    "forward_difference_sequence",
    "central_difference_sequence",
    "difference_sequence",
    "register_difference_method",
    "available_methods",
]

SequenceGenerator = Callable[[float, float, int, RealFunction], FloatArray]


def step_schedule(initial_h: float, n: int) -> FloatArray:
    """Returns the ``n`` step sizes used by the difference sequences.

    Args:
        initial_h: Step of the first term.
        n: Number of terms.

    Returns:
        1D array whose entry ``i`` is ``initial_h / 2**i``, obtained by
        repeated halving.
    """
    h = as_float(initial_h)
    steps: list[np.float64] = []
    for _ in range(n):
        steps.append(h)
        h /= 2.0
    return np.asarray(steps, dtype=float)


def _warn_underflow(initial_h: float, i: int) -> None:
    """Logs that the halved step has reached zero."""
    stepkit_logger.warning(
        "Step size underflowed to zero at term %d (initial step %g); "
        "remaining terms are not finite.",
        i, float(initial_h),
    )


def forward_difference_sequence(
    x: float,
    initial_h: float,
    n: int,
    function: RealFunction,
) -> FloatArray:
    """Computes forward-difference approximations of ``f'(x)``.

    Term ``i`` is ``(f(x + h) - f(x)) / h`` with ``h = initial_h / 2**i``.
    The step is never clamped; once it underflows the terms become
    ``inf`` or ``nan``.

    Args:
        x: Point at which the derivative is approximated.
        initial_h: Step of the first term.
        n: Number of terms. Non-positive values give an empty array.
        function: Real function of one real variable.

    Returns:
        1D array of ``n`` approximations ordered by decreasing step.
    """
    x0 = as_float(x)
    h = as_float(initial_h)
    derivatives: list[np.float64] = []
    warned = False

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(n):
            if not warned and h == 0.0 and initial_h != 0.0:
                _warn_underflow(initial_h, i)
                warned = True
            d_dx = (np.float64(function(x0 + h)) - np.float64(function(x0))) / h
            derivatives.append(d_dx)
            h /= 2.0

    return np.asarray(derivatives, dtype=float)


def central_difference_sequence(
    x: float,
    initial_h: float,
    n: int,
    function: RealFunction,
) -> FloatArray:
    """Computes central-difference approximations of ``f'(x)``.

    Term ``i`` is ``(f(x + h) - f(x - h)) / (2 h)`` with
    ``h = initial_h / 2**i``. The error of each term is second order in
    ``h``, against first order for :func:`forward_difference_sequence`.

    Args:
        x: Point at which the derivative is approximated.
        initial_h: Step of the first term.
        n: Number of terms. Non-positive values give an empty array.
        function: Real function of one real variable.

    Returns:
        1D array of ``n`` approximations ordered by decreasing step.
    """
    x0 = as_float(x)
    h = as_float(initial_h)
    derivatives: list[np.float64] = []
    warned = False

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(n):
            if not warned and h == 0.0 and initial_h != 0.0:
                _warn_underflow(initial_h, i)
                warned = True
            d_dx = (np.float64(function(x0 + h)) - np.float64(function(x0 - h))) / (2.0 * h)
            derivatives.append(d_dx)
            h /= 2.0

    return np.asarray(derivatives, dtype=float)


# Built-in schemes: (canonical name, generator, aliases).
_METHOD_SPECS: list[tuple[str, SequenceGenerator, list[str]]] = [
    ("forward", forward_difference_sequence, ["finite", "finite-difference", "fd"]),
    ("central", central_difference_sequence, ["central-difference", "cd"]),
]


def _norm(s: str) -> str:
    """Normalizes a method string (case/spacing/punctuation insensitive)."""
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _method_maps() -> tuple[Mapping[str, SequenceGenerator], tuple[str, ...]]:
    """Builds and caches the name/alias lookup table.

    Returns:
        A pair ``(method_map, canonical_names)`` where ``method_map`` maps
        normalized names and aliases to generators and ``canonical_names``
        lists the sorted canonical names.
    """
    method_map: dict[str, SequenceGenerator] = {}
    canonical: set[str] = set()
    for name, fn, aliases in _METHOD_SPECS:
        k = _norm(name)
        method_map[k] = fn
        canonical.add(k)
        for a in aliases:
            method_map[_norm(a)] = fn
    return method_map, tuple(sorted(canonical))


def register_difference_method(
    name: str,
    fn: SequenceGenerator,
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Registers a new difference scheme.

    Args:
        name: Canonical public name of the scheme (e.g. ``"backward"``).
        fn: Generator with the signature of
            :func:`forward_difference_sequence`.
        aliases: Additional accepted spellings.
    """
    _METHOD_SPECS.append((name, fn, list(aliases)))
    _method_maps.cache_clear()


def available_methods() -> tuple[str, ...]:
    """Returns the sorted canonical names of the registered schemes."""
    return _method_maps()[1]


def _resolve(method: str) -> SequenceGenerator:
    """Resolves a method name or alias to its generator."""
    method_map, canon = _method_maps()
    try:
        return method_map[_norm(method)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown difference method '{method}'. Choose one of {{{opts}}}.") from None


def difference_sequence(
    x: float,
    initial_h: float,
    n: int,
    function: RealFunction,
    method: str = "central",
) -> FloatArray:
    """Computes a derivative sequence with the scheme named by ``method``.

    Args:
        x: Point at which the derivative is approximated.
        initial_h: Step of the first term.
        n: Number of terms.
        function: Real function of one real variable.
        method: Scheme name or alias, e.g. ``"forward"``, ``"fd"``,
            ``"central"``. Matching ignores case and punctuation.

    Returns:
        1D array of ``n`` approximations ordered by decreasing step.

    Raises:
        ValueError: If ``method`` is not a registered scheme.
    """
    return _resolve(method)(x, initial_h, n, function)
