"""Console drivers printing limit estimates and derivative sequences.

Run with:
    python -m stepkit.drivers            # both reports
    python -m stepkit.drivers limits
    python -m stepkit.drivers derivatives
"""

from __future__ import annotations

import sys
from typing import Sequence

from stepkit.config import StepConfig
from stepkit.examples import pole_at_five_quarters, pole_at_half, quadratic
from stepkit.finite.difference import (
    central_difference_sequence,
    forward_difference_sequence,
)
from stepkit.limits.estimator import estimate_limit

__all__ = [
    "limit_report",
    "derivative_report",
    "main",
]

# (target, function) pairs, printed in this order.
LIMIT_CASES = [
    (2.0, quadratic),
    (5.0, pole_at_half),
    (3.0, pole_at_five_quarters),
]

DERIVATIVE_POINT = 2.0


def _fmt(value: float) -> str:
    return "%g" % value


def limit_report(config: StepConfig | None = None) -> list[str]:
    """Returns one line per example limit."""
    cfg = config if config is not None else StepConfig()
    lines = []
    for target, f in LIMIT_CASES:
        lim = estimate_limit(target, cfg.iterations, cfg.initial_step, cfg.tolerance, f)
        lines.append(_fmt(lim))
    return lines


def derivative_report(config: StepConfig | None = None) -> list[str]:
    """Returns one ``forward central`` line per term of the derivative sequences."""
    cfg = config if config is not None else StepConfig()
    f_d = forward_difference_sequence(DERIVATIVE_POINT, cfg.initial_step, cfg.num_terms, quadratic)
    c_d = central_difference_sequence(DERIVATIVE_POINT, cfg.initial_step, cfg.num_terms, quadratic)
    return [f"{_fmt(a)} {_fmt(b)}" for a, b in zip(f_d, c_d)]


_REPORTS = {
    "limits": limit_report,
    "derivatives": derivative_report,
}


def main(argv: Sequence[str] | None = None) -> None:
    """Prints the requested reports (all of them when none is named).

    Raises:
        ValueError: If a report name is unknown.
    """
    names = list(sys.argv[1:] if argv is None else argv) or list(_REPORTS)
    for name in names:
        try:
            report = _REPORTS[name]
        except KeyError:
            opts = ", ".join(_REPORTS)
            raise ValueError(f"Unknown report '{name}'. Choose one of {{{opts}}}.") from None
        for line in report():
            print(line)


if __name__ == "__main__":
    main()
