"""Default parameters for the stepkit console drivers.

The estimators themselves take every parameter explicitly; this config
only bundles the values the drivers pass to them.
"""

from __future__ import annotations


class StepConfig:
    """Iteration, step and tolerance defaults for limits and derivative sequences."""

    def __init__(
        self,
        iterations: int = 10,
        initial_step: float = 0.1,
        tolerance: float = 1e-3,
        num_terms: int = 20,
    ):
        """Initialize configuration.

        Args:
            iterations:
                Number of step-halving iterations used by
                :func:`stepkit.limits.estimator.estimate_limit`.

            initial_step:
                First step size, shared by the limit estimator and the
                derivative sequences.

            tolerance:
                Largest accepted difference between the left- and
                right-sided values of a limit.

            num_terms:
                Length of each derivative sequence.
        """
        self.iterations = int(iterations)
        self.initial_step = float(initial_step)
        self.tolerance = float(tolerance)
        self.num_terms = int(num_terms)
