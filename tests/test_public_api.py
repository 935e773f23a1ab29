"""Tests for the top-level stepkit namespace."""

import stepkit


def test_public_api_exports():
    """Tests that the public names are importable from the package root."""
    for name in stepkit.__all__:
        assert hasattr(stepkit, name)


def test_default_config_values():
    """Tests the driver defaults."""
    cfg = stepkit.StepConfig()
    assert (cfg.iterations, cfg.initial_step, cfg.tolerance, cfg.num_terms) == (10, 0.1, 1e-3, 20)
