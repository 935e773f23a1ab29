"""Tests for the stepkit console drivers."""

import pytest

from stepkit.config import StepConfig
from stepkit.drivers import derivative_report, limit_report, main


def test_limit_report_lines():
    """Tests that the limit report prints one value per example in order."""
    assert limit_report() == ["-1", "0.555556", "0.857143"]


def test_limit_report_reports_nan_for_zero_tolerance():
    """Tests that a zero tolerance rejects every non-trivial limit."""
    lines = limit_report(StepConfig(tolerance=0.0))
    assert lines == ["nan", "nan", "nan"]


def test_derivative_report_lines():
    """Tests that the derivative report prints forward and central terms per line."""
    lines = derivative_report()
    assert len(lines) == 20
    assert lines[0] == "2.1 2"
    for line in lines:
        fwd, cen = (float(v) for v in line.split())
        assert abs(fwd - 2.0) <= 0.1 + 1e-9
        assert abs(cen - 2.0) < 1e-6


def test_derivative_report_uses_config():
    """Tests that num_terms controls the number of lines."""
    assert len(derivative_report(StepConfig(num_terms=5))) == 5
    assert derivative_report(StepConfig(num_terms=0)) == []


def test_main_prints_selected_report(capsys):
    """Tests that main prints only the requested report."""
    main(["limits"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["-1", "0.555556", "0.857143"]


def test_main_prints_all_reports_by_default(capsys):
    """Tests that main prints limits followed by derivatives when nothing is named."""
    main([])
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3 + 20
    assert out[3] == "2.1 2"


def test_main_unknown_report_raises():
    """Tests that an unknown report name raises ValueError."""
    with pytest.raises(ValueError, match="Unknown report"):
        main(["integrals"])
