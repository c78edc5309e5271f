"""
Unit tests for financial helpers.
"""

import math

from family_portfolio.core.types import (
    HUNDRED,
    ZERO,
    round_amount,
    round_percentage,
    safe_float_comparison,
    safe_percentage,
    to_float,
)


class TestFinancialHelpers:
    """Test suite for financial helper functions."""

    def test_should_convert_values_to_float(self) -> None:
        """Test to_float with mixed inputs."""
        assert to_float(5) == 5.0
        assert to_float("1.5") == 1.5
        assert to_float(2.25) == 2.25
        assert to_float(None) == ZERO

    def test_should_compute_percentage(self) -> None:
        """Test safe_percentage on a positive denominator."""
        assert safe_percentage(25.0, 200.0) == 12.5
        assert safe_percentage(-50.0, 200.0) == -25.0
        assert safe_percentage(200.0, 200.0) == HUNDRED

    def test_should_return_zero_for_non_positive_denominator(self) -> None:
        """Test that division by zero is short-circuited to zero."""
        assert safe_percentage(25.0, 0.0) == ZERO
        assert safe_percentage(25.0, -10.0) == ZERO
        assert not math.isnan(safe_percentage(0.0, 0.0))

    def test_should_round_for_presentation(self) -> None:
        """Test rounding helpers."""
        assert round_amount(1234.5678) == 1234.57
        assert round_percentage(12.3456) == 12.35

    def test_should_compare_floats_with_tolerance(self) -> None:
        """Test float comparison absorbs rounding residue only."""
        assert safe_float_comparison(0.1 + 0.2, 0.3)
        assert safe_float_comparison(1e-12, ZERO)
        assert not safe_float_comparison(0.01, ZERO)
        assert safe_float_comparison(0.01, ZERO, tolerance=0.1)
