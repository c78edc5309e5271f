"""
Unit tests for the margin availability calculator.
"""

import inspect

from family_portfolio.core.calculators.margin import (
    calculate_available_liquid_collateral,
    calculate_available_margin,
    calculate_margin_availability,
    calculate_used_margin,
    count_negative_margin_warnings,
)
from family_portfolio.core.models.margin import MarginAvailability, MarginSnapshot


def snapshot(net: float, debits: float, liquid: float, account_id: int = 1) -> MarginSnapshot:
    return MarginSnapshot(account_id=account_id, net=net, debits=debits, liquid_collateral=liquid)


class TestMarginCalculator:
    """Test suite for margin availability calculations."""

    def test_should_use_net_when_collateral_is_not_binding(self) -> None:
        """Test the net margin branch."""
        result = calculate_margin_availability(snapshot(100000.0, 20000.0, 70000.0), 1)

        # 70000 - 10000 = 60000 remaining, capacity 120000 > net
        assert result.used_margin == 20000.0
        assert result.available_margin == 100000.0

    def test_should_use_collateral_capacity_when_binding(self) -> None:
        """Test the liquid collateral branch."""
        result = calculate_margin_availability(snapshot(100000.0, 20000.0, 30000.0), 1)

        # 30000 - 10000 = 20000 remaining, capacity 40000 <= net
        assert result.used_margin == 20000.0
        assert result.available_margin == 40000.0

    def test_should_pick_collateral_branch_on_equality(self) -> None:
        """Test that the comparison is strict."""
        # capacity (60000 - 10000) * 2 = 100000 == net
        assert calculate_available_margin(snapshot(100000.0, 20000.0, 60000.0)) == 100000.0
        assert calculate_available_liquid_collateral(snapshot(100000.0, 20000.0, 60000.0)) == 50000.0

    def test_should_treat_missing_snapshot_as_zeros(self) -> None:
        """Test unsynced accounts."""
        result = calculate_margin_availability(None, account_id=9)

        assert result.account_id == 9
        assert result.used_margin == 0.0
        assert result.available_margin == 0.0
        assert result.negative_warnings == 0

    def test_should_take_account_id_as_required_argument(self) -> None:
        """Test that the account id is always supplied, so a missing snapshot never raises."""
        parameter = inspect.signature(calculate_margin_availability).parameters["account_id"]

        assert parameter.default is inspect.Parameter.empty
        assert calculate_margin_availability(None, 4).account_id == 4
        assert calculate_margin_availability(snapshot(1.0, 0.0, 0.0, account_id=4), 4).account_id == 4

    def test_should_pass_negative_values_through(self) -> None:
        """Test that negative inputs are not rejected and produce warnings."""
        result = calculate_margin_availability(snapshot(50000.0, -1000.0, -2000.0), 1)

        assert calculate_used_margin(snapshot(50000.0, -1000.0, -2000.0)) == -1000.0
        # -2000 + 500 = -1500 remaining, capacity -3000
        assert result.available_margin == -3000.0
        assert result.negative_warnings == 2

    def test_should_be_deterministic(self) -> None:
        """Test that identical snapshots give identical results."""
        first = calculate_margin_availability(snapshot(12345.0, 678.0, 910.0), 1)
        second = calculate_margin_availability(snapshot(12345.0, 678.0, 910.0), 1)

        assert first == second

    def test_should_count_warnings_across_accounts(self) -> None:
        """Test warning totals over several accounts."""
        availabilities = [
            MarginAvailability(account_id=1, used_margin=-1.0, available_margin=-1.0),
            MarginAvailability(account_id=2, used_margin=1.0, available_margin=-1.0),
            MarginAvailability(account_id=3, used_margin=1.0, available_margin=1.0),
        ]

        assert count_negative_margin_warnings(availabilities) == 3
        assert count_negative_margin_warnings([]) == 0
