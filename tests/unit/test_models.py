"""
Unit tests for portfolio domain models.
"""

import dataclasses

import pytest

from family_portfolio.core.enums import Category, ExpiryMonth, InstrumentKind, PriceAlert
from family_portfolio.core.exceptions.portfolio import ValidationError
from family_portfolio.core.models.account import Account
from family_portfolio.core.models.category_mapping import CategoryMapping
from family_portfolio.core.models.holding import Holding
from family_portfolio.core.models.margin import MarginAvailability, MarginSnapshot
from family_portfolio.core.models.position import MonthGroup, Position, PositionsSummary


class TestAccount:
    """Test suite for Account model."""

    def test_should_create_account_with_family(self) -> None:
        """Test creation of an account."""
        account = Account(account_id=1, name="Alice", family="Sharma")

        assert account.account_id == 1
        assert account.name == "Alice"
        assert account.family_name == "Sharma"
        assert account.is_active

    def test_should_fall_back_to_unknown_family(self) -> None:
        """Test that missing or blank family names group under Unknown."""
        assert Account(account_id=1, name="Alice").family_name == "Unknown"
        assert Account(account_id=2, name="Bob", family="   ").family_name == "Unknown"

    def test_should_reject_invalid_account_id(self) -> None:
        """Test account id validation."""
        with pytest.raises(ValidationError, match="account_id must be a positive integer"):
            Account(account_id=0, name="Alice")

        with pytest.raises(ValidationError):
            Account(account_id=True, name="Alice")  # type: ignore[arg-type]

    def test_should_reject_blank_name(self) -> None:
        """Test account name validation."""
        with pytest.raises(ValidationError, match="name must be non-empty"):
            Account(account_id=1, name=" ")

    def test_should_be_immutable(self) -> None:
        """Test that accounts cannot be modified."""
        account = Account(account_id=1, name="Alice")

        with pytest.raises(dataclasses.FrozenInstanceError):
            account.name = "Bob"  # type: ignore[misc]


class TestMarginSnapshot:
    """Test suite for MarginSnapshot model."""

    def test_should_build_zero_snapshot(self) -> None:
        """Test the all-zero snapshot for unsynced accounts."""
        snapshot = MarginSnapshot.zero(7)

        assert snapshot.account_id == 7
        assert snapshot.net == 0.0
        assert snapshot.debits == 0.0
        assert snapshot.liquid_collateral == 0.0
        assert snapshot.total_collateral == 0.0

    def test_should_build_snapshot_from_broker_payload(self) -> None:
        """Test mapping of a broker segment margins payload."""
        payload = {
            "net": 150000.5,
            "utilised": {
                "debits": 20000,
                "liquid_collateral": "70000",
                "stock_collateral": 30000.0,
            },
        }

        snapshot = MarginSnapshot.from_broker_payload(3, payload)

        assert snapshot.account_id == 3
        assert snapshot.net == 150000.5
        assert snapshot.debits == 20000.0
        assert snapshot.liquid_collateral == 70000.0
        assert snapshot.stock_collateral == 30000.0
        assert snapshot.total_collateral == 100000.0
        assert snapshot.segment == "EQUITY"

    def test_should_default_missing_payload_figures_to_zero(self) -> None:
        """Test that absent payload keys become zero."""
        snapshot = MarginSnapshot.from_broker_payload(3, {"net": None})

        assert snapshot.net == 0.0
        assert snapshot.debits == 0.0
        assert snapshot.liquid_collateral == 0.0
        assert snapshot.stock_collateral == 0.0

    def test_should_keep_negative_figures(self) -> None:
        """Test that broker-reported negative values pass through."""
        snapshot = MarginSnapshot(account_id=1, net=-500.0, debits=-10.0, liquid_collateral=0.0)

        assert snapshot.net == -500.0
        assert snapshot.debits == -10.0


class TestMarginAvailability:
    """Test suite for MarginAvailability model."""

    def test_should_compute_total_margin(self) -> None:
        """Test total margin is used plus available."""
        availability = MarginAvailability(account_id=1, used_margin=20000.0, available_margin=40000.0)

        assert availability.total_margin == 60000.0
        assert availability.negative_warnings == 0
        assert not availability.has_negative_margin

    def test_should_count_negative_figures_independently(self) -> None:
        """Test 0..2 warnings per account."""
        one = MarginAvailability(account_id=1, used_margin=-1.0, available_margin=10.0)
        other = MarginAvailability(account_id=1, used_margin=10.0, available_margin=-1.0)
        both = MarginAvailability(account_id=1, used_margin=-1.0, available_margin=-1.0)

        assert one.negative_warnings == 1
        assert other.negative_warnings == 1
        assert both.negative_warnings == 2
        assert both.has_negative_margin


class TestHolding:
    """Test suite for Holding model."""

    def test_should_compute_derived_figures(self) -> None:
        """Test holding arithmetic including collateral quantity."""
        holding = Holding(
            account_id=1,
            trading_symbol="INFY",
            quantity=10,
            collateral_quantity=5,
            average_price=100.0,
            last_price=120.0,
        )

        assert holding.total_quantity == 15
        assert holding.invested_amount == 1500.0
        assert holding.market_value == 1800.0
        assert holding.pnl == 300.0
        assert holding.pnl_percentage == 20.0

    def test_should_return_zero_percentage_without_investment(self) -> None:
        """Test that a zero cost basis does not divide by zero."""
        holding = Holding(
            account_id=1,
            trading_symbol="BONUS",
            quantity=10,
            average_price=0.0,
            last_price=50.0,
        )

        assert holding.invested_amount == 0.0
        assert holding.pnl == 500.0
        assert holding.pnl_percentage == 0.0

    def test_should_strip_trading_symbol(self) -> None:
        """Test symbol normalization."""
        holding = Holding(
            account_id=1, trading_symbol="  TCS ", quantity=1, average_price=1.0, last_price=1.0
        )

        assert holding.trading_symbol == "TCS"
        assert holding.instrument_kind == InstrumentKind.EQUITY

    def test_should_reject_empty_trading_symbol(self) -> None:
        """Test symbol validation."""
        with pytest.raises(ValidationError, match="trading_symbol must be a non-empty string"):
            Holding(account_id=1, trading_symbol="", quantity=1, average_price=1.0, last_price=1.0)


class TestPosition:
    """Test suite for Position model."""

    def test_should_compute_max_profit_and_remaining_pnl(self) -> None:
        """Test the short-position convention."""
        position = Position(
            account_id=1,
            trading_symbol="NIFTY24JAN21000CE",
            quantity=-50,
            average_price=100.0,
            last_price=100.0,
            market_value=-5000.0,
            pnl=2000.0,
        )

        assert position.max_profit == 5000.0
        assert position.remaining_pnl == 3000.0
        assert position.expiry_month == ExpiryMonth.JANUARY

    def test_should_raise_price_alerts(self) -> None:
        """Test alert levels from price moves over average."""

        def make(last_price: float, average_price: float = 100.0) -> Position:
            return Position(
                account_id=1,
                trading_symbol="XYZFEB2024FUT",
                quantity=-1,
                average_price=average_price,
                last_price=last_price,
                market_value=-last_price,
                pnl=average_price - last_price,
            )

        assert make(120.0).price_alert == PriceAlert.NONE
        assert make(150.0).price_alert == PriceAlert.ELEVATED
        assert make(200.0).price_alert == PriceAlert.CRITICAL
        assert make(200.0, average_price=0.0).price_alert == PriceAlert.NONE
        assert make(150.0).price_change_percentage == 50.0

    def test_should_summarize_positions(self) -> None:
        """Test PositionsSummary derived figures."""
        summary = PositionsSummary(
            account_id=1, total_positions=2, total_market_value=-8000.0, total_pnl=1500.0
        )

        assert summary.max_profit == 8000.0
        assert summary.remaining_pnl == 6500.0

    def test_should_total_month_group(self) -> None:
        """Test MonthGroup totals."""
        positions = (
            Position(1, "ABCJANFUT", -1, 10.0, 10.0, market_value=-3000.0, pnl=500.0),
            Position(2, "XYZJANFUT", -1, 10.0, 10.0, market_value=-2000.0, pnl=-200.0),
        )
        group = MonthGroup(month=ExpiryMonth.JANUARY, positions=positions)

        assert group.total_market_value == -5000.0
        assert group.total_pnl == 300.0
        assert group.total_max_profit == 5000.0
        assert group.total_remaining_pnl == 4700.0


class TestCategoryMapping:
    """Test suite for CategoryMapping model."""

    def test_should_create_mapping_with_key(self) -> None:
        """Test mapping key."""
        mapping = CategoryMapping("GOLDBEES", InstrumentKind.EQUITY, Category.GOLD)

        assert mapping.key == ("GOLDBEES", InstrumentKind.EQUITY)

    def test_should_reject_unmapped_category(self) -> None:
        """Test that Unmapped can never be assigned by a mapping."""
        with pytest.raises(ValidationError, match="must be one of"):
            CategoryMapping("GOLDBEES", InstrumentKind.EQUITY, Category.UNMAPPED)
