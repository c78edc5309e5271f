"""
Position domain model.

Positions are broker-reported derivative or intraday positions. Market
value and PnL are taken as reported, not recomputed. Positions are
typically short options, so the negated market value is the premium
still collectable (the maximum theoretical profit).
"""

from dataclasses import dataclass

from family_portfolio.core.enums import ExpiryMonth, PriceAlert
from family_portfolio.core.types.financial import ZERO, safe_percentage
from family_portfolio.core.utils.validation import validate_account_id, validate_trading_symbol


@dataclass(frozen=True)
class Position:
    """Represents an open position in an account."""

    account_id: int
    trading_symbol: str
    quantity: float
    average_price: float
    last_price: float
    market_value: float
    pnl: float
    margin_blocked: float = ZERO
    product: str = "NRML"

    def __post_init__(self) -> None:
        """Validate position identity after initialization."""
        validate_account_id(self.account_id)
        object.__setattr__(self, "trading_symbol", validate_trading_symbol(self.trading_symbol))

    @property
    def max_profit(self) -> float:
        """Maximum theoretical profit under the short-position convention."""
        return -self.market_value

    @property
    def remaining_pnl(self) -> float:
        """Part of the maximum profit not yet realized: -market_value - pnl."""
        return -self.market_value - self.pnl

    @property
    def expiry_month(self) -> ExpiryMonth:
        """Expiry month bucket parsed from the trading symbol."""
        return ExpiryMonth.from_trading_symbol(self.trading_symbol)

    @property
    def price_change_percentage(self) -> float:
        """Move of last price over average price, in percent."""
        return safe_percentage(self.last_price - self.average_price, self.average_price)

    @property
    def price_alert(self) -> PriceAlert:
        """Alert level for the current price move."""
        if self.average_price <= ZERO:
            return PriceAlert.NONE
        return PriceAlert.from_price_change(self.price_change_percentage)


@dataclass(frozen=True)
class PositionsSummary:
    """Totals over the open positions of one account."""

    account_id: int
    total_positions: int
    total_market_value: float
    total_pnl: float

    @property
    def max_profit(self) -> float:
        """Maximum theoretical profit over all positions."""
        return -self.total_market_value

    @property
    def remaining_pnl(self) -> float:
        """Unrealized part of the maximum profit."""
        return -self.total_market_value - self.total_pnl


@dataclass(frozen=True)
class MonthGroup:
    """Positions sharing an expiry month, with their totals."""

    month: ExpiryMonth
    positions: tuple[Position, ...]

    @property
    def total_market_value(self) -> float:
        return sum((p.market_value for p in self.positions), ZERO)

    @property
    def total_pnl(self) -> float:
        return sum((p.pnl for p in self.positions), ZERO)

    @property
    def total_max_profit(self) -> float:
        return sum((p.max_profit for p in self.positions), ZERO)

    @property
    def total_remaining_pnl(self) -> float:
        return sum((p.remaining_pnl for p in self.positions), ZERO)
