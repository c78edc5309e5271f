"""
Holding domain model.

Holdings are long-term positions in equities or mutual funds. Quantity
pledged as collateral is still owned, so it counts toward exposure.
"""

from dataclasses import dataclass

from family_portfolio.core.enums import InstrumentKind
from family_portfolio.core.types.financial import ZERO, safe_percentage
from family_portfolio.core.utils.validation import validate_account_id, validate_trading_symbol


@dataclass(frozen=True)
class Holding:
    """Represents one instrument held in an account."""

    account_id: int
    trading_symbol: str
    quantity: float
    average_price: float
    last_price: float
    collateral_quantity: float = ZERO
    instrument_kind: InstrumentKind = InstrumentKind.EQUITY
    sector: str | None = None

    def __post_init__(self) -> None:
        """Validate holding identity after initialization."""
        validate_account_id(self.account_id)
        object.__setattr__(self, "trading_symbol", validate_trading_symbol(self.trading_symbol))

    @property
    def total_quantity(self) -> float:
        """Free quantity plus quantity pledged as collateral."""
        return self.quantity + self.collateral_quantity

    @property
    def invested_amount(self) -> float:
        """Cost basis of the total quantity."""
        return self.average_price * self.total_quantity

    @property
    def market_value(self) -> float:
        """Value of the total quantity at the last traded price."""
        return self.last_price * self.total_quantity

    @property
    def pnl(self) -> float:
        """Unrealized profit or loss."""
        return self.market_value - self.invested_amount

    @property
    def pnl_percentage(self) -> float:
        """Unrealized PnL relative to invested amount (0 when nothing invested)."""
        return safe_percentage(self.pnl, self.invested_amount)
