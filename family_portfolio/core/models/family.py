"""
Family margin overview value objects.
"""

from dataclasses import dataclass

from family_portfolio.core.models.account import Account
from family_portfolio.core.models.margin import MarginAvailability
from family_portfolio.core.models.position import PositionsSummary
from family_portfolio.core.types.financial import ZERO, safe_percentage


@dataclass(frozen=True)
class AccountMarginRow:
    """Margin and position figures for one account in the overview."""

    account: Account
    availability: MarginAvailability
    positions: PositionsSummary

    @property
    def max_profit(self) -> float:
        return self.positions.max_profit

    @property
    def max_profit_percentage(self) -> float:
        """Maximum profit as a share of the account's total margin."""
        return safe_percentage(self.max_profit, self.availability.total_margin)


@dataclass(frozen=True)
class FamilyMarginSummary:
    """Margin overview for one family.

    Totals are sums of each member's independently computed figures;
    collateral is never pooled across accounts.
    """

    family: str
    rows: tuple[AccountMarginRow, ...] = ()

    @property
    def account_count(self) -> int:
        return len(self.rows)

    @property
    def total_max_profit(self) -> float:
        return sum((row.max_profit for row in self.rows), ZERO)

    @property
    def total_available_margin(self) -> float:
        return sum((row.availability.available_margin for row in self.rows), ZERO)

    @property
    def total_used_margin(self) -> float:
        return sum((row.availability.used_margin for row in self.rows), ZERO)

    @property
    def total_margin(self) -> float:
        return self.total_available_margin + self.total_used_margin

    @property
    def max_profit_percentage(self) -> float:
        """Total maximum profit as a share of total margin (0 when no margin)."""
        return safe_percentage(self.total_max_profit, self.total_margin)

    @property
    def negative_warnings(self) -> int:
        """Negative margin warnings across all member accounts."""
        return sum(row.availability.negative_warnings for row in self.rows)
