"""
Holdings summary value objects.

Summaries are immutable results of the aggregation calculators. They are
additive: a family summary is the key-wise sum of its account summaries.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from family_portfolio.core.enums import Category
from family_portfolio.core.models.account import Account
from family_portfolio.core.types.financial import ZERO, safe_percentage


@dataclass(frozen=True)
class CategoryTotals:
    """Market value and invested amount accumulated for one category."""

    market_value: float = ZERO
    invested_amount: float = ZERO

    def merged(self, other: "CategoryTotals") -> "CategoryTotals":
        """Return the key-wise sum of two totals."""
        return CategoryTotals(
            market_value=self.market_value + other.market_value,
            invested_amount=self.invested_amount + other.invested_amount,
        )


@dataclass(frozen=True)
class SectorTotals:
    """Market value and holding count accumulated for one sector."""

    value: float = ZERO
    count: int = 0

    def merged(self, other: "SectorTotals") -> "SectorTotals":
        """Return the key-wise sum of two totals."""
        return SectorTotals(value=self.value + other.value, count=self.count + other.count)


@dataclass(frozen=True)
class HoldingsSummary:
    """Aggregated holdings figures for an account or a group of accounts."""

    total_holdings: int = 0
    total_market_value: float = ZERO
    total_pnl: float = ZERO
    total_investment: float = ZERO
    category_breakdown: Mapping[Category, CategoryTotals] = field(default_factory=dict)
    sector_breakdown: Mapping[str, SectorTotals] = field(default_factory=dict)

    @property
    def total_pnl_percentage(self) -> float:
        """PnL relative to total investment (0 when nothing invested)."""
        return safe_percentage(self.total_pnl, self.total_investment)


@dataclass(frozen=True)
class CategorySlice:
    """One slice of a proportional category chart."""

    category: Category
    market_value: float
    invested_amount: float
    share_percentage: float


@dataclass(frozen=True)
class AccountHoldings:
    """An account together with its holdings summary."""

    account: Account
    summary: HoldingsSummary


@dataclass(frozen=True)
class FamilyHoldingsReport:
    """Family-level holdings summary plus the member account summaries."""

    family: str
    summary: HoldingsSummary
    members: tuple[AccountHoldings, ...] = ()

    @property
    def category_slices(self) -> list[CategorySlice]:
        """Chart slices of the family category breakdown."""
        from family_portfolio.core.calculators.holdings import category_slices

        return category_slices(self.summary.category_breakdown)
