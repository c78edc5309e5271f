"""
Holdings aggregation.

Rolls holdings up into account summaries, and account summaries up into
family summaries. Every roll-up is a plain key-wise sum, so aggregating
any partition of accounts and summing the parts gives the same result
as aggregating all accounts at once.
"""

from collections.abc import Iterable, Mapping

from family_portfolio.core.constants import OTHERS_SECTOR
from family_portfolio.core.enums import Category, InstrumentKind
from family_portfolio.core.models.category_mapping import CategoryMapping
from family_portfolio.core.models.holding import Holding
from family_portfolio.core.models.summary import (
    CategorySlice,
    CategoryTotals,
    HoldingsSummary,
    SectorTotals,
)
from family_portfolio.core.types.financial import ZERO, safe_float_comparison, safe_percentage


class CategoryMap:
    """Lookup from (trading symbol, instrument kind) to category."""

    def __init__(self, mappings: Iterable[CategoryMapping] = ()) -> None:
        """Build the lookup; later mappings for the same key win."""
        self._categories: dict[tuple[str, InstrumentKind], Category] = {
            mapping.key: mapping.category for mapping in mappings
        }

    def __len__(self) -> int:
        return len(self._categories)

    def resolve(self, trading_symbol: str, instrument_kind: InstrumentKind) -> Category:
        """Get the mapped category, or Category.UNMAPPED when absent."""
        return self._categories.get((trading_symbol, instrument_kind), Category.UNMAPPED)

    def category_of(self, holding: Holding) -> Category:
        """Get the category of a holding."""
        return self.resolve(holding.trading_symbol, holding.instrument_kind)

    def unmapped_holdings(self, holdings: Iterable[Holding]) -> list[Holding]:
        """Holdings that have no category mapping yet."""
        return [h for h in holdings if not self.category_of(h).is_mapped]


def _ordered_categories(
    breakdown: Mapping[Category, CategoryTotals],
) -> dict[Category, CategoryTotals]:
    """Return the breakdown in Category declaration order."""
    return {category: breakdown[category] for category in Category if category in breakdown}


def build_category_breakdown(
    holdings: Iterable[Holding], category_map: CategoryMap
) -> dict[Category, CategoryTotals]:
    """Sum market value and invested amount per category.

    Args:
        holdings: Holdings in scope
        category_map: Category lookup

    Returns:
        Mapping of category to totals; unmapped holdings under Category.UNMAPPED
    """
    breakdown: dict[Category, CategoryTotals] = {}
    for holding in holdings:
        category = category_map.category_of(holding)
        current = breakdown.get(category, CategoryTotals())
        breakdown[category] = current.merged(
            CategoryTotals(
                market_value=holding.market_value,
                invested_amount=holding.invested_amount,
            )
        )
    return _ordered_categories(breakdown)


def build_sector_breakdown(holdings: Iterable[Holding]) -> dict[str, SectorTotals]:
    """Sum market value and holding count per sector (blank sector -> Others).

    Sectors classify listed equities only; mutual fund holdings are left out.
    """
    breakdown: dict[str, SectorTotals] = {}
    for holding in holdings:
        if holding.instrument_kind != InstrumentKind.EQUITY:
            continue
        sector = (holding.sector or "").strip() or OTHERS_SECTOR
        current = breakdown.get(sector, SectorTotals())
        breakdown[sector] = current.merged(SectorTotals(value=holding.market_value, count=1))
    return breakdown


def summarize_holdings(
    holdings: Iterable[Holding], category_map: CategoryMap | None = None
) -> HoldingsSummary:
    """Aggregate the holdings of one account.

    Args:
        holdings: Holdings to summarize
        category_map: Category lookup (every holding is Unmapped when omitted)

    Returns:
        HoldingsSummary with totals and breakdowns
    """
    items = list(holdings)
    lookup = category_map if category_map is not None else CategoryMap()
    return HoldingsSummary(
        total_holdings=len(items),
        total_market_value=sum((h.market_value for h in items), ZERO),
        total_pnl=sum((h.pnl for h in items), ZERO),
        total_investment=sum((h.invested_amount for h in items), ZERO),
        category_breakdown=build_category_breakdown(items, lookup),
        sector_breakdown=build_sector_breakdown(items),
    )


def aggregate_summaries(summaries: Iterable[HoldingsSummary]) -> HoldingsSummary:
    """Sum independently computed summaries into one.

    Totals and breakdown entries are summed; the PnL percentage is derived
    from the summed totals, never averaged.

    Args:
        summaries: Account (or group) summaries, in any order

    Returns:
        Combined HoldingsSummary
    """
    total_holdings = 0
    total_market_value = ZERO
    total_pnl = ZERO
    total_investment = ZERO
    categories: dict[Category, CategoryTotals] = {}
    sectors: dict[str, SectorTotals] = {}

    for summary in summaries:
        total_holdings += summary.total_holdings
        total_market_value += summary.total_market_value
        total_pnl += summary.total_pnl
        total_investment += summary.total_investment
        for category, totals in summary.category_breakdown.items():
            categories[category] = categories.get(category, CategoryTotals()).merged(totals)
        for sector, sector_totals in summary.sector_breakdown.items():
            sectors[sector] = sectors.get(sector, SectorTotals()).merged(sector_totals)

    return HoldingsSummary(
        total_holdings=total_holdings,
        total_market_value=total_market_value,
        total_pnl=total_pnl,
        total_investment=total_investment,
        category_breakdown=_ordered_categories(categories),
        sector_breakdown=sectors,
    )


def category_slices(breakdown: Mapping[Category, CategoryTotals]) -> list[CategorySlice]:
    """Proportional chart slices for a category breakdown.

    Categories with zero market value are left out of the chart; they
    stay in the raw breakdown.

    Args:
        breakdown: Category breakdown mapping

    Returns:
        Slices in Category declaration order, shares summing to 100
    """
    included = {
        category: totals
        for category, totals in _ordered_categories(breakdown).items()
        if not safe_float_comparison(totals.market_value, ZERO)
    }
    chart_total = sum((totals.market_value for totals in included.values()), ZERO)
    return [
        CategorySlice(
            category=category,
            market_value=totals.market_value,
            invested_amount=totals.invested_amount,
            share_percentage=safe_percentage(totals.market_value, chart_total),
        )
        for category, totals in included.items()
    ]
