"""
Position grouping and totals.
"""

from collections.abc import Iterable, Mapping, Sequence

from family_portfolio.core.enums import ExpiryMonth
from family_portfolio.core.models.position import MonthGroup, Position, PositionsSummary
from family_portfolio.core.types.financial import ZERO, safe_percentage


def extract_expiry_month(trading_symbol: str) -> ExpiryMonth:
    """Expiry month token of a trading symbol (first match wins, else Other)."""
    return ExpiryMonth.from_trading_symbol(trading_symbol)


def group_positions_by_month(
    positions: Iterable[Position],
) -> dict[ExpiryMonth, list[Position]]:
    """Group positions by expiry month.

    The result iterates January..December then Other regardless of the
    order positions arrive in. Only non-empty months are present, and
    positions keep their input order within a month.

    Args:
        positions: Positions to group

    Returns:
        Ordered mapping of month to positions
    """
    buckets: dict[ExpiryMonth, list[Position]] = {}
    for position in positions:
        buckets.setdefault(extract_expiry_month(position.trading_symbol), []).append(position)

    return {month: buckets[month] for month in ExpiryMonth.calendar_order() if month in buckets}


def summarize_month_groups(
    groups: Mapping[ExpiryMonth, Sequence[Position]],
) -> list[MonthGroup]:
    """Wrap grouped positions into MonthGroup values, keeping group order."""
    return [MonthGroup(month=month, positions=tuple(items)) for month, items in groups.items()]


def summarize_positions(account_id: int, positions: Iterable[Position]) -> PositionsSummary:
    """Totals over one account's positions."""
    items = list(positions)
    return PositionsSummary(
        account_id=account_id,
        total_positions=len(items),
        total_market_value=sum((p.market_value for p in items), ZERO),
        total_pnl=sum((p.pnl for p in items), ZERO),
    )


def margin_percentage(value: float, margin_blocked: float) -> float | None:
    """Magnitude of value as a percentage of blocked margin.

    Returns None when no margin is blocked, since there is nothing to
    express the value against.
    """
    if margin_blocked <= ZERO:
        return None
    return safe_percentage(abs(value), margin_blocked)
