"""
Tabular views of aggregation results.

Builds pandas DataFrames from the immutable summary objects so that a
UI or the CLI can render them as tables and pie charts without touching
the arithmetic.
"""

from collections.abc import Iterable, Mapping

import pandas as pd

from family_portfolio.core.calculators.holdings import category_slices
from family_portfolio.core.enums import Category
from family_portfolio.core.models.family import FamilyMarginSummary
from family_portfolio.core.models.position import MonthGroup
from family_portfolio.core.models.summary import CategoryTotals, FamilyHoldingsReport

ACCOUNT_COLUMNS = [
    "account_id",
    "account",
    "holdings",
    "invested",
    "market_value",
    "pnl",
    "pnl_pct",
]


def account_summaries_frame(report: FamilyHoldingsReport) -> pd.DataFrame:
    """One row per member account plus a family total row."""
    rows = [
        {
            "account_id": member.account.account_id,
            "account": member.account.name,
            "holdings": member.summary.total_holdings,
            "invested": member.summary.total_investment,
            "market_value": member.summary.total_market_value,
            "pnl": member.summary.total_pnl,
            "pnl_pct": member.summary.total_pnl_percentage,
        }
        for member in report.members
    ]
    rows.append(
        {
            "account_id": None,
            "account": f"{report.family} (total)",
            "holdings": report.summary.total_holdings,
            "invested": report.summary.total_investment,
            "market_value": report.summary.total_market_value,
            "pnl": report.summary.total_pnl,
            "pnl_pct": report.summary.total_pnl_percentage,
        }
    )
    return pd.DataFrame(rows, columns=ACCOUNT_COLUMNS)


def category_breakdown_frame(breakdown: Mapping[Category, CategoryTotals]) -> pd.DataFrame:
    """Raw category breakdown with chart share (0 for categories left off the chart)."""
    shares = {s.category: s.share_percentage for s in category_slices(breakdown)}
    rows = [
        {
            "category": category.value,
            "market_value": totals.market_value,
            "invested": totals.invested_amount,
            "share_pct": shares.get(category, 0.0),
        }
        for category, totals in breakdown.items()
    ]
    return pd.DataFrame(rows, columns=["category", "market_value", "invested", "share_pct"])


def margin_overview_frame(families: Iterable[FamilyMarginSummary]) -> pd.DataFrame:
    """One row per family with margin totals and warnings."""
    rows = [
        {
            "family": family.family,
            "accounts": family.account_count,
            "max_profit": family.total_max_profit,
            "max_profit_pct": family.max_profit_percentage,
            "available_margin": family.total_available_margin,
            "used_margin": family.total_used_margin,
            "warnings": family.negative_warnings,
        }
        for family in families
    ]
    return pd.DataFrame(
        rows,
        columns=[
            "family",
            "accounts",
            "max_profit",
            "max_profit_pct",
            "available_margin",
            "used_margin",
            "warnings",
        ],
    )


def month_groups_frame(groups: Iterable[MonthGroup]) -> pd.DataFrame:
    """One row per expiry month, in the order the groups are given."""
    rows = [
        {
            "month": group.month.value,
            "positions": len(group.positions),
            "market_value": group.total_market_value,
            "pnl": group.total_pnl,
            "max_profit": group.total_max_profit,
            "remaining_pnl": group.total_remaining_pnl,
        }
        for group in groups
    ]
    return pd.DataFrame(
        rows, columns=["month", "positions", "market_value", "pnl", "max_profit", "remaining_pnl"]
    )
