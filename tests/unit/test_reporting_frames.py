"""
Unit tests for pandas report frames.
"""

from family_portfolio.core.calculators.holdings import summarize_holdings
from family_portfolio.core.enums import Category, ExpiryMonth
from family_portfolio.core.models.account import Account
from family_portfolio.core.models.family import AccountMarginRow, FamilyMarginSummary
from family_portfolio.core.models.holding import Holding
from family_portfolio.core.models.margin import MarginAvailability
from family_portfolio.core.models.position import MonthGroup, Position, PositionsSummary
from family_portfolio.core.models.summary import (
    AccountHoldings,
    CategoryTotals,
    FamilyHoldingsReport,
)
from family_portfolio.infrastructure.reporting.frames import (
    account_summaries_frame,
    category_breakdown_frame,
    margin_overview_frame,
    month_groups_frame,
)


class TestReportFrames:
    """Test suite for report DataFrame builders."""

    def test_should_add_family_total_row(self) -> None:
        """Test account summaries frame."""
        summary = summarize_holdings([Holding(1, "INFY", 10, 100.0, 110.0)])
        report = FamilyHoldingsReport(
            family="Rao",
            summary=summary,
            members=(AccountHoldings(account=Account(1, "Asha", "Rao"), summary=summary),),
        )

        df = account_summaries_frame(report)

        assert list(df.columns) == [
            "account_id",
            "account",
            "holdings",
            "invested",
            "market_value",
            "pnl",
            "pnl_pct",
        ]
        assert len(df) == 2
        assert df.iloc[0]["account"] == "Asha"
        assert df.iloc[-1]["account"] == "Rao (total)"
        assert df.iloc[-1]["market_value"] == 1100.0

    def test_should_show_zero_share_for_excluded_categories(self) -> None:
        """Test category breakdown frame keeps zero-value rows."""
        breakdown = {
            Category.EQUITY: CategoryTotals(market_value=1000.0, invested_amount=800.0),
            Category.SILVER: CategoryTotals(market_value=0.0, invested_amount=50.0),
        }

        df = category_breakdown_frame(breakdown)

        assert df["category"].tolist() == ["equity", "silver"]
        assert df["share_pct"].tolist() == [100.0, 0.0]

    def test_should_list_family_margins(self) -> None:
        """Test margin overview frame."""
        row = AccountMarginRow(
            account=Account(1, "Asha", "Rao"),
            availability=MarginAvailability(1, used_margin=-5.0, available_margin=-1.0),
            positions=PositionsSummary(1, 0, 0.0, 0.0),
        )

        df = margin_overview_frame([FamilyMarginSummary(family="Rao", rows=(row,))])

        assert df.iloc[0]["family"] == "Rao"
        assert df.iloc[0]["accounts"] == 1
        assert df.iloc[0]["warnings"] == 2

    def test_should_list_month_groups(self) -> None:
        """Test month groups frame."""
        group = MonthGroup(
            month=ExpiryMonth.MARCH,
            positions=(Position(1, "NIFTY24MAR22000PE", -50, 10.0, 8.0, -400.0, 100.0),),
        )

        df = month_groups_frame([group])

        assert df.iloc[0]["month"] == "March"
        assert df.iloc[0]["positions"] == 1
        assert df.iloc[0]["remaining_pnl"] == 300.0

    def test_should_build_empty_frames_with_columns(self) -> None:
        """Test empty inputs."""
        assert month_groups_frame([]).empty
        assert list(margin_overview_frame([]).columns)[0] == "family"
