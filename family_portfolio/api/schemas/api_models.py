"""
Pydantic schemas for API request/response models.
"""

from pydantic import BaseModel, Field

from family_portfolio.core.calculators.holdings import category_slices
from family_portfolio.core.calculators.positions import margin_percentage
from family_portfolio.core.constants import MAX_NEGATIVE_MARGIN_WARNINGS
from family_portfolio.core.models.account import Account
from family_portfolio.core.models.family import AccountMarginRow, FamilyMarginSummary
from family_portfolio.core.models.holding import Holding
from family_portfolio.core.models.margin import MarginAvailability
from family_portfolio.core.models.position import MonthGroup, Position
from family_portfolio.core.models.summary import (
    FamilyHoldingsReport,
    HoldingsSummary,
)
from family_portfolio.core.types.financial import round_amount, round_percentage


class AccountResponse(BaseModel):
    """Response model for an account."""

    id: int
    name: str
    family: str
    is_active: bool

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.account_id,
            name=account.name,
            family=account.family_name,
            is_active=account.is_active,
        )


class FamilyResponse(BaseModel):
    """Response model for a family and its member accounts."""

    family: str
    account_count: int
    accounts: list[AccountResponse]


class SummaryTotals(BaseModel):
    """Headline figures of a holdings summary."""

    total_holdings: int
    total_market_value: float
    total_pnl: float
    total_pnl_percentage: float
    total_investment: float


class CategoryTotalsResponse(BaseModel):
    market_value: float
    invested_amount: float


class SectorTotalsResponse(BaseModel):
    value: float
    count: int


class CategorySliceResponse(BaseModel):
    category: str
    market_value: float
    invested_amount: float
    share_percentage: float


class HoldingsSummaryResponse(BaseModel):
    """Response model for an account or family holdings summary."""

    summary: SummaryTotals
    category_breakdown: dict[str, CategoryTotalsResponse]
    sector_breakdown: dict[str, SectorTotalsResponse]
    category_chart: list[CategorySliceResponse]

    @classmethod
    def from_summary(cls, summary: HoldingsSummary) -> "HoldingsSummaryResponse":
        return cls(
            summary=SummaryTotals(
                total_holdings=summary.total_holdings,
                total_market_value=round_amount(summary.total_market_value),
                total_pnl=round_amount(summary.total_pnl),
                total_pnl_percentage=round_percentage(summary.total_pnl_percentage),
                total_investment=round_amount(summary.total_investment),
            ),
            category_breakdown={
                category.value: CategoryTotalsResponse(
                    market_value=round_amount(totals.market_value),
                    invested_amount=round_amount(totals.invested_amount),
                )
                for category, totals in summary.category_breakdown.items()
            },
            sector_breakdown={
                sector: SectorTotalsResponse(value=round_amount(totals.value), count=totals.count)
                for sector, totals in summary.sector_breakdown.items()
            },
            category_chart=[
                CategorySliceResponse(
                    category=item.category.value,
                    market_value=round_amount(item.market_value),
                    invested_amount=round_amount(item.invested_amount),
                    share_percentage=round_percentage(item.share_percentage),
                )
                for item in category_slices(summary.category_breakdown)
            ],
        )


class UnmappedHoldingResponse(BaseModel):
    """Response model for a holding that still needs a category mapping."""

    account_id: int
    trading_symbol: str
    instrument_kind: str
    total_quantity: float
    market_value: float

    @classmethod
    def from_holding(cls, holding: Holding) -> "UnmappedHoldingResponse":
        return cls(
            account_id=holding.account_id,
            trading_symbol=holding.trading_symbol,
            instrument_kind=holding.instrument_kind.value,
            total_quantity=holding.total_quantity,
            market_value=round_amount(holding.market_value),
        )


class UnmappedHoldingsResponse(BaseModel):
    count: int
    holdings: list[UnmappedHoldingResponse]


class MemberSummaryResponse(BaseModel):
    account: AccountResponse
    summary: SummaryTotals


class FamilyReportResponse(HoldingsSummaryResponse):
    """Response model for a family holdings report."""

    family: str
    members: list[MemberSummaryResponse]

    @classmethod
    def from_report(cls, report: FamilyHoldingsReport) -> "FamilyReportResponse":
        base = HoldingsSummaryResponse.from_summary(report.summary)
        members = [
            MemberSummaryResponse(
                account=AccountResponse.from_account(member.account),
                summary=HoldingsSummaryResponse.from_summary(member.summary).summary,
            )
            for member in report.members
        ]
        return cls(family=report.family, members=members, **base.model_dump())


class MarginResponse(BaseModel):
    """Response model for one account's margin figures."""

    account_id: int
    used_margin: float
    available_margin: float
    total_margin: float
    negative_warnings: int = Field(..., ge=0, le=MAX_NEGATIVE_MARGIN_WARNINGS)

    @classmethod
    def from_availability(cls, availability: MarginAvailability) -> "MarginResponse":
        return cls(
            account_id=availability.account_id,
            used_margin=round_amount(availability.used_margin),
            available_margin=round_amount(availability.available_margin),
            total_margin=round_amount(availability.total_margin),
            negative_warnings=availability.negative_warnings,
        )


class AccountMarginRowResponse(BaseModel):
    account: AccountResponse
    margin: MarginResponse
    max_profit: float
    max_profit_percentage: float

    @classmethod
    def from_row(cls, row: AccountMarginRow) -> "AccountMarginRowResponse":
        return cls(
            account=AccountResponse.from_account(row.account),
            margin=MarginResponse.from_availability(row.availability),
            max_profit=round_amount(row.max_profit),
            max_profit_percentage=round_percentage(row.max_profit_percentage),
        )


class FamilyMarginResponse(BaseModel):
    """Response model for one family in the margin overview."""

    family: str
    account_count: int
    total_max_profit: float
    max_profit_percentage: float
    total_available_margin: float
    total_used_margin: float
    negative_warnings: int
    accounts: list[AccountMarginRowResponse]

    @classmethod
    def from_summary(cls, summary: FamilyMarginSummary) -> "FamilyMarginResponse":
        return cls(
            family=summary.family,
            account_count=summary.account_count,
            total_max_profit=round_amount(summary.total_max_profit),
            max_profit_percentage=round_percentage(summary.max_profit_percentage),
            total_available_margin=round_amount(summary.total_available_margin),
            total_used_margin=round_amount(summary.total_used_margin),
            negative_warnings=summary.negative_warnings,
            accounts=[AccountMarginRowResponse.from_row(row) for row in summary.rows],
        )


class PositionResponse(BaseModel):
    account_id: int
    trading_symbol: str
    quantity: float
    average_price: float
    last_price: float
    market_value: float
    pnl: float
    max_profit: float
    remaining_pnl: float
    max_profit_margin_percentage: float | None
    remaining_pnl_margin_percentage: float | None
    price_alert: str

    @classmethod
    def from_position(cls, position: Position) -> "PositionResponse":
        max_pct = margin_percentage(position.max_profit, position.margin_blocked)
        remaining_pct = margin_percentage(position.remaining_pnl, position.margin_blocked)
        return cls(
            account_id=position.account_id,
            trading_symbol=position.trading_symbol,
            quantity=position.quantity,
            average_price=position.average_price,
            last_price=position.last_price,
            market_value=round_amount(position.market_value),
            pnl=round_amount(position.pnl),
            max_profit=round_amount(position.max_profit),
            remaining_pnl=round_amount(position.remaining_pnl),
            max_profit_margin_percentage=None if max_pct is None else round_percentage(max_pct),
            remaining_pnl_margin_percentage=(
                None if remaining_pct is None else round_percentage(remaining_pct)
            ),
            price_alert=position.price_alert.value,
        )


class MonthGroupResponse(BaseModel):
    """Response model for positions sharing an expiry month."""

    month: str
    total_market_value: float
    total_pnl: float
    total_max_profit: float
    total_remaining_pnl: float
    positions: list[PositionResponse]

    @classmethod
    def from_group(cls, group: MonthGroup) -> "MonthGroupResponse":
        return cls(
            month=group.month.value,
            total_market_value=round_amount(group.total_market_value),
            total_pnl=round_amount(group.total_pnl),
            total_max_profit=round_amount(group.total_max_profit),
            total_remaining_pnl=round_amount(group.total_remaining_pnl),
            positions=[PositionResponse.from_position(p) for p in group.positions],
        )


class ErrorResponse(BaseModel):
    """Response model for errors."""

    error: str
    message: str
