"""
Account API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from family_portfolio.api.dependencies import get_portfolio_service
from family_portfolio.api.schemas.api_models import (
    AccountResponse,
    HoldingsSummaryResponse,
    MarginResponse,
    MonthGroupResponse,
)
from family_portfolio.core.services.portfolio_service import PortfolioService

router = APIRouter()

ServiceDep = Annotated[PortfolioService, Depends(get_portfolio_service)]


@router.get("")
async def list_accounts(service: ServiceDep) -> list[AccountResponse]:
    """Get all accounts."""
    return [AccountResponse.from_account(a) for a in await service.list_accounts()]


@router.get("/{account_id}/summary")
async def get_account_summary(account_id: int, service: ServiceDep) -> HoldingsSummaryResponse:
    """Get the holdings summary of one account."""
    return HoldingsSummaryResponse.from_summary(await service.account_summary(account_id))


@router.get("/{account_id}/margin")
async def get_account_margin(account_id: int, service: ServiceDep) -> MarginResponse:
    """Get used and available margin of one account."""
    return MarginResponse.from_availability(await service.margin_availability(account_id))


@router.get("/{account_id}/positions/by-month")
async def get_account_positions_by_month(
    account_id: int, service: ServiceDep
) -> list[MonthGroupResponse]:
    """Get an account's positions grouped by expiry month."""
    groups = await service.positions_by_month(account_id=account_id)
    return [MonthGroupResponse.from_group(g) for g in groups]
