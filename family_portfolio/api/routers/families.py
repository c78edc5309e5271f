"""
Family API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from family_portfolio.api.dependencies import get_portfolio_service
from family_portfolio.api.schemas.api_models import (
    AccountResponse,
    FamilyReportResponse,
    FamilyResponse,
    MonthGroupResponse,
)
from family_portfolio.core.services.portfolio_service import PortfolioService

router = APIRouter()

ServiceDep = Annotated[PortfolioService, Depends(get_portfolio_service)]


@router.get("")
async def list_families(service: ServiceDep) -> list[FamilyResponse]:
    """Get families with their member accounts."""
    families = await service.list_families()
    return [
        FamilyResponse(
            family=family,
            account_count=len(members),
            accounts=[AccountResponse.from_account(a) for a in members],
        )
        for family, members in families.items()
    ]


@router.get("/{family}/summary")
async def get_family_summary(family: str, service: ServiceDep) -> FamilyReportResponse:
    """Get the aggregated holdings report of a family."""
    return FamilyReportResponse.from_report(await service.family_report(family))


@router.get("/{family}/positions/by-month")
async def get_family_positions_by_month(
    family: str, service: ServiceDep
) -> list[MonthGroupResponse]:
    """Get a family's positions grouped by expiry month."""
    groups = await service.positions_by_month(family=family)
    return [MonthGroupResponse.from_group(g) for g in groups]
