"""
Margin API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from family_portfolio.api.dependencies import get_portfolio_service
from family_portfolio.api.schemas.api_models import FamilyMarginResponse
from family_portfolio.core.services.portfolio_service import PortfolioService

router = APIRouter()


@router.get("/overview")
async def get_margin_overview(
    service: Annotated[PortfolioService, Depends(get_portfolio_service)],
) -> list[FamilyMarginResponse]:
    """Get margin availability and max profit for every family."""
    return [FamilyMarginResponse.from_summary(f) for f in await service.margin_overview()]
