"""
Holding API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from family_portfolio.api.dependencies import get_portfolio_service
from family_portfolio.api.schemas.api_models import (
    UnmappedHoldingResponse,
    UnmappedHoldingsResponse,
)
from family_portfolio.core.services.portfolio_service import PortfolioService

router = APIRouter()

ServiceDep = Annotated[PortfolioService, Depends(get_portfolio_service)]


@router.get("/unmapped")
async def get_unmapped_holdings(
    service: ServiceDep,
    account_id: Annotated[int | None, Query(gt=0)] = None,
) -> UnmappedHoldingsResponse:
    """Get holdings without a category mapping, optionally for one account."""
    holdings = await service.unmapped_holdings(account_id)
    return UnmappedHoldingsResponse(
        count=len(holdings),
        holdings=[UnmappedHoldingResponse.from_holding(h) for h in holdings],
    )
