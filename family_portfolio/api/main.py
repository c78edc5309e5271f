"""
FastAPI main application for the family portfolio service.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from family_portfolio import __version__
from family_portfolio.core.exceptions.portfolio import (
    AccountNotFoundError,
    DataError,
    FamilyNotFoundError,
    PortfolioException,
    ValidationError,
)
from family_portfolio.core.services.portfolio_service import PortfolioService
from family_portfolio.core.utils.log_setup import configure_logging
from family_portfolio.settings import Settings

from .dependencies import build_service, cached_settings
from .routers import accounts, families, holdings, margins
from .schemas.api_models import ErrorResponse

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Account or family not found"},
    503: {"model": ErrorResponse, "description": "Snapshot data unavailable"},
}

ERROR_STATUS: list[tuple[type[PortfolioException], int]] = [
    (AccountNotFoundError, 404),
    (FamilyNotFoundError, 404),
    (ValidationError, 422),
    (DataError, 503),
]


async def portfolio_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate domain exceptions into JSON error responses."""
    status_code = 500
    for error_type, code in ERROR_STATUS:
        if isinstance(exc, error_type):
            status_code = code
            break
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=type(exc).__name__, message=str(exc)).model_dump(),
    )


def create_app(
    settings: Settings | None = None, service: PortfolioService | None = None
) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use (environment when omitted)
        service: Pre-built service; otherwise one over the configured CSV directory

    Returns:
        Configured FastAPI application
    """
    settings = settings or cached_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Family Portfolio API",
        version=__version__,
        description="Family-level aggregation of holdings, positions and margins",
    )
    app.state.portfolio_service = service or build_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["Content-Type", "Accept", "Origin"],
    )
    app.add_exception_handler(PortfolioException, portfolio_exception_handler)

    app.include_router(
        accounts.router, prefix="/api/accounts", tags=["accounts"], responses=ERROR_RESPONSES
    )
    app.include_router(
        families.router, prefix="/api/families", tags=["families"], responses=ERROR_RESPONSES
    )
    app.include_router(
        holdings.router, prefix="/api/holdings", tags=["holdings"], responses=ERROR_RESPONSES
    )
    app.include_router(
        margins.router, prefix="/api/margins", tags=["margins"], responses=ERROR_RESPONSES
    )

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint returning API information."""
        return {"message": "Family Portfolio API", "version": __version__, "status": "running"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info(f"Family Portfolio API configured ({settings.app_env})")
    return app
