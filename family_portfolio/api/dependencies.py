"""
FastAPI dependency providers.
"""

from functools import lru_cache

from fastapi import Request

from family_portfolio.core.exceptions.portfolio import ConfigurationError, DataError
from family_portfolio.core.services.portfolio_service import PortfolioService
from family_portfolio.infrastructure.data import CSVPortfolioSource
from family_portfolio.settings import Settings, get_settings


@lru_cache
def cached_settings() -> Settings:
    """Settings loaded once per process."""
    return get_settings()


def build_service(settings: Settings) -> PortfolioService:
    """Create the portfolio service over the configured snapshot directory.

    Raises:
        ConfigurationError: If the configured data directory is unusable
    """
    try:
        source = CSVPortfolioSource(
            data_directory=settings.data_directory,
            cache_ttl_seconds=settings.cache_ttl_seconds,
            cache_size=settings.cache_size,
        )
    except DataError as e:
        raise ConfigurationError(f"Invalid data_directory setting: {e}") from e
    return PortfolioService(source)


def get_portfolio_service(request: Request) -> PortfolioService:
    """Portfolio service stored on the application state."""
    return request.app.state.portfolio_service
