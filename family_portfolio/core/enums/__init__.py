"""
Core enumerations for the portfolio service.

This module provides centralized enumerations for domain concepts
like holding categories, instrument kinds, expiry months and alerts.
"""

from .alerts import PriceAlert
from .categories import Category, InstrumentKind
from .months import ExpiryMonth

__all__ = ["Category", "InstrumentKind", "ExpiryMonth", "PriceAlert"]
