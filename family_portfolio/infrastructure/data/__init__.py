"""
Portfolio data sources.

This module provides IPortfolioSource implementations backed by memory
and by snapshot CSV exports.
"""

from .csv_source import CSVPortfolioSource
from .memory_source import InMemoryPortfolioSource

__all__ = ["CSVPortfolioSource", "InMemoryPortfolioSource"]
