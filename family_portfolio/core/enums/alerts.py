"""
Price movement alert levels for positions.
"""

from enum import StrEnum

from family_portfolio.core.constants import (
    CRITICAL_PRICE_CHANGE_PERCENT,
    ELEVATED_PRICE_CHANGE_PERCENT,
)


class PriceAlert(StrEnum):
    """
    Highlight level for a position whose price moved against a short.

    Based on how far the last price sits above the average price.
    """

    NONE = "none"
    ELEVATED = "elevated"
    CRITICAL = "critical"

    @property
    def is_raised(self) -> bool:
        """Check if any alert is raised."""
        return self != self.NONE

    @classmethod
    def from_price_change(cls, change_percentage: float) -> "PriceAlert":
        """Classify a price change percentage."""
        if change_percentage >= CRITICAL_PRICE_CHANGE_PERCENT:
            return cls.CRITICAL
        if change_percentage >= ELEVATED_PRICE_CHANGE_PERCENT:
            return cls.ELEVATED
        return cls.NONE
