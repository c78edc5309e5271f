"""
Expiry month enumeration.

Derivative trading symbols carry a three-letter month token
(e.g. NIFTY24JAN21000CE). Positions are bucketed by that token.
"""

from enum import StrEnum


class ExpiryMonth(StrEnum):
    """
    Expiry month buckets for positions.

    Member order is the presentation order: January through December,
    then Other for symbols without a month token.
    """

    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"
    OTHER = "Other"

    @property
    def abbreviation(self) -> str | None:
        """Three-letter token matched in trading symbols (None for Other)."""
        if self == self.OTHER:
            return None
        return self.value[:3].upper()

    @classmethod
    def calendar_order(cls) -> list["ExpiryMonth"]:
        """Get the fixed presentation order."""
        return list(cls)

    @classmethod
    def from_trading_symbol(cls, trading_symbol: str) -> "ExpiryMonth":
        """
        Find the expiry month token in a trading symbol.

        Scans the twelve abbreviations in calendar order and returns the
        first one contained anywhere in the symbol. This is a substring
        scan, not date parsing: the token format is a broker convention.

        Args:
            trading_symbol: Broker trading symbol

        Returns:
            Matching month, or OTHER when no token is present
        """
        for month in cls:
            token = month.abbreviation
            if token is not None and token in trading_symbol:
                return month
        return cls.OTHER
