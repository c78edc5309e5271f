"""
Holding category and instrument kind enumerations.

This module defines the coarse asset-class buckets a holding can be
assigned to, and the instrument kinds that category mappings are keyed on.
"""

from enum import StrEnum


class Category(StrEnum):
    """
    Asset-class buckets for holdings.

    The four assignable categories are set through manual mappings.
    UNMAPPED is the explicit variant for holdings that have no mapping;
    it can never be assigned by a mapping itself.
    """

    EQUITY = "equity"
    LIQUID_FUND = "liquid_fund"
    GOLD = "gold"
    SILVER = "silver"
    UNMAPPED = "Unmapped"

    @property
    def is_mapped(self) -> bool:
        """Check if category comes from an explicit mapping."""
        return self != self.UNMAPPED

    @classmethod
    def mappable(cls) -> list["Category"]:
        """Get the categories a mapping may assign."""
        return [category for category in cls if category.is_mapped]

    @classmethod
    def from_string(cls, value: str) -> "Category":
        """
        Convert string to Category enum, with case-insensitive matching.

        Args:
            value: String representation of category

        Returns:
            Corresponding Category enum value

        Raises:
            ValueError: If category is not supported
        """
        normalized = value.strip().lower()
        for category in cls:
            if category.value.lower() == normalized:
                return category
        raise ValueError(
            f"Unsupported category: {value}. "
            f"Supported categories: {', '.join([c.value for c in cls])}"
        )


class InstrumentKind(StrEnum):
    """Kind of instrument a holding represents."""

    EQUITY = "equity"
    MUTUAL_FUND = "mutual_fund"

    @classmethod
    def from_string(cls, value: str) -> "InstrumentKind":
        """Convert string to InstrumentKind enum, case-insensitive."""
        normalized = value.strip().lower()
        try:
            return cls(normalized)
        except ValueError as e:
            raise ValueError(
                f"Unsupported instrument kind: {value}. "
                f"Supported kinds: {', '.join([k.value for k in cls])}"
            ) from e
