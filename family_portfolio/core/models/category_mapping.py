"""
Category mapping domain model.
"""

from dataclasses import dataclass

from family_portfolio.core.enums import Category, InstrumentKind
from family_portfolio.core.exceptions.portfolio import ValidationError
from family_portfolio.core.utils.validation import validate_trading_symbol


@dataclass(frozen=True)
class CategoryMapping:
    """Assigns a category to a (trading symbol, instrument kind) pair."""

    trading_symbol: str
    instrument_kind: InstrumentKind
    category: Category

    def __post_init__(self) -> None:
        """Validate mapping after initialization."""
        object.__setattr__(self, "trading_symbol", validate_trading_symbol(self.trading_symbol))
        if not self.category.is_mapped:
            raise ValidationError(
                f"Category for {self.trading_symbol} must be one of: "
                f"{', '.join(c.value for c in Category.mappable())}"
            )

    @property
    def key(self) -> tuple[str, InstrumentKind]:
        """Lookup key for this mapping."""
        return (self.trading_symbol, self.instrument_kind)
