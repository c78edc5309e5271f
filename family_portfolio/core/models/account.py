"""
Account domain model.
"""

from dataclasses import dataclass

from family_portfolio.core.constants import UNKNOWN_FAMILY
from family_portfolio.core.exceptions.portfolio import ValidationError
from family_portfolio.core.utils.validation import validate_account_id


@dataclass(frozen=True)
class Account:
    """A brokerage account, optionally grouped into a family."""

    account_id: int
    name: str
    family: str | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        """Validate account data after initialization."""
        validate_account_id(self.account_id)
        if not self.name or not self.name.strip():
            raise ValidationError(f"Account name must be non-empty for account {self.account_id}")

    @property
    def family_name(self) -> str:
        """Family label used for grouping; accounts without one are Unknown."""
        if self.family is None or not self.family.strip():
            return UNKNOWN_FAMILY
        return self.family.strip()
