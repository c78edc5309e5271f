"""
Data source interfaces.

The portfolio service reads everything it aggregates through this
boundary. Implementations wrap the persistence layer or the broker
sync collaborator; both live outside this package.
"""

from abc import ABC, abstractmethod

from family_portfolio.core.models.account import Account
from family_portfolio.core.models.category_mapping import CategoryMapping
from family_portfolio.core.models.holding import Holding
from family_portfolio.core.models.margin import MarginSnapshot
from family_portfolio.core.models.position import Position


class IPortfolioSource(ABC):
    """Abstract interface for portfolio data retrieval."""

    @abstractmethod
    async def get_accounts(self) -> list[Account]:
        """Get all known accounts in display order."""
        pass

    @abstractmethod
    async def get_holdings(self, account_id: int) -> list[Holding]:
        """Get the holdings of one account."""
        pass

    @abstractmethod
    async def get_positions(self, account_id: int) -> list[Position]:
        """Get the open positions of one account."""
        pass

    @abstractmethod
    async def get_margin_snapshot(self, account_id: int) -> MarginSnapshot | None:
        """Get the latest margin snapshot, or None if the account was never synced."""
        pass

    @abstractmethod
    async def get_category_mappings(self) -> list[CategoryMapping]:
        """Get all holding category mappings."""
        pass
