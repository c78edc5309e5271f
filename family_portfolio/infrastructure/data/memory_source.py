"""
In-memory portfolio data source.

Holds already-fetched snapshots in plain collections. Used for embedding
the service next to a sync job and for tests.
"""

from collections.abc import Iterable

from family_portfolio.core.interfaces.data import IPortfolioSource
from family_portfolio.core.models.account import Account
from family_portfolio.core.models.category_mapping import CategoryMapping
from family_portfolio.core.models.holding import Holding
from family_portfolio.core.models.margin import MarginSnapshot
from family_portfolio.core.models.position import Position


class InMemoryPortfolioSource(IPortfolioSource):
    """Dict-backed implementation of IPortfolioSource."""

    def __init__(
        self,
        accounts: Iterable[Account] = (),
        holdings: Iterable[Holding] = (),
        positions: Iterable[Position] = (),
        margins: Iterable[MarginSnapshot] = (),
        category_mappings: Iterable[CategoryMapping] = (),
    ) -> None:
        self._accounts = list(accounts)
        self._holdings: dict[int, list[Holding]] = {}
        for holding in holdings:
            self._holdings.setdefault(holding.account_id, []).append(holding)
        self._positions: dict[int, list[Position]] = {}
        for position in positions:
            self._positions.setdefault(position.account_id, []).append(position)
        # Latest snapshot per account wins
        self._margins = {snapshot.account_id: snapshot for snapshot in margins}
        self._category_mappings = list(category_mappings)

    async def get_accounts(self) -> list[Account]:
        return list(self._accounts)

    async def get_holdings(self, account_id: int) -> list[Holding]:
        return list(self._holdings.get(account_id, []))

    async def get_positions(self, account_id: int) -> list[Position]:
        return list(self._positions.get(account_id, []))

    async def get_margin_snapshot(self, account_id: int) -> MarginSnapshot | None:
        return self._margins.get(account_id)

    async def get_category_mappings(self) -> list[CategoryMapping]:
        return list(self._category_mappings)

    def replace_margin_snapshot(self, snapshot: MarginSnapshot) -> None:
        """Replace an account's snapshot after a fresh sync."""
        self._margins[snapshot.account_id] = snapshot
