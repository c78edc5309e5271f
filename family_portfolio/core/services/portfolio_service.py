"""
Portfolio service.

Fetches per-account data through an IPortfolioSource and feeds it to the
pure calculators. Per-account fetches are independent and run
concurrently; aggregation starts only once every fetch has returned.
"""

import asyncio

from loguru import logger

from family_portfolio.core.calculators.family import (
    group_accounts_by_family,
    summarize_family_margins,
)
from family_portfolio.core.calculators.holdings import (
    CategoryMap,
    aggregate_summaries,
    summarize_holdings,
)
from family_portfolio.core.calculators.margin import (
    calculate_margin_availability,
    count_negative_margin_warnings,
)
from family_portfolio.core.calculators.positions import (
    group_positions_by_month,
    summarize_month_groups,
    summarize_positions,
)
from family_portfolio.core.exceptions.portfolio import AccountNotFoundError, FamilyNotFoundError
from family_portfolio.core.interfaces.data import IPortfolioSource
from family_portfolio.core.models.account import Account
from family_portfolio.core.models.family import FamilyMarginSummary
from family_portfolio.core.models.holding import Holding
from family_portfolio.core.models.margin import MarginAvailability
from family_portfolio.core.models.position import MonthGroup, Position, PositionsSummary
from family_portfolio.core.models.summary import (
    AccountHoldings,
    FamilyHoldingsReport,
    HoldingsSummary,
)
from family_portfolio.core.utils.decorators import log_operation


class PortfolioService:
    """Aggregates accounts, holdings, positions and margins for reporting."""

    def __init__(self, source: IPortfolioSource) -> None:
        """Initialize with the data source to read from.

        Args:
            source: Portfolio data source
        """
        self.source = source

    async def list_accounts(self) -> list[Account]:
        """Get all accounts in display order."""
        return await self.source.get_accounts()

    async def list_families(self) -> dict[str, list[Account]]:
        """Get accounts grouped by family, families in order of first appearance."""
        return group_accounts_by_family(await self.source.get_accounts())

    async def get_account(self, account_id: int) -> Account:
        """Get one account.

        Raises:
            AccountNotFoundError: If no account has this id
        """
        for account in await self.source.get_accounts():
            if account.account_id == account_id:
                return account
        raise AccountNotFoundError(account_id)

    async def family_accounts(self, family: str) -> list[Account]:
        """Get the member accounts of a family.

        Raises:
            FamilyNotFoundError: If no account carries the family name
        """
        members = (await self.list_families()).get(family)
        if not members:
            raise FamilyNotFoundError(family)
        return members

    async def _category_map(self) -> CategoryMap:
        return CategoryMap(await self.source.get_category_mappings())

    async def _summarize_account(
        self, account: Account, category_map: CategoryMap
    ) -> AccountHoldings:
        holdings = await self.source.get_holdings(account.account_id)
        return AccountHoldings(account=account, summary=summarize_holdings(holdings, category_map))

    @log_operation
    async def account_summary(self, account_id: int) -> HoldingsSummary:
        """Holdings summary of one account."""
        account = await self.get_account(account_id)
        category_map = await self._category_map()
        return (await self._summarize_account(account, category_map)).summary

    @log_operation
    async def family_report(self, family: str) -> FamilyHoldingsReport:
        """Holdings report for a family.

        Each member account is summarized on its own (concurrently) and the
        family summary is the sum of those account summaries.
        """
        accounts = await self.family_accounts(family)
        category_map = await self._category_map()
        members = await asyncio.gather(
            *(self._summarize_account(account, category_map) for account in accounts)
        )
        return FamilyHoldingsReport(
            family=family,
            summary=aggregate_summaries(member.summary for member in members),
            members=tuple(members),
        )

    @log_operation
    async def unmapped_holdings(self, account_id: int | None = None) -> list[Holding]:
        """Holdings without a category mapping, for one account or all accounts.

        Raises:
            AccountNotFoundError: If account_id is given and unknown
        """
        if account_id is not None:
            accounts = [await self.get_account(account_id)]
        else:
            accounts = await self.list_accounts()

        category_map = await self._category_map()
        fetched = await asyncio.gather(
            *(self.source.get_holdings(account.account_id) for account in accounts)
        )
        return category_map.unmapped_holdings(h for holdings in fetched for h in holdings)

    async def margin_availability(self, account_id: int) -> MarginAvailability:
        """Used and available margin of one account."""
        account = await self.get_account(account_id)
        return await self._margin_availability(account)

    async def _margin_availability(self, account: Account) -> MarginAvailability:
        snapshot = await self.source.get_margin_snapshot(account.account_id)
        if snapshot is None:
            logger.debug(f"No margin snapshot for account {account.account_id}, using zeros")
        return calculate_margin_availability(snapshot, account.account_id)

    async def _positions_summary(self, account: Account) -> PositionsSummary:
        positions = await self.source.get_positions(account.account_id)
        return summarize_positions(account.account_id, positions)

    @log_operation
    async def margin_overview(self) -> list[FamilyMarginSummary]:
        """Margin overview for every family, in order of first appearance."""
        families = await self.list_families()
        accounts = [account for members in families.values() for account in members]

        availabilities, position_summaries = await asyncio.gather(
            asyncio.gather(*(self._margin_availability(account) for account in accounts)),
            asyncio.gather(*(self._positions_summary(account) for account in accounts)),
        )
        warnings = count_negative_margin_warnings(availabilities)
        if warnings:
            logger.warning(f"Margin overview has {warnings} negative margin warning(s)")

        by_account_margin = {a.account_id: a for a in availabilities}
        by_account_positions = {p.account_id: p for p in position_summaries}

        return [
            summarize_family_margins(family, members, by_account_margin, by_account_positions)
            for family, members in families.items()
        ]

    @log_operation
    async def positions_by_month(
        self, account_id: int | None = None, family: str | None = None
    ) -> list[MonthGroup]:
        """Positions grouped by expiry month for an account or a family.

        Exactly one of account_id or family must be given.
        """
        if (account_id is None) == (family is None):
            raise ValueError("Specify exactly one of account_id or family")

        if account_id is not None:
            accounts = [await self.get_account(account_id)]
        else:
            accounts = await self.family_accounts(family)  # type: ignore[arg-type]

        fetched = await asyncio.gather(
            *(self.source.get_positions(account.account_id) for account in accounts)
        )
        positions: list[Position] = [p for account_positions in fetched for p in account_positions]
        return summarize_month_groups(group_positions_by_month(positions))
