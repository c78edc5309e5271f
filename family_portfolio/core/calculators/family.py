"""
Family grouping and margin overview.
"""

from collections.abc import Iterable, Mapping

from family_portfolio.core.calculators.margin import calculate_margin_availability
from family_portfolio.core.models.account import Account
from family_portfolio.core.models.family import AccountMarginRow, FamilyMarginSummary
from family_portfolio.core.models.margin import MarginAvailability
from family_portfolio.core.models.position import PositionsSummary


def group_accounts_by_family(accounts: Iterable[Account]) -> dict[str, list[Account]]:
    """Group accounts by family name, families in order of first appearance.

    Accounts without a family are grouped under Unknown.
    """
    families: dict[str, list[Account]] = {}
    for account in accounts:
        families.setdefault(account.family_name, []).append(account)
    return families


def summarize_family_margins(
    family: str,
    accounts: Iterable[Account],
    availabilities: Mapping[int, MarginAvailability],
    position_summaries: Mapping[int, PositionsSummary],
) -> FamilyMarginSummary:
    """Build the margin overview for one family.

    Each account's margin figures are used as computed for that account.
    Accounts missing from either mapping count as zero.

    Args:
        family: Family name
        accounts: Member accounts in display order
        availabilities: Margin availability by account id
        position_summaries: Position totals by account id

    Returns:
        FamilyMarginSummary with one row per account
    """
    rows = []
    for account in accounts:
        availability = availabilities.get(account.account_id)
        if availability is None:
            availability = calculate_margin_availability(None, account.account_id)
        positions = position_summaries.get(account.account_id)
        if positions is None:
            positions = PositionsSummary(
                account_id=account.account_id,
                total_positions=0,
                total_market_value=0.0,
                total_pnl=0.0,
            )
        rows.append(AccountMarginRow(account=account, availability=availability, positions=positions))
    return FamilyMarginSummary(family=family, rows=tuple(rows))
