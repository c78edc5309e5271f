"""
Margin availability calculations.

Models a margin-financing rule where only half of the pledged liquid
collateral may back debits. When twice the remaining liquid collateral
exceeds the broker's net margin, net margin is the binding limit;
otherwise the remaining liquid collateral is.
"""

from collections.abc import Iterable

from loguru import logger

from family_portfolio.core.constants import LIQUID_COLLATERAL_UTILIZATION
from family_portfolio.core.models.margin import MarginAvailability, MarginSnapshot


def calculate_used_margin(snapshot: MarginSnapshot) -> float:
    """Used margin is the reported debits, passed through unchanged.

    Args:
        snapshot: Account margin snapshot

    Returns:
        Used margin (may be negative)
    """
    return snapshot.debits


def calculate_available_liquid_collateral(snapshot: MarginSnapshot) -> float:
    """Liquid collateral left after covering the collateral share of debits."""
    return snapshot.liquid_collateral - snapshot.debits * LIQUID_COLLATERAL_UTILIZATION


def calculate_available_margin(snapshot: MarginSnapshot) -> float:
    """Calculate margin still usable under the liquid collateral rule.

    Args:
        snapshot: Account margin snapshot

    Returns:
        Net margin when liquid collateral is not the binding constraint,
        otherwise twice the remaining liquid collateral

    Examples:
        net=100000, debits=20000, liquid=70000 -> 100000 (net branch)
        net=100000, debits=20000, liquid=30000 -> 40000 (collateral branch)
    """
    collateral_capacity = (
        calculate_available_liquid_collateral(snapshot) / LIQUID_COLLATERAL_UTILIZATION
    )
    if collateral_capacity > snapshot.net:
        return snapshot.net
    return collateral_capacity


def calculate_margin_availability(
    snapshot: MarginSnapshot | None, account_id: int
) -> MarginAvailability:
    """Compute used and available margin for one account.

    A missing snapshot (account not synced yet) is treated as all zeros.

    Args:
        snapshot: Account margin snapshot, or None
        account_id: Account the figures are reported for

    Returns:
        MarginAvailability for the account
    """
    if snapshot is None:
        snapshot = MarginSnapshot.zero(account_id)

    availability = MarginAvailability(
        account_id=account_id,
        used_margin=calculate_used_margin(snapshot),
        available_margin=calculate_available_margin(snapshot),
    )
    if availability.has_negative_margin:
        logger.warning(
            f"Negative margin for account {availability.account_id}: "
            f"used={availability.used_margin:.2f}, available={availability.available_margin:.2f}"
        )
    return availability


def count_negative_margin_warnings(availabilities: Iterable[MarginAvailability]) -> int:
    """Total negative margin warnings over several accounts."""
    return sum(availability.negative_warnings for availability in availabilities)
