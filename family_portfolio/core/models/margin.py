"""
Margin snapshot domain model.

A snapshot is the broker-reported margin state of one account at sync time.
It is immutable once fetched and replaced wholesale on the next sync.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from family_portfolio.core.types.financial import ZERO, to_float
from family_portfolio.core.utils.validation import validate_account_id


@dataclass(frozen=True)
class MarginSnapshot:
    """Point-in-time margin figures for one account.

    All amounts are signed; the broker may report negative values and
    they are passed through untouched.
    """

    account_id: int
    net: float
    debits: float
    liquid_collateral: float
    stock_collateral: float = ZERO
    segment: str = "EQUITY"

    def __post_init__(self) -> None:
        """Validate snapshot identity."""
        validate_account_id(self.account_id)

    @property
    def total_collateral(self) -> float:
        """Total pledged collateral of both kinds."""
        return self.liquid_collateral + self.stock_collateral

    @classmethod
    def zero(cls, account_id: int) -> "MarginSnapshot":
        """Snapshot used for accounts that have not been synced yet."""
        return cls(
            account_id=account_id,
            net=ZERO,
            debits=ZERO,
            liquid_collateral=ZERO,
            stock_collateral=ZERO,
        )

    @classmethod
    def from_broker_payload(
        cls, account_id: int, payload: Mapping[str, Any]
    ) -> "MarginSnapshot":
        """Build a snapshot from a Kite style segment margins payload.

        Expected shape::

            {"net": 1000.0, "utilised": {"debits": 10.0,
             "liquid_collateral": 500.0, "stock_collateral": 200.0}}

        Missing figures are treated as zero.

        Args:
            account_id: Account the payload belongs to
            payload: Segment margins as returned by the broker

        Returns:
            New MarginSnapshot instance
        """
        utilised = payload.get("utilised") or {}
        return cls(
            account_id=account_id,
            net=to_float(payload.get("net")),
            debits=to_float(utilised.get("debits")),
            liquid_collateral=to_float(utilised.get("liquid_collateral")),
            stock_collateral=to_float(utilised.get("stock_collateral")),
            segment=str(payload.get("segment") or "EQUITY").upper(),
        )


@dataclass(frozen=True)
class MarginAvailability:
    """Used and available margin computed for one account."""

    account_id: int
    used_margin: float
    available_margin: float

    @property
    def total_margin(self) -> float:
        """Used plus available margin."""
        return self.used_margin + self.available_margin

    @property
    def negative_warnings(self) -> int:
        """Number of negative figures (0, 1 or 2), each checked independently."""
        return int(self.used_margin < ZERO) + int(self.available_margin < ZERO)

    @property
    def has_negative_margin(self) -> bool:
        """Check if either figure is negative."""
        return self.negative_warnings > 0
