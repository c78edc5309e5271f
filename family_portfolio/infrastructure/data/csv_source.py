"""
CSV-based portfolio data source.

Reads snapshot files exported by the sync jobs from one directory:

- accounts.csv: account_id, name, family, is_active
- holdings.csv: account_id, trading_symbol, quantity, collateral_quantity,
  average_price, last_price, instrument_kind, sector
- positions.csv: account_id, trading_symbol, quantity, average_price,
  last_price, market_value, pnl, margin_blocked, product
- margins.csv: account_id, net, debits, liquid_collateral, stock_collateral,
  segment
- category_mappings.csv: trading_symbol, instrument_kind, category

accounts.csv is required; the other files are optional and read as empty
when absent.
"""

import asyncio
import math
from pathlib import Path
from typing import Any

import pandas as pd
from cachetools import TTLCache
from loguru import logger

from family_portfolio.core.constants import DEFAULT_CACHE_SIZE, DEFAULT_CACHE_TTL_SECONDS
from family_portfolio.core.enums import Category, InstrumentKind
from family_portfolio.core.exceptions.portfolio import DataError, PortfolioException
from family_portfolio.core.interfaces.data import IPortfolioSource
from family_portfolio.core.models.account import Account
from family_portfolio.core.models.category_mapping import CategoryMapping
from family_portfolio.core.models.holding import Holding
from family_portfolio.core.models.margin import MarginSnapshot
from family_portfolio.core.models.position import Position
from family_portfolio.core.types.financial import ZERO

from .csv_validator import SnapshotCSVValidator

TRUE_VALUES = {"1", "true", "yes", "y", "t"}


def _text(record: dict[str, str], column: str) -> str | None:
    """Stripped text value, or None when blank or absent."""
    value = (record.get(column) or "").strip()
    return value or None


def _number(record: dict[str, str], column: str, default: float = ZERO) -> float:
    """Numeric value; blank or absent columns give the default."""
    value = _text(record, column)
    if value is None:
        return default
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{column} must be a finite number, got {value!r}")
    return number


def _account_id(record: dict[str, str]) -> int:
    value = _text(record, "account_id")
    if value is None:
        raise ValueError("account_id is blank")
    return int(_number(record, "account_id"))


class CSVPortfolioSource(IPortfolioSource):
    """
    Snapshot-directory implementation of IPortfolioSource.

    Features:
    - Non-blocking reads (pandas runs in the default executor)
    - TTL caching of parsed files, so a dashboard refresh does not re-read disk
    - Column validation with DataError on malformed files
    """

    REQUIRED_FILES = {"accounts.csv"}

    def __init__(
        self,
        data_directory: str | Path = "data",
        cache_ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        cache_size: int = DEFAULT_CACHE_SIZE,
    ):
        """
        Initialize the CSV portfolio source.

        Args:
            data_directory: Directory containing the snapshot files
            cache_ttl_seconds: Seconds a parsed file stays cached
            cache_size: Maximum number of cached files
        """
        self.data_dir = Path(data_directory)
        SnapshotCSVValidator.validate_data_directory(self.data_dir)
        self.cache: TTLCache[str, list[Any]] = TTLCache(maxsize=cache_size, ttl=cache_ttl_seconds)

    def clear_cache(self) -> None:
        """Drop all cached files, forcing the next call to re-read disk."""
        self.cache.clear()

    async def _read_records(self, file_name: str) -> list[dict[str, str]]:
        """Read a snapshot file into string records."""
        file_path = self.data_dir / file_name
        if not file_path.exists():
            if file_name in self.REQUIRED_FILES:
                raise DataError(f"Required snapshot file not found: {file_path}")
            logger.debug(f"Optional snapshot file missing, treating as empty: {file_path}")
            return []

        loop = asyncio.get_running_loop()

        def _read_csv_safely() -> pd.DataFrame:
            # Everything as text so symbols like "NA" survive and blanks stay blank
            return pd.read_csv(file_path, dtype=str, keep_default_na=False)

        try:
            df = await loop.run_in_executor(None, _read_csv_safely)
        except pd.errors.EmptyDataError:
            logger.warning(f"Snapshot file is empty: {file_path.name}")
            return []
        except (OSError, pd.errors.ParserError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {file_path.name}: {type(e).__name__}: {e}")
            raise DataError(f"Failed to load snapshot file: {file_path.name}") from e

        SnapshotCSVValidator.validate_csv_structure(df, file_path)
        logger.debug(f"Loaded {len(df)} rows from {file_path.name}")
        return df.to_dict("records")

    async def _load(self, file_name: str, parse: Any) -> list[Any]:
        """Load and parse a file through the TTL cache."""
        cached = self.cache.get(file_name)
        if cached is not None:
            return cached

        records = await self._read_records(file_name)
        parsed = []
        for line_number, record in enumerate(records, start=2):
            try:
                parsed.append(parse(record))
            except (PortfolioException, ValueError, TypeError) as e:
                raise DataError(f"Invalid row {line_number} in {file_name}: {e}") from e

        self.cache[file_name] = parsed
        return parsed

    @staticmethod
    def _parse_account(record: dict[str, str]) -> Account:
        is_active = _text(record, "is_active")
        return Account(
            account_id=_account_id(record),
            name=_text(record, "name") or "",
            family=_text(record, "family"),
            is_active=True if is_active is None else is_active.lower() in TRUE_VALUES,
        )

    @staticmethod
    def _parse_holding(record: dict[str, str]) -> Holding:
        kind = _text(record, "instrument_kind")
        return Holding(
            account_id=_account_id(record),
            trading_symbol=_text(record, "trading_symbol") or "",
            quantity=_number(record, "quantity"),
            collateral_quantity=_number(record, "collateral_quantity"),
            average_price=_number(record, "average_price"),
            last_price=_number(record, "last_price"),
            instrument_kind=InstrumentKind.from_string(kind) if kind else InstrumentKind.EQUITY,
            sector=_text(record, "sector"),
        )

    @staticmethod
    def _parse_position(record: dict[str, str]) -> Position:
        return Position(
            account_id=_account_id(record),
            trading_symbol=_text(record, "trading_symbol") or "",
            quantity=_number(record, "quantity"),
            average_price=_number(record, "average_price"),
            last_price=_number(record, "last_price"),
            market_value=_number(record, "market_value"),
            pnl=_number(record, "pnl"),
            margin_blocked=_number(record, "margin_blocked"),
            product=_text(record, "product") or "NRML",
        )

    @staticmethod
    def _parse_margin(record: dict[str, str]) -> MarginSnapshot:
        return MarginSnapshot(
            account_id=_account_id(record),
            net=_number(record, "net"),
            debits=_number(record, "debits"),
            liquid_collateral=_number(record, "liquid_collateral"),
            stock_collateral=_number(record, "stock_collateral"),
            segment=(_text(record, "segment") or "EQUITY").upper(),
        )

    @staticmethod
    def _parse_category_mapping(record: dict[str, str]) -> CategoryMapping:
        return CategoryMapping(
            trading_symbol=_text(record, "trading_symbol") or "",
            instrument_kind=InstrumentKind.from_string(_text(record, "instrument_kind") or ""),
            category=Category.from_string(_text(record, "category") or ""),
        )

    async def get_accounts(self) -> list[Account]:
        return list(await self._load("accounts.csv", self._parse_account))

    async def get_holdings(self, account_id: int) -> list[Holding]:
        holdings = await self._load("holdings.csv", self._parse_holding)
        return [h for h in holdings if h.account_id == account_id]

    async def get_positions(self, account_id: int) -> list[Position]:
        positions = await self._load("positions.csv", self._parse_position)
        return [p for p in positions if p.account_id == account_id]

    async def get_margin_snapshot(self, account_id: int) -> MarginSnapshot | None:
        snapshots = await self._load("margins.csv", self._parse_margin)
        latest = None
        # Later rows replace earlier ones for the same account
        for snapshot in snapshots:
            if snapshot.account_id == account_id:
                latest = snapshot
        return latest

    async def get_category_mappings(self) -> list[CategoryMapping]:
        return list(await self._load("category_mappings.csv", self._parse_category_mapping))
