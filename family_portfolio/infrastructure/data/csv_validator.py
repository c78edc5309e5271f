"""
Snapshot CSV validation utilities.

This module checks that exported snapshot files carry the columns the
CSV portfolio source needs.
"""

from pathlib import Path

import pandas as pd

from family_portfolio.core.exceptions.portfolio import DataError


class SnapshotCSVValidator:
    """Handles validation of snapshot CSV files."""

    REQUIRED_COLUMNS: dict[str, list[str]] = {
        "accounts.csv": ["account_id", "name"],
        "holdings.csv": ["account_id", "trading_symbol", "quantity", "average_price", "last_price"],
        "positions.csv": [
            "account_id",
            "trading_symbol",
            "quantity",
            "average_price",
            "last_price",
            "market_value",
            "pnl",
        ],
        "margins.csv": ["account_id", "net", "debits", "liquid_collateral"],
        "category_mappings.csv": ["trading_symbol", "instrument_kind", "category"],
    }

    @classmethod
    def validate_csv_structure(cls, df: pd.DataFrame, file_path: Path) -> None:
        """Validate that a loaded snapshot has the required columns."""
        required = cls.REQUIRED_COLUMNS.get(file_path.name)
        if required is None:
            raise DataError(f"Unknown snapshot file: {file_path.name}")

        missing = [column for column in required if column not in df.columns]
        if missing:
            raise DataError(f"Missing columns in {file_path.name}: {', '.join(missing)}")

    @staticmethod
    def validate_data_directory(data_dir: Path) -> None:
        """Validate that the data directory exists."""
        if not data_dir.exists():
            raise DataError(f"Data directory does not exist: {data_dir}")
        if not data_dir.is_dir():
            raise DataError(f"Data path is not a directory: {data_dir}")
