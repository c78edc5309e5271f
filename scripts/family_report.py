#!/usr/bin/env python3
"""
Family Report Script

Prints holdings, category and margin tables for a snapshot directory.
Input: directory with accounts.csv, holdings.csv, positions.csv, margins.csv
and category_mappings.csv (see family_portfolio.infrastructure.data.csv_source).
"""

import argparse
import asyncio
import sys

from loguru import logger

from family_portfolio.core.exceptions.portfolio import PortfolioException
from family_portfolio.core.services.portfolio_service import PortfolioService
from family_portfolio.core.utils.log_setup import configure_logging
from family_portfolio.infrastructure.data import CSVPortfolioSource
from family_portfolio.infrastructure.reporting.frames import (
    account_summaries_frame,
    category_breakdown_frame,
    margin_overview_frame,
    month_groups_frame,
)


async def print_report(service: PortfolioService, family: str | None) -> None:
    """Print the report for one family, or for every family."""
    families = await service.list_families()
    selected = [family] if family else list(families)

    for name in selected:
        report = await service.family_report(name)
        print(f"\n=== {name} ===")
        print(account_summaries_frame(report).to_string(index=False))
        print("\nCategories:")
        print(category_breakdown_frame(report.summary.category_breakdown).to_string(index=False))

        groups = await service.positions_by_month(family=name)
        if groups:
            print("\nPositions by expiry month:")
            print(month_groups_frame(groups).to_string(index=False))

    print("\n=== Margins ===")
    overview = await service.margin_overview()
    if family:
        overview = [f for f in overview if f.family == family]
    print(margin_overview_frame(overview).to_string(index=False))


def main():
    parser = argparse.ArgumentParser(
        description="Print family portfolio tables from snapshot CSV files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--data-dir",
        type=str,
        default="data",
        help="Directory containing snapshot CSV files (default: data)",
    )

    parser.add_argument("--family", type=str, help="Only report this family")

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    configure_logging("DEBUG" if args.debug else "INFO")

    try:
        service = PortfolioService(CSVPortfolioSource(args.data_dir))
        asyncio.run(print_report(service, args.family))
        return 0

    except PortfolioException as e:
        logger.error(f"Report failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
