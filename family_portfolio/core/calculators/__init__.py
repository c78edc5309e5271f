"""
Pure portfolio calculators.

Every function here is synchronous, free of I/O and total over its
numeric inputs.
"""

from .family import group_accounts_by_family, summarize_family_margins
from .holdings import (
    CategoryMap,
    aggregate_summaries,
    build_category_breakdown,
    build_sector_breakdown,
    category_slices,
    summarize_holdings,
)
from .margin import (
    calculate_available_margin,
    calculate_margin_availability,
    calculate_used_margin,
    count_negative_margin_warnings,
)
from .positions import (
    extract_expiry_month,
    group_positions_by_month,
    margin_percentage,
    summarize_month_groups,
    summarize_positions,
)

__all__ = [
    "CategoryMap",
    "aggregate_summaries",
    "build_category_breakdown",
    "build_sector_breakdown",
    "calculate_available_margin",
    "calculate_margin_availability",
    "calculate_used_margin",
    "category_slices",
    "count_negative_margin_warnings",
    "extract_expiry_month",
    "group_accounts_by_family",
    "group_positions_by_month",
    "margin_percentage",
    "summarize_family_margins",
    "summarize_holdings",
    "summarize_month_groups",
    "summarize_positions",
]
