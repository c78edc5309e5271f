"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    AMOUNT_DECIMALS,
    HUNDRED,
    PERCENTAGE_DECIMALS,
    ZERO,
    round_amount,
    round_percentage,
    safe_float_comparison,
    safe_percentage,
    to_float,
)

__all__ = [
    # Utility functions
    "to_float",
    "round_amount",
    "round_percentage",
    "safe_percentage",
    "safe_float_comparison",
    # Constants
    "AMOUNT_DECIMALS",
    "PERCENTAGE_DECIMALS",
    "ZERO",
    "HUNDRED",
]
