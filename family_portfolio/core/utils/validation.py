"""
Validation utilities for core domain models.

Provides consistent validation across the application.
"""

from family_portfolio.core.constants import MAX_TRADING_SYMBOL_LENGTH
from family_portfolio.core.exceptions.portfolio import ValidationError


def validate_trading_symbol(symbol: str, param_name: str = "trading_symbol") -> str:
    """Validate that a trading symbol is a non-empty string.

    Args:
        symbol: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The symbol with surrounding whitespace removed

    Raises:
        ValidationError: If symbol is empty or too long
    """
    if not isinstance(symbol, str) or not symbol.strip():
        raise ValidationError(f"{param_name} must be a non-empty string, got {symbol!r}")
    stripped = symbol.strip()
    if len(stripped) > MAX_TRADING_SYMBOL_LENGTH:
        raise ValidationError(
            f"{param_name} exceeds {MAX_TRADING_SYMBOL_LENGTH} characters: {stripped}"
        )
    return stripped


def validate_account_id(account_id: int, param_name: str = "account_id") -> int:
    """Validate that an account id is a positive integer."""
    if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
        raise ValidationError(f"{param_name} must be a positive integer, got {account_id!r}")
    return account_id
