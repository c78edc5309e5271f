"""
Financial helpers for portfolio arithmetic.

Amounts are plain floats in account currency. Calculators never round
intermediate values; rounding is applied only when presenting results.
"""

# Presentation precision (number of decimal places)
AMOUNT_DECIMALS = 2  # currency amounts
PERCENTAGE_DECIMALS = 2  # percentages

# Common financial values as float constants
ZERO = 0.0
HUNDRED = 100.0


def to_float(value: str | int | float | None) -> float:
    """Convert various numeric types to float, treating None as zero.

    Args:
        value: Numeric value to convert

    Returns:
        Float representation of the value

    Examples:
        >>> to_float(50000)
        50000.0
        >>> to_float(None)
        0.0
    """
    if value is None:
        return ZERO
    if isinstance(value, float):
        return value
    return float(value)


def round_amount(amount: float) -> float:
    """Round a currency amount for presentation."""
    return round(amount, AMOUNT_DECIMALS)


def round_percentage(percentage: float) -> float:
    """Round a percentage for presentation."""
    return round(percentage, PERCENTAGE_DECIMALS)


def safe_percentage(numerator: float, denominator: float) -> float:
    """Calculate numerator as a percentage of denominator.

    A non-positive denominator yields 0.0 instead of NaN or infinity.

    Args:
        numerator: Part value
        denominator: Whole value

    Returns:
        Percentage as float

    Examples:
        >>> safe_percentage(25.0, 200.0)
        12.5
        >>> safe_percentage(25.0, 0.0)
        0.0
    """
    if denominator <= ZERO:
        return ZERO
    return numerator / denominator * HUNDRED


def safe_float_comparison(a: float, b: float, tolerance: float = 1e-9) -> bool:
    """Compare floats with tolerance for precision issues.

    Args:
        a: First float to compare
        b: Second float to compare
        tolerance: Acceptable difference (default: 1e-9)

    Returns:
        True if floats are equal within tolerance
    """
    return abs(a - b) < tolerance
