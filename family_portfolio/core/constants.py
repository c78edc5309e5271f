"""
Core constants and limits.

Defines fixed policy values used by the margin and portfolio calculators.
"""

# Margin Policy
LIQUID_COLLATERAL_UTILIZATION = 0.5  # Broker lets 50% of liquid collateral back debits
MAX_NEGATIVE_MARGIN_WARNINGS = 2  # used and available margin checked independently

# Grouping Labels
UNKNOWN_FAMILY = "Unknown"  # Accounts without a family attribute
OTHERS_SECTOR = "Others"  # Holdings without a sector

# Price Movement Alerts (percent above average price)
ELEVATED_PRICE_CHANGE_PERCENT = 50.0
CRITICAL_PRICE_CHANGE_PERCENT = 100.0

# Data Loading
DEFAULT_CACHE_TTL_SECONDS = 30  # Dashboard refresh interval
DEFAULT_CACHE_SIZE = 16
MAX_TRADING_SYMBOL_LENGTH = 50
