"""
Family portfolio aggregation for brokerage accounts.
"""

__version__ = "1.0.0"
