"""
Custom exception hierarchy for the family portfolio service.

This module defines domain-specific exceptions for better error handling.
"""


class PortfolioException(Exception):
    """Base exception for all portfolio-related errors."""

    pass


class ValidationError(PortfolioException):
    """Raised when input validation fails."""

    pass


class DataError(PortfolioException):
    """Raised when data access or processing fails."""

    pass


class ConfigurationError(PortfolioException):
    """Raised when configuration is invalid."""

    pass


class AccountNotFoundError(PortfolioException):
    """Raised when an account id is not known to the data source."""

    def __init__(self, account_id: int):
        self.account_id = account_id
        super().__init__(f"Account not found: {account_id}")


class FamilyNotFoundError(PortfolioException):
    """Raised when no account belongs to the requested family."""

    def __init__(self, family: str):
        self.family = family
        super().__init__(f"No accounts found for family: {family}")
