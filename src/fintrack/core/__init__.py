"""
Core Utilities Package

Shared infrastructure used by the ledger, storage, auth and CLI packages.

This package provides:
- Error taxonomy shared by every layer
- Configuration management for environment-specific settings
- Amount parsing and display formatting
- Timestamp parsing and JSON helpers
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import format_amount, format_percent, parse_amount
from .dates import format_timestamp, parse_timestamp
from .exceptions import (
    CategoryNotFoundError,
    FinanceError,
    IndexOutOfRangeError,
    InsufficientFundsError,
    InvalidArgumentError,
    PasswordMismatchError,
    PersistenceError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    # Errors
    "CategoryNotFoundError",
    # Configuration
    "Config",
    "Environment",
    "FinanceError",
    "IndexOutOfRangeError",
    "InsufficientFundsError",
    "InvalidArgumentError",
    "PasswordMismatchError",
    "PersistenceError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    # Formatting
    "format_amount",
    "format_percent",
    "format_timestamp",
    "get_config",
    "get_data_dir",
    "is_development",
    "is_production",
    "is_test",
    "parse_amount",
    "parse_timestamp",
    "reload_config",
]
