#!/usr/bin/env python3
"""
Error Taxonomy for fintrack

Every failure raised by the ledger core, the account store, authentication and
persistence derives from FinanceError, and also from the closest built-in
exception so callers can catch either.
"""


class FinanceError(Exception):
    """Base class for all fintrack errors."""


class InvalidArgumentError(FinanceError, ValueError):
    """Caller input failed validation (blank category, non-positive amount, ...)."""


class IndexOutOfRangeError(FinanceError, IndexError):
    """Entry position outside the bounds of a ledger."""


class CategoryNotFoundError(FinanceError, LookupError):
    """No budget exists for the requested category."""


class InsufficientFundsError(FinanceError, ValueError):
    """Transfer amount exceeds the sender's current balance."""


class UserNotFoundError(FinanceError, LookupError):
    """No account is registered under the given username."""


class UserAlreadyExistsError(FinanceError, ValueError):
    """An account is already registered under the given username."""


class PasswordMismatchError(FinanceError, ValueError):
    """Supplied password does not match the stored one."""


class PersistenceError(FinanceError, OSError):
    """Snapshot or export file is unreadable or malformed."""
