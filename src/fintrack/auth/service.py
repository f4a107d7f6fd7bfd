#!/usr/bin/env python3
"""
Authentication Service

Registration and login against an AccountStore. The service keeps no
"current user"; callers hold on to the Account it returns.
"""

import logging

from ..core.exceptions import (
    InvalidArgumentError,
    PasswordMismatchError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from ..ledger.models import Account
from ..storage.store import AccountStore

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 4


def validate_credentials(username: str | None, password: str | None) -> None:
    """
    Check credential shape (not correctness).

    Raises:
        InvalidArgumentError: Blank values, username shorter than 3 or
            password shorter than 4 characters after trimming
    """
    if username is None or not username.strip():
        raise InvalidArgumentError("Username must not be empty")
    if password is None or not password.strip():
        raise InvalidArgumentError("Password must not be empty")
    if len(username.strip()) < MIN_USERNAME_LENGTH:
        raise InvalidArgumentError(f"Username must be at least {MIN_USERNAME_LENGTH} characters")
    if len(password.strip()) < MIN_PASSWORD_LENGTH:
        raise InvalidArgumentError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")


class AuthenticationService:
    """Registers, authenticates and deletes accounts in a store."""

    def __init__(self, store: AccountStore):
        self.store = store

    def register(self, username: str, password: str) -> Account:
        """
        Create and store a new account with an empty ledger.

        Raises:
            InvalidArgumentError: Malformed credentials
            UserAlreadyExistsError: Username is taken
        """
        validate_credentials(username, password)
        username = username.strip()

        if self.store.contains(username):
            raise UserAlreadyExistsError(f"User '{username}' already exists")

        account = Account(username=username, password=password)
        self.store.save(username, account)
        logger.info(f"Registered user '{username}'")
        return account

    def login(self, username: str, password: str) -> Account:
        """
        Return the stored account if the password matches.

        Raises:
            InvalidArgumentError: Malformed credentials
            UserNotFoundError: Unknown username
            PasswordMismatchError: Wrong password
        """
        validate_credentials(username, password)
        username = username.strip()

        account = self.store.find(username)
        if account is None:
            raise UserNotFoundError(f"User '{username}' not found")

        if password.strip() != account.password:
            logger.warning(f"Failed login for user '{username}'")
            raise PasswordMismatchError("Wrong password")

        logger.debug(f"User '{username}' logged in")
        return account

    def login_or_register(self, username: str, password: str) -> Account:
        """Log in when the username is known, otherwise register it."""
        if username is not None and self.store.contains(username.strip()):
            return self.login(username, password)
        return self.register(username, password)

    def delete_account(self, username: str) -> None:
        """
        Remove an account and all of its data.

        Raises:
            UserNotFoundError: Unknown username
        """
        if username is None or not self.store.contains(username.strip()):
            raise UserNotFoundError(f"User '{username}' not found")
        self.store.delete(username.strip())
        logger.info(f"Deleted user '{username.strip()}'")
