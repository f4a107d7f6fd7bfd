#!/usr/bin/env python3
"""Tests for registration and login."""

import pytest

from fintrack.auth import AuthenticationService, validate_credentials
from fintrack.core.exceptions import (
    InvalidArgumentError,
    PasswordMismatchError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from fintrack.storage import InMemoryAccountStore


@pytest.mark.unit
class TestValidateCredentials:
    """Test credential shape rules."""

    @pytest.mark.parametrize(
        "username,password",
        [
            ("", "secret"),
            (None, "secret"),
            ("alice", ""),
            ("alice", None),
            ("al", "secret"),
            ("  al  ", "secret"),
            ("alice", "abc"),
            ("alice", "  abc  "),
        ],
    )
    def test_invalid(self, username, password):
        """Test blank or short credentials are rejected."""
        with pytest.raises(InvalidArgumentError):
            validate_credentials(username, password)

    def test_minimum_lengths_accepted(self):
        """Test exactly 3/4 characters pass."""
        validate_credentials("bob", "abcd")


@pytest.mark.unit
class TestAuthenticationService:
    """Test register, login and delete."""

    def setup_method(self):
        """Set up test fixtures."""
        self.store = InMemoryAccountStore()
        self.auth = AuthenticationService(self.store)

    def test_register_creates_empty_account(self):
        """Test registration stores a trimmed account with an empty ledger."""
        account = self.auth.register("  alice ", " secret ")

        assert account.username == "alice"
        assert account.password == "secret"
        assert len(account.ledger) == 0
        assert self.store.find("alice") is account

    def test_register_duplicate(self):
        """Test a taken username cannot be registered again."""
        self.auth.register("alice", "secret")

        with pytest.raises(UserAlreadyExistsError):
            self.auth.register("alice", "another")
        with pytest.raises(UserAlreadyExistsError):
            self.auth.register(" alice ", "another")

    def test_login(self):
        """Test login returns the stored account."""
        registered = self.auth.register("alice", "secret")

        assert self.auth.login("alice", "secret") is registered
        assert self.auth.login(" alice ", " secret ") is registered

    def test_login_unknown_user(self):
        """Test unknown usernames raise UserNotFoundError."""
        with pytest.raises(UserNotFoundError):
            self.auth.login("nobody", "secret")

    def test_login_wrong_password(self):
        """Test wrong passwords raise PasswordMismatchError."""
        self.auth.register("alice", "secret")

        with pytest.raises(PasswordMismatchError):
            self.auth.login("alice", "Secret")

    def test_login_or_register(self):
        """Test the combined flow registers once, then logs in."""
        created = self.auth.login_or_register("alice", "secret")

        assert self.auth.login_or_register("alice", "secret") is created
        with pytest.raises(PasswordMismatchError):
            self.auth.login_or_register("alice", "wrong-pass")

    def test_delete_account(self):
        """Test deleting an account removes it from the store."""
        self.auth.register("alice", "secret")
        self.auth.delete_account("alice")

        assert not self.store.contains("alice")
        with pytest.raises(UserNotFoundError):
            self.auth.delete_account("alice")
