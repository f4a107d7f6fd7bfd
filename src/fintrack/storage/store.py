#!/usr/bin/env python3
"""
AccountStore Protocol - keyed storage of accounts by username.

Two implementations:
- InMemoryAccountStore: lock-guarded dict, safe to read from an exit hook
  while another thread mutates it
- FileAccountStore: in-memory store that persists through an
  AccountSnapshotStore after every structural change
"""

import logging
import threading
from typing import Protocol

from ..core.exceptions import InvalidArgumentError
from ..ledger.models import Account
from .persistence import AccountSnapshotStore

logger = logging.getLogger(__name__)


class AccountStore(Protocol):
    """
    Protocol for account storage.

    find_all() must return a mapping the caller can modify without affecting
    the store.
    """

    def save(self, username: str, account: Account) -> None:
        """Insert or replace the account stored under username."""
        ...

    def find(self, username: str) -> Account | None:
        """Return the account for username, or None."""
        ...

    def delete(self, username: str) -> None:
        """Remove the account for username if present."""
        ...

    def find_all(self) -> dict[str, Account]:
        """Return an independent copy of the username -> account map."""
        ...

    def replace_all(self, accounts: dict[str, Account] | None) -> None:
        """Replace the whole map; None clears it."""
        ...

    def contains(self, username: str | None) -> bool:
        """Check whether an account is stored under username."""
        ...


class InMemoryAccountStore:
    """Thread-safe in-memory AccountStore."""

    def __init__(self, accounts: dict[str, Account] | None = None):
        self._lock = threading.RLock()
        self._accounts: dict[str, Account] = dict(accounts or {})

    def save(self, username: str, account: Account) -> None:
        if username is None or account is None:
            raise InvalidArgumentError("Username and account must not be None")
        with self._lock:
            self._accounts[username] = account

    def find(self, username: str) -> Account | None:
        with self._lock:
            return self._accounts.get(username)

    def delete(self, username: str) -> None:
        if username is None:
            return
        with self._lock:
            self._accounts.pop(username, None)

    def find_all(self) -> dict[str, Account]:
        with self._lock:
            return dict(self._accounts)

    def replace_all(self, accounts: dict[str, Account] | None) -> None:
        with self._lock:
            self._accounts = dict(accounts or {})

    def contains(self, username: str | None) -> bool:
        if username is None:
            return False
        with self._lock:
            return username in self._accounts

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)


class FileAccountStore(InMemoryAccountStore):
    """
    AccountStore persisted to a JSON snapshot.

    The snapshot is loaded on construction and rewritten after save, delete
    and replace_all. Ledger mutations happen in place on Account objects, so
    callers that change a ledger must call flush() to persist it.
    """

    def __init__(self, snapshot: AccountSnapshotStore):
        super().__init__(snapshot.load())
        self.snapshot = snapshot

    def save(self, username: str, account: Account) -> None:
        super().save(username, account)
        self.flush()

    def delete(self, username: str) -> None:
        super().delete(username)
        self.flush()

    def replace_all(self, accounts: dict[str, Account] | None) -> None:
        super().replace_all(accounts)
        self.flush()

    def flush(self) -> None:
        """Write the current account map to the snapshot file."""
        with self._lock:
            accounts = dict(self._accounts)
            if not accounts and self.snapshot.exists():
                # Snapshot.save skips empty maps; deleting the last account must still stick
                self.snapshot.data_file.unlink()
                logger.info(f"Last account removed, deleted {self.snapshot.data_file}")
                return
            self.snapshot.save(accounts)
