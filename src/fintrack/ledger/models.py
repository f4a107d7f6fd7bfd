#!/usr/bin/env python3
"""
Ledger Data Models

Entry, Ledger and Account: the records every other layer operates on.

Validation of caller input lives in AggregationEngine; these models only
guard their own structural invariants (no missing entries, no negative or
blank-keyed budgets, in-range positions).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..core.dates import from_iso, to_iso
from ..core.exceptions import IndexOutOfRangeError, InvalidArgumentError


@dataclass
class Entry:
    """
    One recorded income or expense event.

    Equal to another entry iff amount, category, direction and timestamp all
    match. The timestamp defaults to creation time and may be overridden (for
    imports and range tests).
    """

    amount: float
    category: str
    is_income: bool
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def signed_amount(self) -> float:
        """Amount with expenses negated."""
        return self.amount if self.is_income else -self.amount

    @property
    def kind(self) -> str:
        """'income' or 'expense'."""
        return "income" if self.is_income else "expense"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "amount": self.amount,
            "category": self.category,
            "is_income": self.is_income,
            "timestamp": to_iso(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        """Create Entry from dictionary."""
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Entry record must be a mapping, got {type(data).__name__}")
        if not isinstance(data.get("category"), str):
            raise InvalidArgumentError("Entry record needs a text category")
        timestamp = data.get("timestamp")
        return cls(
            amount=float(data["amount"]),
            category=data["category"],
            is_income=bool(data["is_income"]),
            timestamp=from_iso(timestamp) if timestamp else datetime.now(),
        )


class Ledger:
    """
    An account's entries plus its category budget limits.

    Entries keep insertion order, which is the basis for positional edits and
    removals. Budgets are keyed by trimmed, case-sensitive category name and
    iterate in lexicographic order.
    """

    def __init__(self, entries: list[Entry] | None = None, budgets: dict[str, float] | None = None):
        self._entries: list[Entry] = []
        self._budgets: dict[str, float] = {}
        for entry in entries or []:
            self.add_entry(entry)
        for category, amount in (budgets or {}).items():
            self.set_budget(category, amount)

    @property
    def entries(self) -> list[Entry]:
        """Entries in insertion order (a copy of the list, same Entry objects)."""
        return list(self._entries)

    @property
    def budgets(self) -> dict[str, float]:
        """Budget limits sorted by category name."""
        return {category: self._budgets[category] for category in sorted(self._budgets)}

    def __len__(self) -> int:
        return len(self._entries)

    def add_entry(self, entry: Entry | None) -> None:
        """Append an entry."""
        if entry is None:
            raise InvalidArgumentError("Entry must not be None")
        self._entries.append(entry)

    def get_entry(self, index: int) -> Entry:
        """Return the entry at a position."""
        self._check_index(index)
        return self._entries[index]

    def remove_entry(self, index: int) -> Entry:
        """Remove and return the entry at a position."""
        self._check_index(index)
        return self._entries.pop(index)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entries):
            raise IndexOutOfRangeError(
                f"Invalid entry index: {index} (ledger has {len(self._entries)} entries)"
            )

    def set_budget(self, category: str, amount: float) -> None:
        """Insert or overwrite the limit for a category."""
        if category is None or not category.strip():
            raise InvalidArgumentError("Budget category must not be empty")
        if amount is None or not amount >= 0:
            raise InvalidArgumentError("Budget must not be negative")
        self._budgets[category.strip()] = amount

    def get_budget(self, category: str | None) -> float | None:
        """Return the limit for a category, or None if unset."""
        if not category:
            return None
        return self._budgets.get(category.strip())

    def has_budget(self, category: str | None) -> bool:
        return category is not None and category.strip() in self._budgets

    def remove_budget(self, category: str | None) -> None:
        if category is not None:
            self._budgets.pop(category.strip(), None)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "entries": [entry.to_dict() for entry in self._entries],
            "budgets": self.budgets,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Ledger":
        """Create Ledger from dictionary; None yields an empty ledger."""
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Ledger record must be a mapping, got {type(data).__name__}")

        entries = data.get("entries") or []
        budgets = data.get("budgets") or {}
        if not isinstance(entries, list) or not isinstance(budgets, dict):
            raise InvalidArgumentError("Ledger record needs an entry list and a budget mapping")
        return cls(
            entries=[Entry.from_dict(item) for item in entries],
            budgets={category: float(amount) for category, amount in budgets.items()},
        )

    def __repr__(self) -> str:
        return f"Ledger(entries={len(self._entries)}, budgets={len(self._budgets)})"


@dataclass(eq=False)
class Account:
    """
    A user identity plus its owned Ledger.

    Username and password are trimmed on construction. Equality and hashing
    use the username only. Length rules are enforced at registration by the
    authentication service.
    """

    username: str
    password: str
    ledger: Ledger = field(default_factory=Ledger)

    def __post_init__(self):
        if not isinstance(self.username, str) or not self.username.strip():
            raise InvalidArgumentError("Username must not be empty")
        if not isinstance(self.password, str) or not self.password.strip():
            raise InvalidArgumentError("Password must not be empty")
        self.username = self.username.strip()
        self.password = self.password.strip()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self.username == other.username

    def __hash__(self) -> int:
        return hash(self.username)

    def __str__(self) -> str:
        return (
            f"User: {self.username} "
            f"(entries: {len(self.ledger)}, budgets: {len(self.ledger.budgets)})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "username": self.username,
            "password": self.password,
            "ledger": self.ledger.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Account":
        """Create Account from dictionary."""
        return cls(
            username=data["username"],
            password=data["password"],
            ledger=Ledger.from_dict(data.get("ledger")),
        )
