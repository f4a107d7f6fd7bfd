#!/usr/bin/env python3
"""
Ledger Aggregation Engine

Stateless computations over an account's ledger: totals, per-category
breakdowns, budget-remaining and threshold checks, category/time filtering,
plus the validated mutations (recording entries, budgets, edits, transfers).

All sums accumulate in entry insertion order with plain float addition. No
rounding is applied; display code formats the results.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ..core.exceptions import (
    CategoryNotFoundError,
    InsufficientFundsError,
    InvalidArgumentError,
)
from .models import Account, Entry

# Absolute tolerance for treating a remaining budget as zero
BUDGET_ZERO_TOLERANCE = 0.01


class BudgetAlert(Enum):
    """Budget state reported after recording an expense."""

    NONE = "none"
    WARNING = "warning"  # spent >= warn_percent of the limit
    EXHAUSTED = "exhausted"  # remaining within tolerance of zero
    OVER = "over"  # remaining below zero


@dataclass(frozen=True)
class BudgetStatus:
    """
    Budget position of one category.

    Attributes:
        category: Category name
        limit: Budget limit (0.0 when unset)
        spent: Sum of expenses in the category
    """

    category: str
    limit: float
    spent: float

    @property
    def remaining(self) -> float:
        """Return limit minus spent (negative on overspend)."""
        return self.limit - self.spent

    @property
    def over_budget(self) -> bool:
        return self.remaining < 0

    @property
    def exhausted(self) -> bool:
        return abs(self.remaining) < BUDGET_ZERO_TOLERANCE


@dataclass(frozen=True)
class LedgerSummary:
    """Aggregated figures for one account."""

    total_income: float
    total_outcome: float
    income_by_category: dict[str, float]
    outcome_by_category: dict[str, float]
    entry_count: int

    @property
    def balance(self) -> float:
        """Return total_income minus total_outcome."""
        return self.total_income - self.total_outcome


class AggregationEngine:
    """
    Validated mutations and pure queries over an Account's Ledger.

    The engine holds no state of its own; every method takes the account it
    operates on, so one instance can serve any number of accounts.
    """

    # ------------------------------------------------------------------
    # Mutations

    def add_income(self, account: Account, category: str, amount: float) -> Entry:
        """Record an income entry timestamped now."""
        return self._add_entry(account, category, amount, is_income=True)

    def add_outcome(self, account: Account, category: str, amount: float) -> Entry:
        """Record an expense entry timestamped now."""
        return self._add_entry(account, category, amount, is_income=False)

    def _add_entry(self, account: Account, category: str, amount: float, is_income: bool) -> Entry:
        _validate_category(category)
        _validate_positive(amount)
        entry = Entry(amount=amount, category=category.strip(), is_income=is_income)
        account.ledger.add_entry(entry)
        return entry

    def set_budget(self, account: Account, category: str, amount: float) -> None:
        """Set or overwrite the budget limit of a category."""
        _validate_category(category, "Budget category must not be empty")
        if amount is None or not amount >= 0:
            raise InvalidArgumentError("Budget must not be negative")
        account.ledger.set_budget(category, amount)

    def remove_budget(self, account: Account, category: str) -> None:
        """
        Remove the budget of a category.

        Raises:
            InvalidArgumentError: If category is blank
            CategoryNotFoundError: If the category has no budget
        """
        _validate_category(category)
        category = category.strip()
        if not account.ledger.has_budget(category):
            raise CategoryNotFoundError(f"No budget found for category '{category}'")
        account.ledger.remove_budget(category)

    def edit_entry(
        self,
        account: Account,
        index: int,
        *,
        category: str | None = None,
        amount: float | None = None,
        is_income: bool | None = None,
    ) -> Entry:
        """
        Change the category, amount and/or direction of an existing entry.

        Arguments left as None are not changed. All supplied values are
        validated before anything is modified; the timestamp is preserved.

        Returns:
            The edited entry
        """
        entry = account.ledger.get_entry(index)
        if category is not None:
            _validate_category(category)
        if amount is not None:
            _validate_positive(amount)

        if category is not None:
            entry.category = category.strip()
        if amount is not None:
            entry.amount = amount
        if is_income is not None:
            entry.is_income = is_income
        return entry

    def remove_entry(self, account: Account, index: int) -> Entry:
        """Remove and return the entry at a position."""
        return account.ledger.remove_entry(index)

    def transfer(
        self,
        sender: Account,
        recipient: Account,
        amount: float,
        description: str | None = None,
    ) -> tuple[Entry, Entry]:
        """
        Move funds from one account to another.

        The sender gets an expense (category: description, or
        "Transfer to <recipient>") and the recipient an income
        ("Transfer from <sender>").

        Raises:
            InvalidArgumentError: Non-positive amount or sender == recipient
            InsufficientFundsError: Amount exceeds the sender's balance

        Returns:
            (sender entry, recipient entry)
        """
        _validate_positive(amount)
        if sender == recipient:
            raise InvalidArgumentError("Cannot transfer to the same account")

        available = self.current_balance(sender)
        if amount > available:
            raise InsufficientFundsError(
                f"Insufficient funds: transfer of {amount:.2f} exceeds balance {available:.2f}"
            )

        outgoing_category = (
            description.strip() if description and description.strip() else f"Transfer to {recipient.username}"
        )
        outgoing = self.add_outcome(sender, outgoing_category, amount)
        incoming = self.add_income(recipient, f"Transfer from {sender.username}", amount)
        return outgoing, incoming

    # ------------------------------------------------------------------
    # Totals

    def total_income(self, account: Account) -> float:
        return _sum_amounts(entry for entry in account.ledger.entries if entry.is_income)

    def total_outcome(self, account: Account) -> float:
        return _sum_amounts(entry for entry in account.ledger.entries if not entry.is_income)

    def current_balance(self, account: Account) -> float:
        """Total income minus total outcome; may be negative."""
        return self.total_income(account) - self.total_outcome(account)

    def outcome_exceeds_income(self, account: Account) -> bool:
        return self.total_outcome(account) > self.total_income(account)

    # ------------------------------------------------------------------
    # Per-category breakdowns

    def income_by_category(self, account: Account) -> dict[str, float]:
        """Sum of income per category, ordered by category name."""
        return _group_by_category(entry for entry in account.ledger.entries if entry.is_income)

    def outcome_by_category(self, account: Account) -> dict[str, float]:
        """Sum of expenses per category, ordered by category name."""
        return _group_by_category(entry for entry in account.ledger.entries if not entry.is_income)

    def all_categories(self, account: Account) -> list[str]:
        """Distinct categories of all entries, sorted."""
        return sorted({entry.category for entry in account.ledger.entries})

    def budget_categories(self, account: Account) -> list[str]:
        """Categories with an explicit budget, sorted."""
        return list(account.ledger.budgets)

    # ------------------------------------------------------------------
    # Budgets

    def budget_for(self, account: Account, category: str) -> float:
        """Budget limit of a category, 0.0 when unset."""
        budget = account.ledger.get_budget(category)
        return budget if budget is not None else 0.0

    def spent_in(self, account: Account, category: str) -> float:
        """Sum of expenses in a category, 0.0 when none."""
        if not category:
            return 0.0
        return self.outcome_by_category(account).get(category.strip(), 0.0)

    def budget_remaining(self, account: Account, category: str) -> float:
        """Budget minus spent; negative on overspend, -spent when no budget is set."""
        return self.budget_for(account, category) - self.spent_in(account, category)

    def is_over_budget(self, account: Account, category: str) -> bool:
        return self.budget_remaining(account, category) < 0

    def is_budget_exhausted(self, account: Account, category: str) -> bool:
        return abs(self.budget_remaining(account, category)) < BUDGET_ZERO_TOLERANCE

    def is_over_budget_by_percent(self, account: Account, category: str, percent: float) -> bool:
        """
        Check whether spending reached percent% of the budget.

        A budget of exactly zero never triggers, whatever the spend.
        """
        budget = self.budget_for(account, category)
        if budget == 0:
            return False
        return self.spent_in(account, category) >= budget * percent / 100

    def budget_status(self, account: Account, category: str) -> BudgetStatus:
        return BudgetStatus(
            category=category,
            limit=self.budget_for(account, category),
            spent=self.spent_in(account, category),
        )

    def budget_overview(self, account: Account) -> list[BudgetStatus]:
        """BudgetStatus for every budgeted category, sorted by name."""
        spent = self.outcome_by_category(account)
        return [
            BudgetStatus(category=category, limit=limit, spent=spent.get(category, 0.0))
            for category, limit in account.ledger.budgets.items()
        ]

    def budget_alert(self, account: Account, category: str, warn_percent: float) -> BudgetAlert:
        """
        Classify the budget state of a category.

        Categories without a budget never alert. Over-budget takes precedence
        over exhausted, which takes precedence over the percent warning.
        """
        if not account.ledger.has_budget(category):
            return BudgetAlert.NONE
        if self.is_over_budget(account, category):
            return BudgetAlert.OVER
        if self.is_budget_exhausted(account, category):
            return BudgetAlert.EXHAUSTED
        if self.is_over_budget_by_percent(account, category, warn_percent):
            return BudgetAlert.WARNING
        return BudgetAlert.NONE

    # ------------------------------------------------------------------
    # Filtering

    def entries_in_categories(self, account: Account, categories: Iterable[str] | None) -> list[Entry]:
        """
        Entries whose category is in the given set, in insertion order.

        An empty or None set yields an empty list. A single category may be
        passed as a plain string.
        """
        if not categories:
            return []
        wanted = {categories} if isinstance(categories, str) else set(categories)
        return [entry for entry in account.ledger.entries if entry.category in wanted]

    def entries_in_categories_and_range(
        self,
        account: Account,
        time_from: datetime,
        time_to: datetime,
        categories: Iterable[str] | None,
    ) -> list[Entry]:
        """Entries in the given categories with time_from <= timestamp <= time_to."""
        return [
            entry
            for entry in self.entries_in_categories(account, categories)
            if time_from <= entry.timestamp <= time_to
        ]

    # ------------------------------------------------------------------
    # Reports

    def summarize(self, account: Account) -> LedgerSummary:
        return LedgerSummary(
            total_income=self.total_income(account),
            total_outcome=self.total_outcome(account),
            income_by_category=self.income_by_category(account),
            outcome_by_category=self.outcome_by_category(account),
            entry_count=len(account.ledger),
        )


def _validate_category(category: str | None, message: str = "Category must not be empty") -> None:
    if category is None or not category.strip():
        raise InvalidArgumentError(message)


def _validate_positive(amount: float) -> None:
    if amount is None or not amount > 0:
        raise InvalidArgumentError("Amount must be positive")


def _sum_amounts(entries: Iterable[Entry]) -> float:
    total = 0.0
    for entry in entries:
        total += entry.amount
    return total


def _group_by_category(entries: Iterable[Entry]) -> dict[str, float]:
    totals: dict[str, float] = {}
    for entry in entries:
        totals[entry.category] = totals.get(entry.category, 0.0) + entry.amount
    return {category: totals[category] for category in sorted(totals)}
