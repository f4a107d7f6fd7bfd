#!/usr/bin/env python3
"""
Unit tests for the entries CLI commands.

Each test works against a fresh data directory provided by conftest.
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from fintrack.cli.main import main
from fintrack.core.config import get_config
from fintrack.storage import AccountSnapshotStore

CREDENTIALS = ["-u", "alice", "-p", "secret"]


@pytest.mark.cli
class TestEntriesCLI:
    """Test recording, listing, editing and removing entries."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def invoke(self, *args, **kwargs):
        return self.runner.invoke(main, list(args), **kwargs)

    def register(self):
        result = self.invoke("register", *CREDENTIALS)
        assert result.exit_code == 0, result.output

    def test_add_income_and_list(self):
        """Test an added income shows up in the listing."""
        self.register()

        result = self.invoke("entries", "add-income", "salary", "1,000", *CREDENTIALS)
        assert result.exit_code == 0, result.output
        assert "✅ Income added: salary 1,000.00" in result.output

        result = self.invoke("entries", "list", *CREDENTIALS)
        assert result.exit_code == 0
        assert "Entries for alice:" in result.output
        assert "1. Income" in result.output
        assert "+1,000.00" in result.output

    def test_entries_are_persisted(self):
        """Test recorded entries are written to the snapshot file."""
        self.register()
        self.invoke("entries", "add-expense", "food", "12.50", *CREDENTIALS)

        accounts = AccountSnapshotStore(get_config().storage.data_file).load()
        entries = accounts["alice"].ledger.entries
        assert [(e.category, e.amount, e.is_income) for e in entries] == [("food", 12.5, False)]

    def test_list_empty(self):
        """Test listing with no entries."""
        self.register()

        result = self.invoke("entries", "list", *CREDENTIALS)
        assert result.exit_code == 0
        assert "No entries recorded yet." in result.output

    def test_add_expense_reports_budget_warning(self):
        """Test the percent warning and income warning after an expense."""
        self.register()
        self.invoke("budget", "set", "food", "100", *CREDENTIALS)

        result = self.invoke("entries", "add-expense", "food", "85", *CREDENTIALS)

        assert result.exit_code == 0, result.output
        assert "✅ Expense added: food 85.00" in result.output
        assert "80% of the 'food' budget is spent (15.00 left)" in result.output
        assert "Total expenses exceed total income" in result.output

    def test_add_expense_reports_exhausted_and_over(self):
        """Test exhausted and over-budget alerts."""
        self.register()
        self.invoke("entries", "add-income", "salary", "1000", *CREDENTIALS)
        self.invoke("budget", "set", "food", "100", *CREDENTIALS)

        result = self.invoke("entries", "add-expense", "food", "100", *CREDENTIALS)
        assert "Budget for 'food' is exhausted" in result.output
        assert "Total expenses exceed total income" not in result.output

        result = self.invoke("entries", "add-expense", "food", "5", *CREDENTIALS)
        assert "Budget exceeded for 'food' by 5.00" in result.output

    def test_invalid_amount(self):
        """Test unparseable or non-positive amounts fail."""
        self.register()

        result = self.invoke("entries", "add-income", "salary", "lots", *CREDENTIALS)
        assert result.exit_code == 2
        assert "Invalid amount" in result.output

        result = self.invoke("entries", "add-income", "salary", "0", *CREDENTIALS)
        assert result.exit_code == 1
        assert "Amount must be positive" in result.output

    def test_wrong_password(self):
        """Test commands refuse a wrong password."""
        self.register()

        result = self.invoke("entries", "list", "-u", "alice", "-p", "nope")
        assert result.exit_code == 1
        assert "Wrong password" in result.output

    def test_credentials_from_environment(self):
        """Test FINTRACK_USERNAME/FINTRACK_PASSWORD are used when options are absent."""
        self.register()

        result = self.invoke(
            "entries", "list", env={"FINTRACK_USERNAME": "alice", "FINTRACK_PASSWORD": "secret"}
        )
        assert result.exit_code == 0, result.output
        assert "No entries recorded yet." in result.output

    def test_edit_entry(self):
        """Test editing amount and direction of an entry."""
        self.register()
        self.invoke("entries", "add-expense", "food", "10", *CREDENTIALS)

        result = self.invoke("entries", "edit", "1", "--amount", "25", "--type", "income", *CREDENTIALS)
        assert result.exit_code == 0, result.output
        assert "✅ Entry updated:" in result.output
        assert "+25.00" in result.output

    def test_edit_requires_a_change(self):
        """Test edit without any option is a usage error."""
        self.register()
        self.invoke("entries", "add-expense", "food", "10", *CREDENTIALS)

        result = self.invoke("entries", "edit", "1", *CREDENTIALS)
        assert result.exit_code == 2
        assert "Nothing to change" in result.output

    def test_edit_out_of_range(self):
        """Test positions beyond the ledger are rejected."""
        self.register()

        result = self.invoke("entries", "edit", "3", "--amount", "5", *CREDENTIALS)
        assert result.exit_code == 1
        assert "Invalid entry index" in result.output

    def test_remove_with_confirmation(self):
        """Test removal asks first and deletes on yes."""
        self.register()
        self.invoke("entries", "add-expense", "food", "10", *CREDENTIALS)
        self.invoke("entries", "add-expense", "rent", "900", *CREDENTIALS)

        result = self.invoke("entries", "remove", "1", *CREDENTIALS, input="y\n")
        assert result.exit_code == 0, result.output
        assert "✅ Entry #1 removed: food 10.00" in result.output

        result = self.invoke("entries", "list", *CREDENTIALS)
        assert "food" not in result.output
        assert "rent" in result.output

    def test_remove_declined(self):
        """Test declining the confirmation keeps the entry."""
        self.register()
        self.invoke("entries", "add-expense", "food", "10", *CREDENTIALS)

        result = self.invoke("entries", "remove", "1", *CREDENTIALS, input="n\n")
        assert result.exit_code == 1

        result = self.invoke("entries", "list", *CREDENTIALS)
        assert "food" in result.output

    def test_filter(self):
        """Test filtering by category with and without a range."""
        self.register()
        self.invoke("entries", "add-income", "salary", "1000", *CREDENTIALS)
        self.invoke("entries", "add-expense", "food", "20", *CREDENTIALS)
        self.invoke("entries", "add-expense", "rent", "500", *CREDENTIALS)

        result = self.invoke("entries", "filter", "-c", "food", "-c", "salary", *CREDENTIALS)
        assert result.exit_code == 0, result.output
        assert "Matched 2 entries: income 1,000.00, expenses 20.00" in result.output
        assert "rent" not in result.output

        result = self.invoke(
            "entries", "filter", "-c", "food", "--start", "2000-01-01", "--end", "2000-12-31", *CREDENTIALS
        )
        assert result.exit_code == 0
        assert "No entries match" in result.output

    def test_filter_invalid_timestamp(self):
        """Test a malformed --start is a usage error."""
        self.register()

        result = self.invoke("entries", "filter", "-c", "food", "--start", "last week", *CREDENTIALS)
        assert result.exit_code == 2
        assert "Invalid timestamp" in result.output

    def test_unexpected_error_writes_backup(self, monkeypatch):
        """Test an unexpected failure reports the error and backs up all accounts."""
        monkeypatch.setenv("FINTRACK_BACKUP_ENABLED", "true")
        self.register()

        with patch(
            "fintrack.ledger.engine.AggregationEngine.add_income", side_effect=RuntimeError("disk on fire")
        ):
            result = self.invoke("entries", "add-income", "salary", "10", *CREDENTIALS)

        assert result.exit_code == 1
        assert "Unexpected error: disk on fire" in result.output
        assert "backup written to" in result.output
        assert list(get_config().storage.backup_dir.glob("backup_accounts_*.json"))
