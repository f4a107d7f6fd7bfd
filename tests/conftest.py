"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from fintrack.ledger import Account, AggregationEngine, Entry


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def engine() -> AggregationEngine:
    """Stateless aggregation engine."""
    return AggregationEngine()


@pytest.fixture
def account() -> Account:
    """Fresh account with an empty ledger."""
    return Account(username="alice", password="secret")


@pytest.fixture
def populated_account(account, engine) -> Account:
    """Account with a month of realistic entries and two budgets."""
    now = datetime.now()
    rows = [
        (3000.0, "salary", True, 30),
        (1200.0, "rent", False, 28),
        (85.40, "food", False, 20),
        (42.15, "food", False, 12),
        (150.0, "freelance", True, 9),
        (60.0, "transport", False, 3),
    ]
    for amount, category, is_income, days_ago in rows:
        account.ledger.add_entry(
            Entry(amount=amount, category=category, is_income=is_income, timestamp=now - timedelta(days=days_ago))
        )
    engine.set_budget(account, "food", 200.0)
    engine.set_budget(account, "rent", 1200.0)
    return account


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point configuration at a per-test data directory."""
    monkeypatch.setenv("FINTRACK_ENV", "test")
    monkeypatch.setenv("FINTRACK_DATA_DIR", str(tmp_path / "fintrack_data"))
    monkeypatch.delenv("FINTRACK_DATA_FILE", raising=False)
    monkeypatch.delenv("FINTRACK_EXPORT_DIR", raising=False)
    monkeypatch.delenv("FINTRACK_BACKUP_ENABLED", raising=False)
    monkeypatch.delenv("FINTRACK_BUDGET_WARN_PERCENT", raising=False)
    monkeypatch.delenv("FINTRACK_USERNAME", raising=False)
    monkeypatch.delenv("FINTRACK_PASSWORD", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    # Drop the cached configuration so each test sees its own environment
    monkeypatch.setattr("fintrack.core.config._config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "ledger: Tests for the ledger models and aggregation engine")
    config.addinivalue_line("markers", "storage: Tests for account stores and file formats")
    config.addinivalue_line("markers", "cli: Tests for command-line commands")
