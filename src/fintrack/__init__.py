"""
fintrack - Personal Finance Tracker

A console tool for recording income and expenses, setting per-category
budgets, viewing aggregated statistics and transferring funds between
accounts.

Key Features:
- Income/expense ledger with category breakdowns
- Per-category budgets with overspend and percent-of-limit alerts
- Category and time-range filtering
- Transfers between registered accounts
- JSON snapshot persistence, backups and per-account export/import

Domain Packages:
- core: Configuration, errors, amount and timestamp helpers
- ledger: Entry/Ledger/Account models and the aggregation engine
- storage: Account stores and file formats
- auth: Registration and login
- cli: Command-line interface

Example Usage:
    from fintrack import Account, AggregationEngine

    engine = AggregationEngine()
    account = Account(username="alice", password="secret")
    engine.add_income(account, "salary", 1000.0)
    engine.current_balance(account)

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "fintrack contributors"

from .core.config import Environment, get_config
from .core.exceptions import FinanceError
from .ledger import Account, AggregationEngine, Entry, Ledger

__all__ = [
    # Models
    "Account",
    "AggregationEngine",
    "Entry",
    # Configuration
    "Environment",
    "FinanceError",
    "Ledger",
    "get_config",
]
