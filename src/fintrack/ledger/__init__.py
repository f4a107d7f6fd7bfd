"""
Ledger Package

Entry/Ledger/Account models and the aggregation engine that computes totals,
category breakdowns, budget positions and filtered entry views.
"""

from .engine import (
    BUDGET_ZERO_TOLERANCE,
    AggregationEngine,
    BudgetAlert,
    BudgetStatus,
    LedgerSummary,
)
from .models import Account, Entry, Ledger

__all__ = [
    "BUDGET_ZERO_TOLERANCE",
    "Account",
    "AggregationEngine",
    "BudgetAlert",
    "BudgetStatus",
    "Entry",
    "Ledger",
    "LedgerSummary",
]
