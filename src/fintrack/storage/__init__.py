"""
Storage Package

Account storage (in-memory and file-backed) and the file formats used for
snapshots, backups, single-account export/import and YAML budget plans.
"""

from .persistence import (
    AccountSnapshotStore,
    export_account,
    import_account,
    load_budget_plan,
)
from .store import AccountStore, FileAccountStore, InMemoryAccountStore

__all__ = [
    "AccountSnapshotStore",
    "AccountStore",
    "FileAccountStore",
    "InMemoryAccountStore",
    "export_account",
    "import_account",
    "load_budget_plan",
]
