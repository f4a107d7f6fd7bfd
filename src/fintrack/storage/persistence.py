#!/usr/bin/env python3
"""
Account Persistence

File formats for accounts:
- Snapshot: the whole username -> account map as one JSON document,
  overwritten in full on every save
- Backups: timestamped copies of the snapshot written on unexpected failures
- Export/import: one account per JSON file, round-trip exact
- Budget plans: YAML mapping of category -> limit, applied in bulk
"""

import logging
import math
from datetime import datetime
from pathlib import Path
from typing import Any

import yaml

from ..core.exceptions import InvalidArgumentError, PersistenceError
from ..core.json_utils import read_json, write_json
from ..ledger.models import Account, Ledger
from .datastore_mixin import DataStoreMixin

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1
BACKUP_PATTERN = "backup_accounts_*.json"


class AccountSnapshotStore(DataStoreMixin):
    """
    DataStore for the account snapshot file.

    Loads and saves the full account map and reports metadata (age, size,
    account count) about the file on disk.
    """

    def __init__(self, data_file: Path):
        """
        Initialize snapshot store.

        Args:
            data_file: Path of the JSON snapshot (data/accounts.json)
        """
        super().__init__()
        self.data_file = Path(data_file)

    def exists(self) -> bool:
        """Check if the snapshot file exists."""
        return self.data_file.exists()

    def load(self) -> dict[str, Account]:
        """
        Load all accounts from the snapshot.

        Returns:
            Mapping of username to Account; empty when no snapshot exists yet

        Raises:
            PersistenceError: If the snapshot cannot be parsed
        """
        if not self.exists():
            logger.info(f"No snapshot at {self.data_file}, starting with an empty account map")
            return {}

        try:
            document = read_json(self.data_file)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Failed to read snapshot {self.data_file}: {e}") from e

        accounts = _accounts_from_document(document, self.data_file)
        logger.info(f"Loaded {len(accounts)} accounts from {self.data_file}")
        return accounts

    def save(self, accounts: dict[str, Account]) -> None:
        """
        Overwrite the snapshot with the given account map.

        An empty map is not written, so a failed load never clobbers an
        existing snapshot with nothing.
        """
        if not accounts:
            logger.warning("No accounts to save, snapshot left untouched")
            return

        write_json(self.data_file, _document_from_accounts(accounts))
        self._invalidate_cache()
        logger.debug(f"Saved {len(accounts)} accounts to {self.data_file}")

    def backup(self, accounts: dict[str, Account], backup_dir: Path) -> Path | None:
        """
        Write a timestamped copy of the account map.

        Args:
            accounts: Account map to back up
            backup_dir: Directory receiving backup_accounts_<timestamp>.json

        Returns:
            Path of the backup file, or None when there was nothing to back up
        """
        if not accounts:
            logger.warning("No accounts to back up")
            return None

        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        backup_file = Path(backup_dir) / f"backup_accounts_{stamp}.json"
        write_json(backup_file, _document_from_accounts(accounts))
        self._invalidate_cache()
        logger.info(f"Backup created: {backup_file}")
        return backup_file

    def list_backups(self, backup_dir: Path) -> list[Path]:
        """Backup files in backup_dir, oldest first."""
        return self._get_files_cached(Path(backup_dir), BACKUP_PATTERN)

    def latest_backup(self, backup_dir: Path) -> Path | None:
        """Most recently written backup file, or None."""
        return self._get_latest_file(self.list_backups(backup_dir))

    def last_modified(self) -> datetime | None:
        """Get timestamp of the snapshot file."""
        if not self.exists():
            return None
        return datetime.fromtimestamp(self.data_file.stat().st_mtime)

    def item_count(self) -> int | None:
        """Get count of accounts in the snapshot."""
        if not self.exists():
            return None

        try:
            document = read_json(self.data_file)
        except (OSError, ValueError):
            return 0
        accounts = document.get("accounts") if isinstance(document, dict) else None
        return len(accounts) if isinstance(accounts, dict) else 0

    def size_bytes(self) -> int | None:
        """Get size of the snapshot file."""
        if not self.exists():
            return None
        return self.data_file.stat().st_size

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return "No account snapshot found"
        return f"Account snapshot: {count} accounts"


def _document_from_accounts(accounts: dict[str, Account]) -> dict[str, Any]:
    return {
        "version": SNAPSHOT_VERSION,
        "saved_at": datetime.now().isoformat(),
        "accounts": {username: account.to_dict() for username, account in accounts.items()},
    }


def _accounts_from_document(document: Any, source: Path) -> dict[str, Account]:
    if not isinstance(document, dict) or not isinstance(document.get("accounts"), dict):
        raise PersistenceError(f"Invalid snapshot format in {source}")

    version = document.get("version", SNAPSHOT_VERSION)
    if version != SNAPSHOT_VERSION:
        raise PersistenceError(f"Unsupported snapshot version {version} in {source}")

    try:
        return {username: Account.from_dict(data) for username, data in document["accounts"].items()}
    except (KeyError, TypeError, ValueError) as e:
        raise PersistenceError(f"Corrupt account record in {source}: {e}") from e


def export_account(account: Account, filename: str | None = None, directory: Path | None = None) -> Path:
    """
    Export one account to a JSON file.

    Args:
        account: Account to export
        filename: Target file name; defaults to <username>.json, and '.json'
            is appended when missing
        directory: Directory for relative file names (default: current dir)

    Returns:
        Path of the written file
    """
    if not filename or not filename.strip():
        filename = account.username
    filename = filename.strip()
    if not filename.lower().endswith(".json"):
        filename += ".json"

    path = Path(filename)
    if directory is not None and not path.is_absolute():
        path = Path(directory) / path

    write_json(path, account.to_dict())
    logger.info(f"Exported account '{account.username}' to {path}")
    return path


def import_account(path: str | Path) -> Account:
    """
    Import one account from a JSON export.

    A record without a ledger gets a fresh empty one.

    Raises:
        FileNotFoundError: If the file does not exist
        PersistenceError: If the file is not JSON, lacks valid credentials or
            holds a corrupt ledger
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if path.suffix.lower() != ".json":
        raise PersistenceError(f"Account file must be a .json file: {path}")

    try:
        data = read_json(path)
    except (OSError, ValueError) as e:
        raise PersistenceError(f"Failed to read {path}: {e}") from e

    if not isinstance(data, dict) or not str(data.get("username") or "").strip():
        raise PersistenceError(f"Invalid account file {path}: missing username")
    if not str(data.get("password") or "").strip():
        raise PersistenceError(f"Invalid account file {path}: missing password")

    from ..auth.service import validate_credentials

    try:
        validate_credentials(str(data["username"]), str(data["password"]))
    except InvalidArgumentError as e:
        raise PersistenceError(f"Invalid account file {path}: {e}") from e

    if data.get("ledger") is None:
        logger.warning(f"Account '{data['username']}' in {path} has no ledger, creating an empty one")
        data = {**data, "ledger": Ledger().to_dict()}

    try:
        account = Account.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise PersistenceError(f"Corrupt account record in {path}: {e}") from e

    logger.info(f"Imported account '{account.username}' from {path}")
    return account


def load_budget_plan(path: str | Path) -> dict[str, float]:
    """
    Read a YAML budget plan.

    The document must be a mapping of category name to limit, e.g.::

        food: 400
        rent: 1200.50

    Returns:
        Mapping of category to float limit, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        PersistenceError: If the document is not a category -> number mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Budget plan not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise PersistenceError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise PersistenceError(f"Budget plan {path} must be a mapping of category to limit")

    plan = {}
    for category, limit in data.items():
        if isinstance(limit, bool) or not isinstance(limit, (int, float)):
            raise PersistenceError(f"Budget for '{category}' in {path} is not a number: {limit!r}")
        if not math.isfinite(limit) or limit < 0:
            raise PersistenceError(f"Budget for '{category}' in {path} must be a finite non-negative number: {limit!r}")
        plan[str(category)] = float(limit)
    return plan
