#!/usr/bin/env python3
"""
Shared CLI Helpers

Credential options, parameter types and the account session used by every
command that reads or changes a ledger.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import click

from ..auth.service import AuthenticationService
from ..core.config import Config, get_config
from ..core.currency import parse_amount
from ..core.dates import parse_timestamp
from ..core.exceptions import FinanceError
from ..ledger.engine import AggregationEngine
from ..ledger.models import Account
from ..storage.persistence import AccountSnapshotStore
from ..storage.store import FileAccountStore

logger = logging.getLogger(__name__)


class AmountType(click.ParamType):
    """Amount argument accepting '12.34', '$1,234.50' and similar."""

    name = "amount"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> float:
        if isinstance(value, float):
            return value
        try:
            return parse_amount(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


class TimestampType(click.ParamType):
    """Timestamp option; date-only input for an end bound covers the whole day."""

    name = "timestamp"

    def __init__(self, end_of_day: bool = False):
        self.end_of_day = end_of_day

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> datetime:
        if isinstance(value, datetime):
            return value
        try:
            return parse_timestamp(value, end_of_day=self.end_of_day)
        except ValueError as e:
            self.fail(str(e), param, ctx)


AMOUNT = AmountType()


def credential_options(func: Callable) -> Callable:
    """Add --username/--password options (env FINTRACK_USERNAME/FINTRACK_PASSWORD)."""
    func = click.option(
        "--password",
        "-p",
        envvar="FINTRACK_PASSWORD",
        prompt=True,
        hide_input=True,
        help="Account password (prompted when not given)",
    )(func)
    func = click.option(
        "--username",
        "-u",
        envvar="FINTRACK_USERNAME",
        prompt=True,
        help="Account username",
    )(func)
    return func


@dataclass
class Session:
    """Everything a command needs to work on one logged-in account."""

    config: Config
    store: FileAccountStore
    account: Account
    engine: AggregationEngine


def open_store(config: Config | None = None) -> FileAccountStore:
    """Open the file-backed account store configured for this environment."""
    config = config or get_config()
    try:
        return FileAccountStore(AccountSnapshotStore(config.storage.data_file))
    except FinanceError as e:
        raise click.ClickException(str(e)) from e


def backup_accounts(store: FileAccountStore, config: Config) -> Path | None:
    """Write a backup of the store if backups are enabled."""
    if not config.storage.backup_enabled:
        return None
    try:
        return store.snapshot.backup(store.find_all(), config.storage.backup_dir)
    except OSError as e:
        logger.error(f"Backup failed: {e}")
        return None


@contextmanager
def guarded(store: FileAccountStore, config: Config) -> Iterator[None]:
    """
    Translate errors raised by a command body and persist on success.

    Core errors become ClickExceptions. Anything unexpected triggers a
    backup first. The store is flushed only when the body completes.
    """
    try:
        yield
    except (click.ClickException, click.Abort):
        raise
    except FinanceError as e:
        raise click.ClickException(str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error")
        backup_file = backup_accounts(store, config)
        message = f"Unexpected error: {e}"
        if backup_file:
            message += f" (backup written to {backup_file})"
        raise click.ClickException(message) from e
    store.flush()


@contextmanager
def account_session(username: str, password: str) -> Iterator[Session]:
    """Log in and yield a Session; ledger changes are saved when the block exits cleanly."""
    config = get_config()
    store = open_store(config)

    try:
        account = AuthenticationService(store).login(username, password)
    except FinanceError as e:
        raise click.ClickException(str(e)) from e

    with guarded(store, config):
        yield Session(config=config, store=store, account=account, engine=AggregationEngine())


def is_verbose(ctx: click.Context) -> bool:
    """Check the group-level --verbose flag when present."""
    return bool((ctx.obj or {}).get("verbose", False))
