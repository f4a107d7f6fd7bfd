#!/usr/bin/env python3
"""
Account CLI - Registration, Transfers, Export/Import and Deletion
"""

import logging
from pathlib import Path

import click

from ..auth.service import AuthenticationService
from ..core.config import get_config
from ..core.currency import format_amount
from ..storage.persistence import export_account, import_account
from .common import AMOUNT, account_session, credential_options, guarded, open_store

logger = logging.getLogger(__name__)


@click.command()
@click.option("--username", "-u", envvar="FINTRACK_USERNAME", prompt=True, help="New username (min 3 chars)")
@click.option(
    "--password",
    "-p",
    envvar="FINTRACK_PASSWORD",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="New password (min 4 chars)",
)
def register(username: str, password: str) -> None:
    """Create a new account."""
    config = get_config()
    store = open_store(config)
    with guarded(store, config):
        account = AuthenticationService(store).register(username, password)
        click.echo(f"✅ User '{account.username}' registered")


@click.command()
@click.argument("recipient")
@click.argument("amount", type=AMOUNT)
@click.option("--description", "-d", help="Category recorded on your side (default: 'Transfer to <recipient>')")
@credential_options
def transfer(recipient: str, amount: float, description: str | None, username: str, password: str) -> None:
    """
    Transfer AMOUNT from your balance to RECIPIENT.

    Example:
      fintrack transfer bob 50 --description "Dinner"
    """
    with account_session(username, password) as session:
        target = session.store.find(recipient.strip())
        if target is None:
            raise click.ClickException(f"User '{recipient.strip()}' not found")

        session.engine.transfer(session.account, target, amount, description)
        logger.info(f"Transfer of {amount} from '{session.account.username}' to '{target.username}'")
        click.echo(f"✅ Transferred {format_amount(amount)} to '{target.username}'")
        click.echo(f"Your new balance: {format_amount(session.engine.current_balance(session.account))}")


@click.group()
def account() -> None:
    """Export, import, back up and delete accounts."""
    pass


@account.command("export")
@click.option("--file", "-f", "filename", help="Output file (default: <username>.json in the export dir)")
@credential_options
def export_cmd(filename: str | None, username: str, password: str) -> None:
    """Export your account, entries and budgets to JSON."""
    with account_session(username, password) as session:
        path = export_account(session.account, filename, directory=session.config.storage.export_dir)
        click.echo(f"✅ Account exported to {path}")


@account.command("import")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--overwrite", is_flag=True, help="Replace an existing account without asking")
def import_cmd(file: Path, overwrite: bool) -> None:
    """
    Import an account from a JSON export.

    When an account with the same username exists you are asked before it is
    replaced.
    """
    if not file.exists() and file.suffix.lower() != ".json":
        file = file.with_name(file.name + ".json")

    config = get_config()
    store = open_store(config)
    with guarded(store, config):
        try:
            imported = import_account(file)
        except FileNotFoundError as e:
            raise click.ClickException(str(e)) from e

        if store.contains(imported.username) and not overwrite:
            click.confirm(f"User '{imported.username}' already exists. Overwrite?", abort=True)

        store.save(imported.username, imported)
        click.echo(f"✅ User '{imported.username}' imported "
                   f"({len(imported.ledger)} entries, {len(imported.ledger.budgets)} budgets)")


@account.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@credential_options
def delete(yes: bool, username: str, password: str) -> None:
    """Delete your account and all of its data."""
    with account_session(username, password) as session:
        if not yes:
            click.confirm(f"Delete account '{session.account.username}' and all its data?", abort=True)
        AuthenticationService(session.store).delete_account(session.account.username)
        click.echo(f"✅ User '{session.account.username}' deleted")


@account.command()
def backup() -> None:
    """Write a timestamped backup of all accounts."""
    config = get_config()
    store = open_store(config)
    path = store.snapshot.backup(store.find_all(), config.storage.backup_dir)
    if path is None:
        click.echo("No accounts to back up.")
    else:
        click.echo(f"✅ Backup written to {path}")
