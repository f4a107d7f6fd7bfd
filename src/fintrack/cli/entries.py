#!/usr/bin/env python3
"""
Entries CLI - Recording, Editing and Filtering Income/Expenses

Entry positions shown to and accepted from the user are 1-based.
"""

from datetime import datetime

import click

from ..core.config import Config
from ..core.currency import format_amount
from ..core.dates import format_timestamp
from ..ledger.engine import AggregationEngine, BudgetAlert
from ..ledger.models import Account, Entry
from .common import AMOUNT, TimestampType, account_session, credential_options


@click.group()
def entries() -> None:
    """Record, list, edit and filter income and expense entries."""
    pass


def format_entry(position: int, entry: Entry) -> str:
    """One display line for an entry."""
    return (
        f"{position:>4}. {entry.kind.capitalize():<7} {format_amount(entry.signed_amount, signed=True):>14}  "
        f"{entry.category}  [{format_timestamp(entry.timestamp)}]"
    )


def echo_budget_alert(engine: AggregationEngine, account: Account, category: str, config: Config) -> None:
    """Print a warning if the category's budget is over, exhausted or near its limit."""
    warn_percent = config.budget.warn_percent
    alert = engine.budget_alert(account, category, warn_percent)
    if alert is BudgetAlert.OVER:
        click.echo(f"⚠️  Budget exceeded for '{category}' by "
                   f"{format_amount(-engine.budget_remaining(account, category))}")
    elif alert is BudgetAlert.EXHAUSTED:
        click.echo(f"⚠️  Budget for '{category}' is exhausted")
    elif alert is BudgetAlert.WARNING:
        click.echo(f"⚠️  {warn_percent:g}% of the '{category}' budget is spent "
                   f"({format_amount(engine.budget_remaining(account, category))} left)")

    if engine.outcome_exceeds_income(account):
        click.echo("⚠️  Total expenses exceed total income")


@entries.command("add-income")
@click.argument("category")
@click.argument("amount", type=AMOUNT)
@credential_options
def add_income(category: str, amount: float, username: str, password: str) -> None:
    """
    Record an income entry.

    Examples:
      fintrack entries add-income salary 2500
      fintrack entries add-income "side job" '$120.50'
    """
    with account_session(username, password) as session:
        entry = session.engine.add_income(session.account, category, amount)
        click.echo(f"✅ Income added: {entry.category} {format_amount(entry.amount)}")


@entries.command("add-expense")
@click.argument("category")
@click.argument("amount", type=AMOUNT)
@credential_options
def add_expense(category: str, amount: float, username: str, password: str) -> None:
    """
    Record an expense entry and report the category's budget state.

    Example:
      fintrack entries add-expense food 42.10
    """
    with account_session(username, password) as session:
        entry = session.engine.add_outcome(session.account, category, amount)
        click.echo(f"✅ Expense added: {entry.category} {format_amount(entry.amount)}")
        echo_budget_alert(session.engine, session.account, entry.category, session.config)


@entries.command("list")
@credential_options
def list_entries(username: str, password: str) -> None:
    """List all entries in recording order."""
    with account_session(username, password) as session:
        items = session.account.ledger.entries
        if not items:
            click.echo("No entries recorded yet.")
            return

        click.echo(f"Entries for {session.account.username}:")
        for position, entry in enumerate(items, start=1):
            click.echo(format_entry(position, entry))


@entries.command()
@click.argument("position", type=int)
@click.option("--category", help="New category")
@click.option("--amount", type=AMOUNT, help="New amount")
@click.option("--type", "entry_type", type=click.Choice(["income", "expense"]), help="New direction")
@credential_options
def edit(
    position: int,
    category: str | None,
    amount: float | None,
    entry_type: str | None,
    username: str,
    password: str,
) -> None:
    """
    Change the category, amount or direction of entry POSITION.

    Example:
      fintrack entries edit 3 --category groceries --amount 18.75
    """
    if category is None and amount is None and entry_type is None:
        raise click.UsageError("Nothing to change: pass --category, --amount and/or --type")

    with account_session(username, password) as session:
        entry = session.engine.edit_entry(
            session.account,
            position - 1,
            category=category,
            amount=amount,
            is_income=None if entry_type is None else entry_type == "income",
        )
        click.echo("✅ Entry updated:")
        click.echo(format_entry(position, entry))


@entries.command()
@click.argument("position", type=int)
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@credential_options
def remove(position: int, yes: bool, username: str, password: str) -> None:
    """Delete entry POSITION."""
    with account_session(username, password) as session:
        entry = session.account.ledger.get_entry(position - 1)
        if not yes:
            click.echo(format_entry(position, entry))
            click.confirm("Delete this entry?", abort=True)

        removed = session.engine.remove_entry(session.account, position - 1)
        click.echo(f"✅ Entry #{position} removed: {removed.category} {format_amount(removed.amount)}")


@entries.command("filter")
@click.option("--category", "-c", "categories", multiple=True, required=True, help="Category to include (repeatable)")
@click.option("--start", type=TimestampType(), help="Earliest timestamp (YYYY-MM-DD[ HH:MM[:SS]])")
@click.option("--end", type=TimestampType(end_of_day=True), help="Latest timestamp, inclusive")
@credential_options
def filter_entries(
    categories: tuple[str, ...],
    start: datetime | None,
    end: datetime | None,
    username: str,
    password: str,
) -> None:
    """
    Show entries in the given categories, optionally within a time range.

    Examples:
      fintrack entries filter -c food -c rent
      fintrack entries filter -c food --start 2024-05-01 --end 2024-05-31
    """
    with account_session(username, password) as session:
        engine = session.engine
        if start is None and end is None:
            matched = engine.entries_in_categories(session.account, set(categories))
        else:
            matched = engine.entries_in_categories_and_range(
                session.account,
                start or datetime.min,
                end or datetime.max,
                set(categories),
            )

        if not matched:
            click.echo("No entries match the selected categories and period.")
            return

        income = sum(entry.amount for entry in matched if entry.is_income)
        expense = sum(entry.amount for entry in matched if not entry.is_income)
        for position, entry in enumerate(matched, start=1):
            click.echo(format_entry(position, entry))
        click.echo(f"\nMatched {len(matched)} entries: income {format_amount(income)}, "
                   f"expenses {format_amount(expense)}")
