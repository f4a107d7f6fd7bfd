#!/usr/bin/env python3
"""
Statistics CLI - Totals and Category Breakdowns
"""

import click

from ..core.currency import format_amount
from .common import account_session, credential_options, is_verbose


@click.group()
def stats() -> None:
    """Show aggregated income and expense statistics."""
    pass


@stats.command()
@credential_options
@click.pass_context
def summary(ctx: click.Context, username: str, password: str) -> None:
    """Show totals, balance and per-category breakdowns."""
    with account_session(username, password) as session:
        report = session.engine.summarize(session.account)

        click.echo(f"Statistics for {session.account.username}")
        click.echo("=" * 40)
        click.echo(f"Total income:   {format_amount(report.total_income):>16}")
        click.echo(f"Total expenses: {format_amount(report.total_outcome):>16}")
        click.echo(f"Balance:        {format_amount(report.balance):>16}")

        if is_verbose(ctx):
            click.echo(f"Entries:        {report.entry_count:>16}")

        if report.income_by_category:
            click.echo("\nIncome by category:")
            for category, amount in report.income_by_category.items():
                click.echo(f"  {category:<24} {format_amount(amount):>14}")

        if report.outcome_by_category:
            click.echo("\nExpenses by category:")
            for category, amount in report.outcome_by_category.items():
                click.echo(f"  {category:<24} {format_amount(amount):>14}")

        overview = session.engine.budget_overview(session.account)
        if overview:
            click.echo("\nBudgets:")
            for status in overview:
                click.echo(f"  {status.category:<24} {format_amount(status.remaining):>14} remaining "
                           f"of {format_amount(status.limit)}")

        if session.engine.outcome_exceeds_income(session.account):
            click.echo("\n⚠️  Expenses exceed income")


@stats.command()
@credential_options
def categories(username: str, password: str) -> None:
    """List categories used by entries and categories with budgets."""
    with account_session(username, password) as session:
        used = session.engine.all_categories(session.account)
        budgeted = session.engine.budget_categories(session.account)

        click.echo("Entry categories:")
        if used:
            for category in used:
                click.echo(f"  {category}")
        else:
            click.echo("  (none)")

        click.echo("Budget categories:")
        if budgeted:
            for category in budgeted:
                limit = session.engine.budget_for(session.account, category)
                click.echo(f"  {category}: {format_amount(limit)}")
        else:
            click.echo("  (none)")
