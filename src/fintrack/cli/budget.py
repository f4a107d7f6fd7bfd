#!/usr/bin/env python3
"""
Budget CLI - Per-Category Spending Limits
"""

import click

from ..core.currency import format_amount, format_percent
from ..storage.persistence import load_budget_plan
from .common import AMOUNT, account_session, credential_options


@click.group()
def budget() -> None:
    """Set, remove and review per-category budgets."""
    pass


@budget.command("set")
@click.argument("category")
@click.argument("amount", type=AMOUNT)
@credential_options
def set_budget(category: str, amount: float, username: str, password: str) -> None:
    """
    Set the spending limit of CATEGORY (overwrites an existing one).

    Example:
      fintrack budget set food 400
    """
    with account_session(username, password) as session:
        session.engine.set_budget(session.account, category, amount)
        remaining = session.engine.budget_remaining(session.account, category.strip())
        click.echo(f"✅ Budget for '{category.strip()}' set to {format_amount(amount)} "
                   f"({format_amount(remaining)} remaining)")


@budget.command("remove")
@click.argument("category")
@credential_options
def remove_budget(category: str, username: str, password: str) -> None:
    """Remove the budget of CATEGORY."""
    with account_session(username, password) as session:
        session.engine.remove_budget(session.account, category)
        click.echo(f"✅ Budget for '{category.strip()}' removed")


@budget.command("list")
@credential_options
def list_budgets(username: str, password: str) -> None:
    """Show every budget with amount spent and remaining."""
    with account_session(username, password) as session:
        overview = session.engine.budget_overview(session.account)
        if not overview:
            click.echo("No budgets set.")
            return

        click.echo(f"{'Category':<20} {'Limit':>12} {'Spent':>12} {'Remaining':>12}  Used")
        click.echo("-" * 66)
        for status in overview:
            flag = ""
            if status.over_budget:
                flag = "  OVER"
            elif status.exhausted:
                flag = "  EXHAUSTED"
            click.echo(
                f"{status.category:<20} {format_amount(status.limit):>12} "
                f"{format_amount(status.spent):>12} {format_amount(status.remaining):>12}  "
                f"{format_percent(status.spent, status.limit)}{flag}"
            )


@budget.command("load")
@click.argument("plan_file", type=click.Path(exists=True, dir_okay=False))
@credential_options
def load_budgets(plan_file: str, username: str, password: str) -> None:
    """
    Set several budgets at once from a YAML file of `category: limit` pairs.

    Example:
      fintrack budget load budgets.yaml
    """
    with account_session(username, password) as session:
        plan = load_budget_plan(plan_file)
        for category, limit in plan.items():
            session.engine.set_budget(session.account, category, limit)
        click.echo(f"✅ Loaded {len(plan)} budgets from {plan_file}")
