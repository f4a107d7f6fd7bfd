#!/usr/bin/env python3
"""
Main CLI Entry Point for fintrack

Provides the unified command-line interface for the finance tracker.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    fintrack - Personal Finance Tracker

    Record income and expenses, manage per-category budgets, review
    statistics and transfer funds between accounts.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["FINTRACK_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("fintrack").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data file: {ctx.obj['config'].storage.data_file}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from fintrack import __author__, __version__

    click.echo(f"fintrack v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Data File: {config_obj.storage.data_file}")
    click.echo(f"  Export Directory: {config_obj.storage.export_dir}")
    click.echo(f"  Backups: {'enabled' if config_obj.storage.backup_enabled else 'disabled'} "
               f"({config_obj.storage.backup_dir})")
    click.echo(f"  Budget Warning: {config_obj.budget.warn_percent:g}%")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .account import account, register, transfer  # noqa: E402
from .budget import budget  # noqa: E402
from .entries import entries  # noqa: E402
from .stats import stats  # noqa: E402

main.add_command(register)
main.add_command(entries)
main.add_command(budget)
main.add_command(stats)
main.add_command(transfer)
main.add_command(account)


if __name__ == "__main__":
    main()
