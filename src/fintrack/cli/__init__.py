"""
Command Line Interface Package

Unified CLI for the finance tracker.

Command Structure:
- fintrack: Main entry point with utility commands (version, config)
- fintrack register: Create an account
- fintrack entries: Add, list, edit, remove and filter entries
- fintrack budget: Set, remove, list and bulk-load budgets
- fintrack stats: Totals and category breakdowns
- fintrack transfer: Move funds to another account
- fintrack account: Export, import, back up and delete accounts

Commands that touch a ledger take --username/--password (or the
FINTRACK_USERNAME/FINTRACK_PASSWORD environment variables) and save the
account snapshot when they complete.
"""
