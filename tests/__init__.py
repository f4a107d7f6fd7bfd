"""
Test Suite for fintrack

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: End-to-end CLI workflows

Test Categories:
- Core utilities (config, currency, dates, JSON)
- Ledger models and aggregation engine
- Account stores and file formats
- Authentication
- CLI commands

Test Data:
All accounts and amounts are synthetic; every test runs against its own
temporary data directory.
"""
