#!/usr/bin/env python3
"""
Amount Parsing and Formatting Utilities

Ledger amounts are plain floats and are never rounded when stored or
aggregated. Rounding happens only here, at the display boundary.

Input Formats Accepted:
- "1234.56" and "$1,234.56" (comma is a thousands separator)
- Leading "+" or "-" signs are kept so callers can reject non-positive values
"""

from decimal import Decimal, InvalidOperation


def parse_amount(amount_str: str | int | float) -> float:
    """
    Parse user input into a float amount using decimal arithmetic.

    Args:
        amount_str: Input like '$12.34', '12.34', '1,234.50' or a number

    Returns:
        The amount as a float

    Raises:
        ValueError: If the input is not a finite number

    Examples:
        parse_amount('$45.99') -> 45.99
        parse_amount('1,000') -> 1000.0
    """
    if isinstance(amount_str, bool):
        raise ValueError(f"Invalid amount: {amount_str!r}")
    if isinstance(amount_str, (int, float)):
        value = Decimal(str(amount_str))
    else:
        clean_str = str(amount_str).replace("$", "").replace(",", "").strip()
        if not clean_str:
            raise ValueError("Amount is empty")
        try:
            value = Decimal(clean_str)
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {amount_str!r}") from e

    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount_str!r}")
    return float(value)


def format_amount(amount: float, signed: bool = False) -> str:
    """
    Format an amount with thousands separators and two decimals.

    Args:
        amount: Amount to format
        signed: Prefix positive values with '+'

    Returns:
        Display string

    Examples:
        format_amount(1234.5) -> "1,234.50"
        format_amount(-200.0) -> "-200.00"
        format_amount(15.0, signed=True) -> "+15.00"
    """
    if signed:
        return f"{amount:+,.2f}"
    return f"{amount:,.2f}"


def format_percent(part: float, whole: float) -> str:
    """Format part/whole as a percentage, or 'n/a' when whole is zero."""
    if whole == 0:
        return "n/a"
    return f"{part / whole * 100:.1f}%"
