#!/usr/bin/env python3
"""
Timestamp Helpers

Parsing and formatting of entry timestamps. Persistence uses ISO-8601 with
microseconds so exported ledgers round-trip exactly; the CLI accepts a few
friendlier input formats.
"""

from datetime import datetime, time

# Accepted CLI formats, tried in order
INPUT_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%Y.%m.%d %H:%M:%S",
    "%Y.%m.%d",
)

DISPLAY_FORMAT = "%d.%m.%Y %H:%M"


def parse_timestamp(value: str, end_of_day: bool = False) -> datetime:
    """
    Parse a user-supplied timestamp.

    Date-only input resolves to the start of that day, or to its last
    microsecond when end_of_day is set, so that a "--end 2024-05-31" range
    includes everything recorded on the 31st.

    Args:
        value: Timestamp string in one of INPUT_FORMATS or ISO-8601
        end_of_day: Resolve date-only input to 23:59:59.999999

    Returns:
        Parsed datetime

    Raises:
        ValueError: If no format matches
    """
    text = value.strip()
    for fmt in INPUT_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if end_of_day and "%H" not in fmt:
            return datetime.combine(parsed.date(), time.max)
        return parsed

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(
            f"Invalid timestamp: {value!r}. Use YYYY-MM-DD or YYYY-MM-DD HH:MM:SS"
        ) from None


def to_iso(timestamp: datetime) -> str:
    """Serialize a timestamp losslessly."""
    return timestamp.isoformat()


def from_iso(value: str) -> datetime:
    """Inverse of to_iso."""
    return datetime.fromisoformat(value)


def format_timestamp(timestamp: datetime) -> str:
    """Format a timestamp for display (dd.mm.YYYY HH:MM)."""
    return timestamp.strftime(DISPLAY_FORMAT)
