#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON reading and writing with consistent pretty-printing. Snapshot
files, account exports and backups all go through these helpers.
"""

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any


def json_default(value: Any) -> Any:
    """Serialize the non-JSON types that appear in account data."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def write_json(filepath: str | Path, data: Any, ensure_ascii: bool = False, sort_keys: bool = False) -> None:
    """
    Write data to a JSON file with standard pretty-printing.

    The document is written to a sibling temporary file and moved into place,
    so a crash mid-write leaves the previous file intact.

    Args:
        filepath: Path to the JSON file
        data: Data to write to the file
        ensure_ascii: If True, escape non-ASCII characters (default: False)
        sort_keys: If True, sort dictionary keys (default: False)
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys, default=json_default)
        os.replace(tmp_name, filepath)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def read_json(filepath: str | Path) -> Any:
    """
    Read data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        The parsed JSON data
    """
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)
