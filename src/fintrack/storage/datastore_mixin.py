#!/usr/bin/env python3
"""
DataStore Mixin - Common functionality for file-backed stores.

Provides shared implementation of metadata methods and a short-lived file
listing cache so that several metadata calls in a row glob only once.
"""

from abc import abstractmethod
from datetime import datetime
from pathlib import Path


class DataStoreMixin:
    """
    Mixin providing common file-store functionality.

    Provides:
    - Cached file listing to reduce redundant glob operations
    - age_days() derived from last_modified()
    - Latest-file lookup by modification time

    Subclasses must implement:
    - exists() -> bool
    - last_modified() -> datetime | None
    - item_count() -> int | None
    - size_bytes() -> int | None
    - summary_text() -> str
    """

    def __init__(self):
        """Initialize mixin state."""
        self._file_cache: list[Path] | None = None
        self._cache_key: tuple[Path, str] | None = None
        self._cache_timestamp: float | None = None
        self._cache_ttl_seconds: float = 1.0

    def _invalidate_cache(self) -> None:
        """Invalidate the file cache."""
        self._file_cache = None
        self._cache_key = None
        self._cache_timestamp = None

    def _is_cache_valid(self, key: tuple[Path, str]) -> bool:
        """Check if file cache is still valid for this directory/pattern."""
        if self._file_cache is None or self._cache_timestamp is None or self._cache_key != key:
            return False
        elapsed = datetime.now().timestamp() - self._cache_timestamp
        return elapsed < self._cache_ttl_seconds

    def _get_files_cached(self, directory: Path, pattern: str) -> list[Path]:
        """
        Get files in directory matching pattern, sorted by name.

        Results are cached for one second per (directory, pattern).
        """
        key = (directory, pattern)
        if self._is_cache_valid(key):
            return list(self._file_cache)  # type: ignore[arg-type]

        if directory.exists():
            self._file_cache = sorted(directory.glob(pattern))
        else:
            self._file_cache = []

        self._cache_key = key
        self._cache_timestamp = datetime.now().timestamp()
        return list(self._file_cache)

    def _get_latest_file(self, files: list[Path]) -> Path | None:
        """Most recently modified file from list, or None if empty."""
        if not files:
            return None
        return max(files, key=lambda p: p.stat().st_mtime)

    @abstractmethod
    def exists(self) -> bool:
        """Check if data exists in storage."""
        ...

    @abstractmethod
    def last_modified(self) -> datetime | None:
        """Get timestamp of most recent data modification."""
        ...

    @abstractmethod
    def item_count(self) -> int | None:
        """Get count of items/records in stored data."""
        ...

    @abstractmethod
    def size_bytes(self) -> int | None:
        """Get total storage size in bytes."""
        ...

    @abstractmethod
    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        ...

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if data doesn't exist
        """
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days
