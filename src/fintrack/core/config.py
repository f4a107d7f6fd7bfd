#!/usr/bin/env python3
"""
Configuration Management for fintrack

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production); the test
environment keeps all data under a temporary directory and disables backups.
"""

import logging
import os
import tempfile
from dataclasses import dataclass, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class StorageConfig:
    """Account snapshot and backup settings."""

    data_file: Path
    backup_dir: Path
    export_dir: Path
    backup_enabled: bool = True


@dataclass
class BudgetConfig:
    """Budget alert settings."""

    # Spending share of a budget (in percent) that triggers a warning
    warn_percent: float = 80.0


@dataclass
class Config:
    """
    Main configuration class for fintrack.

    Loads configuration from environment variables with defaults suited to
    each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path

    # Component configurations
    storage: StorageConfig
    budget: BudgetConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("FINTRACK_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_fintrack"
            data_dir = Path(os.getenv("FINTRACK_DATA_DIR", str(default_test_dir))).expanduser().resolve()
        else:
            data_dir = Path(os.getenv("FINTRACK_DATA_DIR", "./data")).expanduser().resolve()

        data_dir.mkdir(parents=True, exist_ok=True)

        data_file = Path(os.getenv("FINTRACK_DATA_FILE", "accounts.json"))
        if not data_file.is_absolute():
            data_file = data_dir / data_file

        export_dir = os.getenv("FINTRACK_EXPORT_DIR")

        storage = StorageConfig(
            data_file=data_file,
            backup_dir=data_dir / "backups",
            export_dir=Path(export_dir).expanduser().resolve() if export_dir else data_dir / "exports",
            backup_enabled=_parse_bool(
                os.getenv("FINTRACK_BACKUP_ENABLED"), default=env != Environment.TEST
            ),
        )

        budget = BudgetConfig(
            warn_percent=float(os.getenv("FINTRACK_BUDGET_WARN_PERCENT", "80")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            storage=storage,
            budget=budget,
            debug=_parse_bool(os.getenv("DEBUG"), default=False),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        if self.storage.data_file.suffix.lower() != ".json":
            errors.append(f"FINTRACK_DATA_FILE must be a .json file: {self.storage.data_file}")

        if not 0 < self.budget.warn_percent <= 100:
            errors.append("FINTRACK_BUDGET_WARN_PERCENT must be in (0, 100]")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if is_dataclass(field_value):
                result[field_name] = {
                    nested_name: _plain(nested_value)
                    for nested_name, nested_value in field_value.__dict__.items()
                }
            else:
                result[field_name] = _plain(field_value)

        return result


def _plain(value: Any) -> Any:
    """Reduce Path and Enum values to strings."""
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


def _parse_bool(value: str | None, default: bool) -> bool:
    """Parse a true/false environment flag, falling back to default when unset."""
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
