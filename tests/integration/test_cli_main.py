#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from fintrack import __version__
from fintrack.cli.main import main

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        """Test fintrack --help shows all registered subcommands."""
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Personal Finance Tracker" in result.output

        for command in ["register", "entries", "budget", "stats", "transfer", "account", "version", "config"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        """Test fintrack version displays version and author."""
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert f"fintrack v{__version__}" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self):
        """Test fintrack config displays current configuration."""
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert "Data Directory:" in result.output
        assert "Data File:" in result.output
        assert "Export Directory:" in result.output
        assert "Backups: disabled" in result.output
        assert "Budget Warning: 80%" in result.output
        assert "Debug Mode:" in result.output
        assert "Log Level:" in result.output

    def test_invalid_command_shows_error(self):
        """Test that invalid command shows helpful error."""
        result = self.runner.invoke(main, ["invalid-command"])

        assert result.exit_code != 0
        assert "Error" in result.output or "No such" in result.output

    def test_verbose_flag_enables_verbose_output(self):
        """Test --verbose prints the environment and data file first."""
        result = self.runner.invoke(main, ["--verbose", "config"])

        assert result.exit_code == 0
        assert "Environment:" in result.output
        assert "Data file:" in result.output
        assert "Current Configuration:" in result.output

    def test_debug_flag(self):
        """Test --debug announces debug logging."""
        result = self.runner.invoke(main, ["--debug", "version"])

        assert result.exit_code == 0
        assert "Debug logging enabled" in result.output

    def test_config_env_override_changes_environment(self):
        """Test --config-env flag overrides environment."""
        result = self.runner.invoke(main, ["--config-env", "test", "config"])

        assert result.exit_code == 0
        assert "Environment: test" in result.output

    def test_subcommand_help_accessible(self):
        """Test that subcommand help is accessible."""
        for subcommand in ["entries", "budget", "stats", "account"]:
            result = self.runner.invoke(main, [subcommand, "--help"])
            assert result.exit_code == 0
            assert "Commands:" in result.output

    def test_subprocess_execution_version(self, tmp_path):
        """Test actual CLI execution via subprocess for version command."""
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
        env["FINTRACK_DATA_DIR"] = str(tmp_path / "subprocess_data")

        result = subprocess.run(
            [sys.executable, "-m", "fintrack.cli.main", "version"],
            capture_output=True,
            text=True,
            timeout=30,
            env=env,
        )

        assert result.returncode == 0, result.stderr
        assert f"fintrack v{__version__}" in result.stdout
