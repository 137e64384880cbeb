"""Tests for command dispatch and help output."""

import pytest


class TestDispatch:
    """Tests for command dispatch and help."""

    @pytest.mark.integration
    def test_no_command_shows_help(self, run_cli):
        """No arguments prints usage and fails."""
        result = run_cli()
        assert result.returncode == 1
        assert "Usage: python . {command} [args]" in result.stdout

    @pytest.mark.integration
    def test_help_flag(self, run_cli):
        """--help prints usage and succeeds."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "audit" in result.stdout

    @pytest.mark.integration
    def test_unknown_command(self, run_cli):
        """Unknown commands log an error and print help."""
        result = run_cli("deploy")
        assert result.returncode == 1
        assert "Unknown command: deploy" in result.stderr
