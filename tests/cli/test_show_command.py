"""Tests for the show command."""

import pytest


class TestShowCommand:
    """Tests for showing one version."""

    @pytest.mark.integration
    def test_show(self, run_json, project_dir):
        """show returns the decoded document."""
        code, report = run_json("show", "v10", "-p", str(project_dir))
        assert code == 0
        assert report["file"] == "v10.json"
        assert report["structure"]["intent"]["purpose"] == "tenth draft"

    @pytest.mark.integration
    def test_show_console(self, run_cli, project_dir):
        """Console output has the section headings."""
        result = run_cli("show", "approved", "-p", str(project_dir))
        assert result.returncode == 0
        assert "Status: Locked ⚡" in result.stdout
        assert "--- Components ---" in result.stdout

    @pytest.mark.integration
    def test_show_missing_version(self, run_json, project_dir):
        """Unknown versions are errors."""
        code, report = run_json("show", "v7", "-p", str(project_dir))
        assert code == 1
        assert "version 'v7' not found" in report["error"]
