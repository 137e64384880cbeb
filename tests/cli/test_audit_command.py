"""Tests for the audit command."""

import json

import pytest


class TestAuditCommand:
    """Tests for the audit command."""

    @pytest.mark.integration
    def test_json_report(self, run_json, project_dir):
        """The approved document is audited with all thirteen rules."""
        code, report = run_json("audit", str(project_dir))
        assert code == 0
        assert report["file"].endswith("approved.json")
        assert report["version"] == "v2"
        assert report["summary"]["total"] == 13
        assert len(report["audits"]) == 13

    @pytest.mark.integration
    def test_console_table(self, run_cli, project_dir):
        """Console output starts with the audit header."""
        result = run_cli("audit", "-p", str(project_dir))
        assert result.returncode == 0
        assert "🔍 Design Audit for" in result.stdout
        assert "Status: Locked (approved)" in result.stdout

    @pytest.mark.integration
    def test_missing_project(self, run_json, tmp_path):
        """A project without versions is an error."""
        code, report = run_json("audit", str(tmp_path / "nowhere"))
        assert code == 1
        assert report["status"] == "error"
        assert "phase1-structure" in report["error"]

    @pytest.mark.integration
    def test_numeric_breakpoint_changes(self, run_json, tmp_path):
        """Documents with numeric responsive changes are audited."""
        directory = tmp_path / "responsive" / "phase1-structure"
        directory.mkdir(parents=True)
        doc = {
            "version": "v1",
            "phase": "structure",
            "intent": {"purpose": "Dashboard"},
            "layout": {"type": "stack"},
            "components": [{"id": "header", "type": "box"}],
            "responsive": {"mobile": {"breakpoint": 640, "changes": {"layout.padding": 16}}},
        }
        (directory / "v1.json").write_text(json.dumps(doc), encoding="utf-8")
        code, report = run_json("audit", str(tmp_path / "responsive"))
        assert code == 0
        assert report["version"] == "v1"
        assert report["summary"]["total"] == 13
