"""Tests for the validate command."""

import json

import pytest


class TestValidateCommand:
    """Tests for the validate command."""

    @pytest.mark.integration
    def test_selected_rules(self, run_json, project_dir):
        """Only the requested rules are reported."""
        code, report = run_json("validate", str(project_dir), "--hierarchy", "--touch-targets")
        assert code == 0
        assert report["status"] == "success"
        assert report["validation"] == "passed"
        assert "hierarchy" in report and "touch_targets" in report
        assert "gestalt" not in report

    @pytest.mark.integration
    def test_all_rules(self, run_json, project_dir):
        """--all-rules runs the whole registry."""
        _, report = run_json("validate", str(project_dir), "--all-rules")
        assert "dark_mode" in report and "loading_states" in report

    @pytest.mark.integration
    def test_schema_failure(self, run_json, tmp_path):
        """An invalid document reports the failed envelope and exits 1."""
        directory = tmp_path / "bad" / "phase1-structure"
        directory.mkdir(parents=True)
        doc = {
            "version": "v1",
            "phase": "structure",
            "intent": {"purpose": "t"},
            "layout": {"type": "stack"},
            "components": [{"id": "clip", "type": "video"}],
        }
        (directory / "v1.json").write_text(json.dumps(doc), encoding="utf-8")
        code, report = run_json("validate", str(tmp_path / "bad"))
        assert code == 1
        assert report["status"] == "failed"
        assert report["validation"] == "failed"
        assert "invalid type 'video'" in report["error"]

    @pytest.mark.integration
    def test_unsupported_phase(self, run_json, project_dir):
        """Only phase 1 is supported."""
        code, report = run_json("validate", str(project_dir), "--phase", "2")
        assert code == 1
        assert report == {"status": "error", "error": "Phase 2 validation not yet implemented"}
