"""Tests for the render command."""

import pytest


class TestRenderCommand:
    """Tests for single and batch rendering."""

    @pytest.mark.integration
    def test_render_version(self, run_json, project_dir, tmp_path):
        """A single version is written to the requested file."""
        output = tmp_path / "out.png"
        code, report = run_json("render", str(project_dir), "-v", "v1", "-o", str(output))
        assert code == 0
        assert report["status"] == "success"
        assert report["width"] == 1200
        assert output.read_bytes().startswith(b"\x89PNG")

    @pytest.mark.integration
    def test_render_default_name(self, run_json, project_dir, tmp_path):
        """Without --output the file is named after project and version."""
        code, report = run_json("render", str(project_dir), "--viewport", "mobile")
        assert code == 0
        assert report["output"] == "demo-project-phase1-v10.png"
        assert report["width"] == 375
        assert (tmp_path / "demo-project-phase1-v10.png").exists()

    @pytest.mark.integration
    def test_render_all(self, run_json, project_dir, tmp_path):
        """--all renders every JSON file and summarises the batch."""
        code, report = run_json("render", str(project_dir), "--all")
        assert code == 0
        assert report["status"] == "batch_complete"
        assert report["total"] == 4
        assert report["success"] == 4
        assert (tmp_path / "demo-project-phase1-approved.png").exists()

    @pytest.mark.integration
    def test_invalid_scale(self, run_json, project_dir):
        """Out-of-range scales are reported, not raised."""
        code, report = run_json("render", str(project_dir), "--scale", "5")
        assert code == 1
        assert report["status"] == "error"
