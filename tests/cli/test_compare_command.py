"""Tests for the compare command."""

import pytest


class TestCompareCommand:
    """Tests for side-by-side comparison."""

    @pytest.mark.integration
    def test_compare(self, run_json, project_dir, tmp_path):
        """Two versions are composed side by side with a 20px gap."""
        code, report = run_json("compare", str(project_dir), "--from", "v1", "--to", "v2")
        assert code == 0
        assert report["output"]["file"] == "demo-project-compare-v1-v2.png"
        assert report["output"]["dimensions"]["width"] == 1200 + 20 + 1200
        assert report["summary"]["layout"] == "side-by-side"
        assert report["summary"]["same_phase"] is True
        assert (tmp_path / "demo-project-compare-v1-v2.png").exists()
