"""Tests for versioned structure discovery."""

import pytest

from src.project import (
    ProjectError,
    find_default_structure,
    find_latest_version,
    list_structure_files,
    list_versions,
    resolve_version,
    structure_dir,
    version_number,
)


class TestResolution:
    """Tests for resolving version names to files."""

    @pytest.mark.integration
    def test_latest_is_numeric(self, project_dir):
        """v10 beats v2 even though it sorts first as text."""
        assert find_latest_version(project_dir).name == "v10.json"

    @pytest.mark.integration
    @pytest.mark.parametrize(
        "version,expected",
        [("latest", "v10.json"), ("approved", "approved.json"), ("v2", "v2.json"), ("v1.json", "v1.json")],
    )
    def test_resolve_version(self, project_dir, version, expected):
        """Named versions resolve inside the structure directory."""
        path = resolve_version(project_dir, version)
        assert path.name == expected
        assert path.parent == structure_dir(project_dir)

    @pytest.mark.integration
    def test_missing_version(self, project_dir):
        """Unknown versions raise with the expected path."""
        with pytest.raises(ProjectError) as exc_info:
            resolve_version(project_dir, "v3")
        assert "version 'v3' not found" in str(exc_info.value)
        assert exc_info.value.path.endswith("v3.json")

    @pytest.mark.integration
    def test_missing_directory(self, tmp_path):
        """Projects without a structure directory raise."""
        with pytest.raises(ProjectError, match="no phase1-structure directory"):
            find_latest_version(tmp_path)

    @pytest.mark.integration
    def test_no_numbered_versions(self, tmp_path):
        """approved.json alone is not a latest version."""
        directory = tmp_path / "phase1-structure"
        directory.mkdir()
        (directory / "approved.json").write_text("{}", encoding="utf-8")
        with pytest.raises(ProjectError, match="no versions found"):
            find_latest_version(tmp_path)
        assert find_default_structure(tmp_path).name == "approved.json"

    @pytest.mark.integration
    def test_default_prefers_approved(self, project_dir):
        """approved.json wins, then latest."""
        assert find_default_structure(project_dir).name == "approved.json"
        (structure_dir(project_dir) / "approved.json").unlink()
        assert find_default_structure(project_dir).name == "v10.json"

    @pytest.mark.integration
    def test_structure_dir_name_from_environment(self, tmp_path, monkeypatch):
        """The directory name is configurable."""
        monkeypatch.setenv("PRISM_STRUCTURE_DIR", "drafts")
        assert structure_dir(tmp_path) == tmp_path / "drafts"


class TestListing:
    """Tests for listing versions."""

    @pytest.mark.integration
    def test_list_versions_order(self, project_dir):
        """approved first, then numeric order; non-JSON files ignored."""
        versions = list_versions(project_dir)
        assert [v.version for v in versions] == ["approved", "v1", "v2", "v10"]
        approved = versions[0]
        assert approved.locked
        assert approved.purpose == "approved draft"
        assert approved.file == "approved.json"

    @pytest.mark.integration
    def test_unparsable_files_are_skipped(self, project_dir):
        """Broken JSON does not stop the listing."""
        (structure_dir(project_dir) / "v3.json").write_text("{", encoding="utf-8")
        assert [v.version for v in list_versions(project_dir)] == ["approved", "v1", "v2", "v10"]

    @pytest.mark.integration
    def test_list_structure_files(self, project_dir):
        """Every JSON file, sorted by name."""
        names = [p.name for p in list_structure_files(project_dir)]
        assert names == ["approved.json", "v1.json", "v10.json", "v2.json"]

    @pytest.mark.integration
    def test_version_info_to_dict(self, project_dir):
        """Missing timestamps serialise as None."""
        data = list_versions(project_dir)[1].to_dict()
        assert data == {
            "version": "v1",
            "file": "v1.json",
            "phase": "structure",
            "locked": False,
            "created_at": None,
            "purpose": "first draft",
        }

    @pytest.mark.unit
    @pytest.mark.parametrize("name,expected", [("v1", 1), ("v10", 10), ("approved", 0), ("draft", 0)])
    def test_version_number(self, name, expected):
        """Numbers are read from the v prefix."""
        assert version_number(name) == expected
