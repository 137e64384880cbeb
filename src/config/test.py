"""Tests for configuration management."""

import logging
from pathlib import Path

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    get_project_dir,
    get_structure_dir_name,
    get_viewport_width,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("PRISM_RENDER_WIDTH", raising=False)
        result = get_environment(EnvVar.PRISM_RENDER_WIDTH)
        assert result == 1200

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("PRISM_RENDER_WIDTH", "9999")
        result = get_environment(EnvVar.PRISM_RENDER_WIDTH, override=768)
        assert result == 768

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("PRISM_RENDER_SCALE", "2")
        result = get_environment(EnvVar.PRISM_RENDER_SCALE)
        assert result == 2
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("PRISM_ANNOTATIONS", value)
            assert get_environment(EnvVar.PRISM_ANNOTATIONS) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("PRISM_ANNOTATIONS", value)
            assert get_environment(EnvVar.PRISM_ANNOTATIONS) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean text falls back to the default."""
        monkeypatch.setenv("PRISM_ANNOTATIONS", "maybe")
        assert get_environment(EnvVar.PRISM_ANNOTATIONS) is False

    @pytest.mark.unit
    def test_path_type(self, monkeypatch, tmp_path):
        """Path variables convert to Path."""
        monkeypatch.setenv("PRISM_OUTPUT_DIR", str(tmp_path))
        result = get_environment(EnvVar.PRISM_OUTPUT_DIR)
        assert result == tmp_path
        assert isinstance(result, Path)

    @pytest.mark.unit
    def test_none_default_for_output_dir(self, monkeypatch):
        """Output directory defaults to None when not set."""
        monkeypatch.delenv("PRISM_OUTPUT_DIR", raising=False)
        assert get_environment(EnvVar.PRISM_OUTPUT_DIR) is None

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("PRISM_RENDER_SCALE", "not-a-number")
        assert get_environment(EnvVar.PRISM_RENDER_SCALE) == 1

    @pytest.mark.unit
    def test_blank_value_returns_default(self, monkeypatch):
        """An empty variable counts as unset."""
        monkeypatch.setenv("PRISM_OUTPUT_DIR", "")
        monkeypatch.setenv("PRISM_STRUCTURE_DIR", "  ")
        assert get_environment(EnvVar.PRISM_OUTPUT_DIR) is None
        assert get_environment(EnvVar.PRISM_STRUCTURE_DIR) == "phase1-structure"


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.PRISM_VIEWPORT)
        assert isinstance(info, EnvConfig)
        assert info.name == "PRISM_VIEWPORT"
        assert info.default == "desktop"
        assert info.var_type is str
        assert info.category == "render"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.PRISM_STRUCTURE_DIR)
        assert "approved.json" in info.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)
        assert all(isinstance(v, EnvVar) for v in result)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        render_vars = list_environment_variables("render")
        assert EnvVar.PRISM_RENDER_WIDTH in render_vars
        assert EnvVar.PRISM_VIEWPORT in render_vars
        assert EnvVar.PRISM_PROJECT_DIR not in render_vars


# =============================================================================
# Tests for convenience functions
# =============================================================================


class TestGetProjectDir:
    """Tests for project directory resolution."""

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch, tmp_path):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("PRISM_PROJECT_DIR", "/elsewhere")
        assert get_project_dir(str(tmp_path)) == tmp_path

    @pytest.mark.unit
    def test_env_var_used(self, monkeypatch, tmp_path):
        """PRISM_PROJECT_DIR used when no override."""
        monkeypatch.setenv("PRISM_PROJECT_DIR", str(tmp_path))
        assert get_project_dir() == tmp_path

    @pytest.mark.unit
    def test_default_is_cwd(self, monkeypatch):
        """Defaults to the current directory."""
        monkeypatch.delenv("PRISM_PROJECT_DIR", raising=False)
        assert get_project_dir() == Path(".")

    @pytest.mark.unit
    def test_structure_dir_name(self, monkeypatch):
        """Structure directory name is configurable."""
        monkeypatch.delenv("PRISM_STRUCTURE_DIR", raising=False)
        assert get_structure_dir_name() == "phase1-structure"
        monkeypatch.setenv("PRISM_STRUCTURE_DIR", "structures")
        assert get_structure_dir_name() == "structures"


class TestGetViewportWidth:
    """Tests for viewport preset resolution."""

    @pytest.mark.unit
    def test_mobile_and_tablet_presets(self):
        """Mobile and tablet override the requested width."""
        assert get_viewport_width("mobile", 1200) == 375
        assert get_viewport_width("tablet", 1440) == 768

    @pytest.mark.unit
    def test_desktop_keeps_width(self):
        """Desktop keeps the requested width."""
        assert get_viewport_width("desktop", 1440) == 1440

    @pytest.mark.unit
    def test_defaults_from_environment(self, monkeypatch):
        """Falls back to PRISM_VIEWPORT and PRISM_RENDER_WIDTH."""
        monkeypatch.setenv("PRISM_VIEWPORT", "desktop")
        monkeypatch.setenv("PRISM_RENDER_WIDTH", "1024")
        assert get_viewport_width() == 1024
        monkeypatch.setenv("PRISM_VIEWPORT", "mobile")
        assert get_viewport_width() == 375


class TestGetLogLevel:
    """Tests for log level resolution."""

    @pytest.mark.unit
    def test_default_info(self, monkeypatch):
        """Defaults to INFO."""
        monkeypatch.delenv("PRISM_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.INFO

    @pytest.mark.unit
    def test_named_level(self, monkeypatch):
        """Level names are case-insensitive."""
        monkeypatch.setenv("PRISM_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    @pytest.mark.unit
    def test_unknown_level_falls_back(self):
        """Unknown names fall back to INFO."""
        assert get_log_level("chatty") == logging.INFO
