"""Tests for the configuration module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from jsonwalk._config import EngineConfig, find_pyproject_toml, get_config, load_config
from jsonwalk._errors import ConfigError


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject.resolve()

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject.resolve()

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Should return None when no pyproject.toml is found."""
        result = find_pyproject_toml(tmp_path)

        assert result is None


class TestLoadConfig:
    """Tests for loading the [tool.jsonwalk] table."""

    def test_full_configuration(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.jsonwalk]
max_depth = 8
sort_keys = true
""",
        )

        config = load_config(pyproject)

        assert config.max_depth == 8
        assert config.sort_keys is True

    def test_partial_configuration_keeps_defaults(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.jsonwalk]\nsort_keys = true\n")

        config = load_config(pyproject)

        assert config.max_depth == 64
        assert config.sort_keys is True

    def test_no_tool_section(self, tmp_path: Path) -> None:
        """Should return defaults when [tool.jsonwalk] is missing."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n\n[tool.other]\nkey = 1\n")

        assert load_config(pyproject) == EngineConfig()


class TestLoadConfigErrors:
    """Tests for configuration error handling."""

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.jsonwalk\nmax_depth = ")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_max_depth_below_one_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.jsonwalk]\nmax_depth = 0\n")

        with pytest.raises(ConfigError, match=r"Invalid \[tool.jsonwalk\]"):
            load_config(pyproject)

    def test_wrong_type_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.jsonwalk]\nmax_depth = "deep"\n')

        with pytest.raises(ConfigError, match="max_depth"):
            load_config(pyproject)

    def test_unknown_key_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.jsonwalk]\nmax_dpeth = 3\n")

        with pytest.raises(ConfigError, match="max_dpeth"):
            load_config(pyproject)

    def test_non_table_section_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool]\njsonwalk = "fast"\n')

        with pytest.raises(ConfigError, match="expected a table"):
            load_config(pyproject)


class TestGetConfig:
    def test_reads_from_current_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.jsonwalk]\nmax_depth = 5\n")
        monkeypatch.chdir(tmp_path)

        assert get_config().max_depth == 5


class TestEngineConfig:
    def test_default_values(self) -> None:
        config = EngineConfig()

        assert config.max_depth == 64
        assert config.sort_keys is False

    def test_frozen(self) -> None:
        config = EngineConfig()

        with pytest.raises(ValidationError):
            config.max_depth = 3  # type: ignore[misc]
