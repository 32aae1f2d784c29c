"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from toolcreds.config.loader import (
    config_dir,
    environment,
    load_config,
    merge_sections,
    read_config_file,
)
from toolcreds.exceptions import ConfigError


class TestMergeSections:
    """Tests for merge_sections function."""

    def test_merge_nested_tables(self) -> None:
        base = {"credentials": {"garbage_collection_enabled": True, "x": 1}}
        override = {"credentials": {"garbage_collection_enabled": False}}
        result = merge_sections(base, override)
        assert result == {"credentials": {"garbage_collection_enabled": False, "x": 1}}

    def test_override_replaces_non_table(self) -> None:
        assert merge_sections({"a": {"x": 1}}, {"a": "replaced"}) == {"a": "replaced"}

    def test_base_unmodified(self) -> None:
        base = {"a": {"x": 1}}
        merge_sections(base, {"a": {"y": 2}})
        assert base == {"a": {"x": 1}}


class TestReadConfigFile:
    """Tests for read_config_file function."""

    def test_reads_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "default.toml"
        path.write_text("[credentials]\ninclude_namespace_context = false\n")

        assert read_config_file(path) == {
            "credentials": {"include_namespace_context": False}
        }

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "invalid.toml"
        path.write_text("invalid = [unclosed")

        with pytest.raises(tomllib.TOMLDecodeError):
            read_config_file(path)

    def test_misspelled_credentials_key_names_file(self, tmp_path: Path) -> None:
        path = tmp_path / "default.toml"
        path.write_text("[credentials]\ngarbage_colection_enabled = false\n")

        with pytest.raises(ConfigError, match=r"\[credentials\].*default\.toml") as exc:
            read_config_file(path)
        assert exc.value.path == str(path)
        assert exc.value.section == "credentials"

    def test_wrong_credentials_type_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "default.toml"
        path.write_text("[credentials]\ngarbage_collection_enabled = 'sometimes'\n")

        with pytest.raises(ConfigError):
            read_config_file(path)

    def test_unknown_external_tools_key_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "default.toml"
        path.write_text("[external_tools]\ndefinition_dir = 'tools'\n")

        with pytest.raises(ConfigError, match="external_tools"):
            read_config_file(path)

    def test_other_sections_are_not_checked(self, tmp_path: Path) -> None:
        path = tmp_path / "default.toml"
        path.write_text("[observability.logging]\nextra = 1\n")

        assert read_config_file(path) == {"observability": {"logging": {"extra": 1}}}


class TestEnvironment:
    def test_returns_env_var_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOOLCREDS_ENV", "production")
        assert environment() == "production"

    def test_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TOOLCREDS_ENV", raising=False)
        assert environment() == "development"


class TestConfigDir:
    def test_uses_env_var_when_set(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TOOLCREDS_CONFIG_DIR", str(test_config_dir))
        assert config_dir() == test_config_dir

    def test_defaults_to_relative_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TOOLCREDS_CONFIG_DIR", raising=False)
        assert config_dir() == Path("config")


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_default_config(self, test_config_dir, mock_toml_files) -> None:
        mock_toml_files({"default.toml": "app_name = 'test'"})

        assert load_config(test_config_dir, env="nonexistent") == {"app_name": "test"}

    def test_merges_environment_config(self, test_config_dir, mock_toml_files) -> None:
        mock_toml_files({
            "default.toml": "[credentials]\ngarbage_collection_enabled = true\n",
            "staging.toml": "[credentials]\ngarbage_collection_enabled = false\n",
        })

        assert load_config(test_config_dir, env="staging") == {
            "credentials": {"garbage_collection_enabled": False}
        }

    def test_reads_directory_from_env(
        self, test_config_dir, mock_toml_files, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        mock_toml_files({"default.toml": "app_name = 'from-env-dir'"})
        monkeypatch.setenv("TOOLCREDS_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("TOOLCREDS_ENV", "nonexistent")

        assert load_config() == {"app_name": "from-env-dir"}

    def test_invalid_overlay_names_overlay_file(
        self, test_config_dir, mock_toml_files
    ) -> None:
        mock_toml_files({
            "default.toml": "[credentials]\ngarbage_collection_enabled = true\n",
            "staging.toml": "[credentials]\ngc = false\n",
        })

        with pytest.raises(ConfigError, match="staging.toml"):
            load_config(test_config_dir, env="staging")

    def test_missing_default_raises(self, test_config_dir) -> None:
        with pytest.raises(FileNotFoundError, match="default.toml"):
            load_config(test_config_dir, env="nonexistent")

    def test_does_not_search_parent_directories(
        self, tmp_path: Path, mock_toml_files
    ) -> None:
        mock_toml_files({"default.toml": "app_name = 'parent'"})
        nested = tmp_path / "config" / "nested"
        nested.mkdir()

        with pytest.raises(FileNotFoundError):
            load_config(nested, env="nonexistent")
