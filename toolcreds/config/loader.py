"""Reads the TOML files settings are layered from.

config/default.toml is required; config/<TOOLCREDS_ENV>.toml, when present,
is merged over it. The sections that change what gets deleted or loaded
are validated per file, so an error names the file it came from.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from toolcreds.config.models.credentials import CredentialsConfig, ExternalToolsConfig
from toolcreds.exceptions import ConfigError

DEFAULT_FILE = "default.toml"

CHECKED_SECTIONS: dict[str, type[BaseModel]] = {
    "credentials": CredentialsConfig,
    "external_tools": ExternalToolsConfig,
}


def config_dir() -> Path:
    """TOOLCREDS_CONFIG_DIR, or ./config."""
    return Path(os.environ.get("TOOLCREDS_CONFIG_DIR", "config"))


def environment() -> str:
    return os.environ.get("TOOLCREDS_ENV", "development")


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse one TOML file and check its credential-related sections.

    Raises:
        ConfigError: If a checked section does not validate
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    with path.open("rb") as f:
        data = tomllib.load(f)

    for section, model in CHECKED_SECTIONS.items():
        if section not in data:
            continue
        try:
            model.model_validate(data[section])
        except ValidationError as e:
            raise ConfigError(str(path), section, f"{e.error_count()} error(s)") from e

    return data


def merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay override on base, merging tables key by key."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_sections(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(directory: Path | None = None, env: str | None = None) -> dict[str, Any]:
    """Default configuration with the environment overlay applied.

    Raises:
        FileNotFoundError: If default.toml is missing
    """
    directory = directory or config_dir()
    default_path = directory / DEFAULT_FILE
    if not default_path.is_file():
        raise FileNotFoundError(
            f"{default_path} not found; create it or set TOOLCREDS_CONFIG_DIR"
        )

    config = read_config_file(default_path)

    env_path = directory / f"{env or environment()}.toml"
    if env_path.is_file():
        config = merge_sections(config, read_config_file(env_path))

    return config
