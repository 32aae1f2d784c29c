"""Shared test fixtures for the toolcreds test suite."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from toolcreds.credentials.stores import InMemoryCredentialStore
from toolcreds.graph.stores import InMemoryResourceGraphStore
from toolcreds.toolinfo import (
    AuthorizationEvaluator,
    CredentialGarbageCollector,
    StaticExternalToolResolver,
    ToolInfoHandler,
    ToolRequirementResolver,
)


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "[credentials]\\ngarbage_collection_enabled = false",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            original = self.original_env[key]
            if original is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = original


@pytest.fixture
def env_override() -> Callable[[dict[str, str]], EnvOverrideContext]:
    """Temporarily set environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"TOOLCREDS_APP_NAME": "other"}):
                ...
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    return _env_override


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from toolcreds.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def graph_store() -> InMemoryResourceGraphStore:
    return InMemoryResourceGraphStore()


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def external_resolver() -> StaticExternalToolResolver:
    return StaticExternalToolResolver()


@pytest.fixture
def resolver(graph_store, external_resolver) -> ToolRequirementResolver:
    return ToolRequirementResolver(graph_store, external_resolver)


@pytest.fixture
def evaluator(credential_store) -> AuthorizationEvaluator:
    return AuthorizationEvaluator(credential_store)


@pytest.fixture
def collector(graph_store, credential_store) -> CredentialGarbageCollector:
    return CredentialGarbageCollector(graph_store, credential_store)


@pytest.fixture
def handler(resolver, evaluator, collector) -> ToolInfoHandler:
    return ToolInfoHandler(resolver, evaluator, collector)
