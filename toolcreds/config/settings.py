"""Root settings model for toolcreds configuration."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from toolcreds.config.models.credentials import CredentialsConfig, ExternalToolsConfig
from toolcreds.config.models.observability import ObservabilityConfig

# File values for the Settings instance being built by settings_from_files()
_file_values: dict[str, Any] = {}


class Settings(BaseSettings):
    """Root configuration object.

    Precedence, highest first: constructor arguments, TOOLCREDS_* environment
    variables (nested with "__"), config files, model defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="TOOLCREDS_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="toolcreds", description="Application name for logging")
    credentials: CredentialsConfig = Field(
        default_factory=CredentialsConfig,
        description="Credential evaluation and cleanup",
    )
    external_tools: ExternalToolsConfig = Field(
        default_factory=ExternalToolsConfig,
        description="External tool definition loading",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            InitSettingsSource(settings_cls, init_kwargs=dict(_file_values)),
        )


def settings_from_files(values: dict[str, Any]) -> Settings:
    """Build Settings with values read from config files below env overrides."""
    global _file_values
    _file_values = values
    try:
        return Settings()
    finally:
        _file_values = {}
