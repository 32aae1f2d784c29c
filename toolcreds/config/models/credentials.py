"""Credential handling configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class CredentialsConfig(BaseModel):
    """Controls how tool info is evaluated and how credentials are cleaned up.

    Unknown keys are rejected so a misspelled switch cannot silently leave
    garbage collection on.
    """

    model_config = ConfigDict(extra="forbid")

    garbage_collection_enabled: bool = Field(
        default=True,
        description="Delete stored credentials no tool or knowledge source references",
    )
    include_namespace_context: bool = Field(
        default=True,
        description="Treat the namespace as a credential context when authorizing tools",
    )


class ExternalToolsConfig(BaseModel):
    """Where external tool definitions are loaded from."""

    model_config = ConfigDict(extra="forbid")

    definitions_dir: Path | None = Field(
        default=None,
        description="Directory of JSON tool definitions; unset keeps the static resolver",
    )
