"""Configuration section models."""

from toolcreds.config.models.credentials import CredentialsConfig, ExternalToolsConfig
from toolcreds.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)

__all__ = [
    "CredentialsConfig",
    "ExternalToolsConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
]
