"""Structured logging configuration using structlog.

Provides JSON logging for production and console logging for development,
with contextvars binding and secret redaction. Credential names are safe
to log; credential values and tokens are not.
"""

import re
import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password",
    "passwd",
    "secret",
    "secrets",
    "token",
    "api_key",
    "apikey",
    "authorization",
    "access_token",
    "refresh_token",
    "client_secret",
    "private_key",
    "bearer",
    "env",
    "value",
})

BEARER_PATTERN = re.compile(r"(?i)bearer\s+[a-z0-9._~+/=-]+")
KEY_VALUE_PATTERN = re.compile(
    r"(?i)\b(password|secret|token|api[_-]?key)=([^\s&]+)"
)


class SecretRedactor:
    """Processor that redacts secrets from log events.

    Values under sensitive key names are replaced outright. String values
    are scanned for bearer tokens and key=value secrets as a fallback.
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._redact_dict(event_dict))

    def _redact_dict(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            if key.lower() in SENSITIVE_KEYS:
                result[key] = "[REDACTED]"
            elif isinstance(value, dict):
                result[key] = self._redact_dict(value)
            elif isinstance(value, str):
                result[key] = self._redact_string(value)
            elif isinstance(value, list | tuple):
                result[key] = self._redact_list(list(value))
            else:
                result[key] = value
        return result

    def _redact_string(self, value: str) -> str:
        value = BEARER_PATTERN.sub("Bearer [REDACTED]", value)
        return KEY_VALUE_PATTERN.sub(r"\1=[REDACTED]", value)

    def _redact_list(self, items: list[Any]) -> list[Any]:
        result: list[Any] = []
        for item in items:
            if isinstance(item, dict):
                result.append(self._redact_dict(item))
            elif isinstance(item, str):
                result.append(self._redact_string(item))
            elif isinstance(item, list):
                result.append(self._redact_list(item))
            else:
                result.append(item)
        return result


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_secrets: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format - "json" for production, "console" for development
        redact_secrets: Whether to redact secrets from logs
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if redact_secrets:
        processors.append(SecretRedactor())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    level_map = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    level_num = level_map.get(level.upper(), 20)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    Args:
        name: Logger name (typically __name__ of the module)
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
