"""Exception hierarchy for toolcreds.

All errors raised by the core inherit from ToolCredsError so callers
(usually the reconciliation scheduler) can catch them in one place.
Errors raised by store or resolver backends for transport failures are
not wrapped and propagate unchanged.
"""


class ToolCredsError(Exception):
    """Base exception for all toolcreds errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingToolStatusError(ToolCredsError):
    """Raised when a tool reference exists but has no resolved tool yet."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(
            f"cannot determine credential status for tool {tool}: no tool status found"
        )


class CredentialNotFoundError(ToolCredsError):
    """Raised by a credential store when deleting an absent credential."""

    def __init__(self, context: str, name: str) -> None:
        self.context = context
        self.name = name
        super().__init__(f"credential {name} not found in context {context}")


class ToolLoadError(ToolCredsError):
    """Raised when an external tool definition cannot be loaded."""

    def __init__(self, locator: str, reason: str | None = None) -> None:
        self.locator = locator
        message = f"failed to load tool {locator}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownToolError(ToolCredsError):
    """Raised when a program references a tool id missing from its tool set."""

    def __init__(self, tool_id: str) -> None:
        self.tool_id = tool_id
        super().__init__(f"tool {tool_id} not found in program tool set")


class ConfigError(ToolCredsError):
    """Raised when a configuration file holds an invalid section."""

    def __init__(self, path: str, section: str, reason: str) -> None:
        self.path = path
        self.section = section
        super().__init__(f"invalid [{section}] section in {path}: {reason}")
