"""External tool references.

A tool name that looks like a locator (a path, URL or dotted module name)
is not looked up in the resource graph. Its definition is loaded on demand
and the credentials it needs are derived by walking the loaded program
from its entry tool.
"""

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from toolcreds.exceptions import ToolLoadError, UnknownToolError

EXTERNAL_TOOL_MARKERS = frozenset(".\\/")


def is_external_tool(tool: str) -> bool:
    """Whether a tool name is a locator rather than a tool reference name."""
    return any(char in EXTERNAL_TOOL_MARKERS for char in tool)


class CredentialRef(BaseModel):
    """A credential a tool asks for.

    tool_name is the tool providing the credential; alias, when set, is the
    name the credential is stored under.
    """

    tool_name: str = Field(..., min_length=1, description="Credential provider tool")
    alias: str = Field(default="", description="Stored credential name")

    @property
    def credential_name(self) -> str:
        return self.alias or self.tool_name


class ToolNode(BaseModel):
    """One tool in a loaded program."""

    id: str = Field(..., min_length=1, description="Tool id within the program")
    name: str = Field(default="", description="Tool name")
    credentials: list[CredentialRef] = Field(default_factory=list)
    tool_ids: list[str] = Field(
        default_factory=list, description="Ids of tools this tool can call"
    )


class Program(BaseModel):
    """A loaded tool definition: an entry tool plus the tools it reaches."""

    entry_tool_id: str = Field(..., min_length=1)
    tool_set: dict[str, ToolNode] = Field(default_factory=dict)

    def tool(self, tool_id: str) -> ToolNode:
        try:
            return self.tool_set[tool_id]
        except KeyError:
            raise UnknownToolError(tool_id) from None

    @property
    def entry_tool(self) -> ToolNode:
        return self.tool(self.entry_tool_id)


class ExternalToolResolver(ABC):
    """Loads external tool definitions and derives their credential names."""

    @abstractmethod
    async def load_definition(self, locator: str) -> Program:
        """Load the program a locator points at.

        Raises:
            ToolLoadError: If the definition cannot be loaded
        """
        pass

    async def determine_credentials(
        self, program: Program, entry: ToolNode, locator: str  # noqa: ARG002
    ) -> tuple[list[str], list[str]]:
        """Walk the tool graph from entry and collect required credentials.

        Every tool is visited once, depth first in declaration order.
        Returns (provider tool names, credential names) in walk order.
        """
        providers: list[str] = []
        credential_names: list[str] = []
        visited: set[str] = set()
        pending = [entry]

        while pending:
            node = pending.pop()
            if node.id in visited:
                continue
            visited.add(node.id)

            for credential in node.credentials:
                providers.append(credential.tool_name)
                credential_names.append(credential.credential_name)

            pending.extend(
                program.tool(tool_id)
                for tool_id in reversed(node.tool_ids)
                if tool_id not in visited
            )

        return providers, credential_names


class StaticExternalToolResolver(ExternalToolResolver):
    """Resolver over programs registered up front, keyed by locator."""

    def __init__(self, programs: dict[str, Program] | None = None) -> None:
        self._programs: dict[str, Program] = dict(programs or {})

    def register(self, locator: str, program: Program) -> None:
        self._programs[locator] = program

    async def load_definition(self, locator: str) -> Program:
        program = self._programs.get(locator)
        if program is None:
            raise ToolLoadError(locator, "no program registered")
        return program


class FileExternalToolResolver(ExternalToolResolver):
    """Resolver that reads JSON program definitions from disk.

    Relative locators are resolved against base_dir.
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir or Path.cwd()

    async def load_definition(self, locator: str) -> Program:
        path = Path(locator)
        if not path.is_absolute():
            path = self._base_dir / path

        try:
            raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as e:
            raise ToolLoadError(locator, str(e)) from e

        try:
            return Program.model_validate_json(raw)
        except ValidationError as e:
            raise ToolLoadError(locator, "invalid program definition") from e
