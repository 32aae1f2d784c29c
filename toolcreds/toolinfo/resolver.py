"""Tool requirement resolution.

Determines, for each tool a tool user references, the credential names the
tool requires. Internal tools carry their credential names on the resolved
status of their ToolReference. External tools are loaded through an
ExternalToolResolver and walked from their entry tool.
"""

from typing import cast

from toolcreds.exceptions import MissingToolStatusError
from toolcreds.graph.enums import ResourceKind
from toolcreds.graph.models import ToolReference, ToolUser
from toolcreds.graph.store import ResourceGraphStore
from toolcreds.observability.logging import get_logger
from toolcreds.observability.metrics import SKIPPED_TOOLS
from toolcreds.toolinfo.external import ExternalToolResolver, is_external_tool

logger = get_logger(__name__)


class ToolRequirementResolver:
    """Maps each referenced tool to the credential names it requires."""

    def __init__(
        self,
        graph_store: ResourceGraphStore,
        external_resolver: ExternalToolResolver,
    ) -> None:
        self._graph = graph_store
        self._external = external_resolver

    async def resolve(self, tool_user: ToolUser) -> dict[str, list[str]]:
        """Resolve credential names for every tool of a tool user.

        Tool references that do not exist (yet) are left out of the result.
        Order follows tool_user.get_tools(); names are neither sorted nor
        deduplicated.

        Raises:
            MissingToolStatusError: If a tool reference exists but is unresolved
        """
        requirements: dict[str, list[str]] = {}
        for tool in tool_user.get_tools():
            credential_names = await self.credential_names_for(tool_user, tool)
            if credential_names is None:
                continue
            requirements[tool] = credential_names
        return requirements

    async def credential_names_for(
        self, tool_user: ToolUser, tool: str
    ) -> list[str] | None:
        """Credential names one tool requires, or None to skip the tool."""
        if is_external_tool(tool):
            return await self._external_credential_names(tool)

        ref = cast(
            ToolReference | None,
            await self._graph.get(
                ResourceKind.TOOL_REFERENCE, tool_user.namespace, tool
            ),
        )
        if ref is None:
            logger.debug(
                "tool_reference_not_found",
                tool_user=tool_user.name,
                namespace=tool_user.namespace,
                tool=tool,
            )
            SKIPPED_TOOLS.labels(kind=tool_user.kind_name).inc()
            return None

        if ref.status.tool is None:
            raise MissingToolStatusError(tool)

        return list(ref.status.tool.credential_names)

    async def _external_credential_names(self, locator: str) -> list[str]:
        program = await self._external.load_definition(locator)
        _, credential_names = await self._external.determine_credentials(
            program, program.entry_tool, locator
        )
        return list(credential_names)
