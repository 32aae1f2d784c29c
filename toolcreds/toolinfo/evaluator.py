"""Authorization evaluation against the credential store."""

from toolcreds.credentials.store import CredentialStore
from toolcreds.graph.models import ToolInfo, ToolUser


class AuthorizationEvaluator:
    """Decides whether each tool's required credentials are present.

    A tool is authorized when every credential name it requires exists in
    one of the tool user's credential contexts: its own name and, unless
    disabled, its namespace.
    """

    def __init__(
        self,
        credential_store: CredentialStore,
        include_namespace_context: bool = True,
    ) -> None:
        self._credentials = credential_store
        self._include_namespace_context = include_namespace_context

    def credential_contexts(self, tool_user: ToolUser) -> list[str]:
        contexts = [tool_user.name]
        if self._include_namespace_context and tool_user.namespace != tool_user.name:
            contexts.append(tool_user.namespace)
        return contexts

    async def present_credential_names(self, tool_user: ToolUser) -> set[str]:
        """Names of credentials in any of the tool user's contexts, in one listing."""
        credentials = await self._credentials.list(self.credential_contexts(tool_user))
        return {credential.name for credential in credentials}

    @staticmethod
    def evaluate(
        requirements: dict[str, list[str]], present: set[str]
    ) -> dict[str, ToolInfo]:
        return {
            tool: ToolInfo(
                credential_names=list(credential_names),
                authorized=all(name in present for name in credential_names),
            )
            for tool, credential_names in requirements.items()
        }

    async def apply(
        self, tool_user: ToolUser, requirements: dict[str, list[str]]
    ) -> dict[str, ToolInfo]:
        """Evaluate all tools and replace the tool user's tool info map."""
        present = await self.present_credential_names(tool_user)
        tool_infos = self.evaluate(requirements, present)
        tool_user.set_tool_infos(tool_infos)
        return tool_infos
