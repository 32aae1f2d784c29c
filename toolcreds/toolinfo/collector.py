"""Garbage collection of unreferenced credentials.

Each pass marks the credential names a tool user can still reach, from its
committed tool info and from the knowledge sources linked to it, then
sweeps every credential stored under the tool user's own context that was
not marked. No state is kept between passes.
"""

from typing import cast

from toolcreds.credentials.store import CredentialStore
from toolcreds.exceptions import CredentialNotFoundError
from toolcreds.graph.enums import ResourceKind
from toolcreds.graph.models import KnowledgeSource, ToolUser
from toolcreds.graph.store import ResourceGraphStore
from toolcreds.observability.logging import get_logger
from toolcreds.observability.metrics import CREDENTIALS_DELETED

logger = get_logger(__name__)


class CredentialGarbageCollector:
    """Deletes stored credentials no live reference of a tool user needs."""

    def __init__(
        self,
        graph_store: ResourceGraphStore,
        credential_store: CredentialStore,
    ) -> None:
        self._graph = graph_store
        self._credentials = credential_store

    async def reachable_credential_names(self, tool_user: ToolUser) -> set[str]:
        """Credential names required by the tool user's tools and knowledge sources.

        Tool requirements come from the committed tool info map; they are
        not recomputed here.
        """
        reachable: set[str] = set()
        for tool_info in tool_user.get_tool_infos().values():
            reachable.update(tool_info.credential_names)

        owner_field = tool_user.knowledge_set_owner_field()
        if owner_field is None:
            return reachable

        knowledge_sets = await self._graph.list(
            ResourceKind.KNOWLEDGE_SET,
            tool_user.namespace,
            {owner_field: tool_user.name},
        )
        for knowledge_set in knowledge_sets:
            knowledge_sources = await self._graph.list(
                ResourceKind.KNOWLEDGE_SOURCE,
                tool_user.namespace,
                {"spec.knowledge_set_name": knowledge_set.name},
            )
            for source in knowledge_sources:
                name = cast(KnowledgeSource, source).sync_credential_name()
                if name:
                    reachable.add(name)

        return reachable

    async def collect(self, tool_user: ToolUser) -> list[str]:
        """Delete unreachable credentials in the tool user's context.

        Returns the names deleted by this pass. A credential that is already
        gone counts as deleted. Any other delete failure aborts the pass;
        deletions made before it stand.
        """
        context = tool_user.name
        stored = await self._credentials.list([context])
        if not stored:
            return []

        reachable = await self.reachable_credential_names(tool_user)

        deleted: list[str] = []
        for credential in stored:
            if credential.name in reachable:
                continue

            try:
                await self._credentials.delete(context, credential.name)
            except CredentialNotFoundError:
                logger.debug(
                    "credential_already_deleted",
                    tool_user=tool_user.name,
                    credential_name=credential.name,
                )
            else:
                CREDENTIALS_DELETED.labels(kind=tool_user.kind_name).inc()
                logger.info(
                    "credential_deleted",
                    tool_user=tool_user.name,
                    namespace=tool_user.namespace,
                    credential_name=credential.name,
                )
            deleted.append(credential.name)

        return deleted
