"""In-memory implementation of CredentialStore."""

from collections.abc import Iterable

from toolcreds.credentials.models import Credential
from toolcreds.credentials.store import CredentialStore
from toolcreds.exceptions import CredentialNotFoundError


class InMemoryCredentialStore(CredentialStore):
    """In-memory implementation of CredentialStore for testing and development.

    Listing preserves insertion order.
    """

    def __init__(self) -> None:
        self._credentials: dict[tuple[str, str], Credential] = {}

    async def create(self, credential: Credential) -> None:
        self._credentials[credential.key] = credential

    async def list(self, contexts: Iterable[str]) -> list[Credential]:
        wanted = set(contexts)
        return [
            credential
            for credential in self._credentials.values()
            if credential.context in wanted
        ]

    async def delete(self, context: str, name: str) -> None:
        if self._credentials.pop((context, name), None) is None:
            raise CredentialNotFoundError(context, name)
