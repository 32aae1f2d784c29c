"""CredentialStore abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from toolcreds.credentials.models import Credential


class CredentialStore(ABC):
    """Abstract interface for credential storage keyed by (context, name)."""

    @abstractmethod
    async def create(self, credential: Credential) -> None:
        """Store a credential, replacing any with the same key."""
        pass

    @abstractmethod
    async def list(self, contexts: Iterable[str]) -> list[Credential]:
        """List credentials stored under any of the given contexts."""
        pass

    @abstractmethod
    async def delete(self, context: str, name: str) -> None:
        """Delete a credential.

        Raises:
            CredentialNotFoundError: If no credential exists for the key
        """
        pass
