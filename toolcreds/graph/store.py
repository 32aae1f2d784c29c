"""ResourceGraphStore abstract interface."""

from abc import ABC, abstractmethod

from toolcreds.graph.enums import ResourceKind
from toolcreds.graph.models import Resource


class ResourceGraphStore(ABC):
    """Read-only interface to the resource graph.

    Lookups are scoped to a namespace. A missing object is reported as
    None; any other failure is raised by the backend.
    """

    @abstractmethod
    async def get(
        self, kind: ResourceKind, namespace: str, name: str
    ) -> Resource | None:
        """Get an object by kind, namespace and name."""
        pass

    @abstractmethod
    async def list(
        self,
        kind: ResourceKind,
        namespace: str,
        field_selector: dict[str, str] | None = None,
    ) -> list[Resource]:
        """List objects of a kind whose fields match every selector entry.

        Selector keys are dotted field paths, e.g. "spec.agent_name".
        """
        pass
