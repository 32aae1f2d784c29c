"""In-memory implementation of ResourceGraphStore."""

from typing import Any

from toolcreds.graph.enums import ResourceKind
from toolcreds.graph.models import Resource
from toolcreds.graph.store import ResourceGraphStore


def _field_value(resource: Resource, path: str) -> Any:
    value: Any = resource
    for part in path.split("."):
        value = getattr(value, part, None)
        if value is None:
            return None
    return value


class InMemoryResourceGraphStore(ResourceGraphStore):
    """In-memory implementation of ResourceGraphStore for testing and development."""

    def __init__(self) -> None:
        self._objects: dict[tuple[ResourceKind, str, str], Resource] = {}

    async def get(
        self, kind: ResourceKind, namespace: str, name: str
    ) -> Resource | None:
        return self._objects.get((kind, namespace, name))

    async def list(
        self,
        kind: ResourceKind,
        namespace: str,
        field_selector: dict[str, str] | None = None,
    ) -> list[Resource]:
        selector = field_selector or {}
        return [
            resource
            for (obj_kind, obj_namespace, _), resource in sorted(
                self._objects.items(), key=lambda item: item[0][2]
            )
            if obj_kind == kind
            and obj_namespace == namespace
            and all(
                _field_value(resource, path) == expected
                for path, expected in selector.items()
            )
        ]

    async def save(self, resource: Resource) -> None:
        """Create or replace an object. Not part of the read-only graph interface."""
        self._objects[(resource.kind, resource.namespace, resource.name)] = resource
