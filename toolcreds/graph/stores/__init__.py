"""Resource graph stores."""

from toolcreds.graph.store import ResourceGraphStore
from toolcreds.graph.stores.inmemory import InMemoryResourceGraphStore

__all__ = [
    "ResourceGraphStore",
    "InMemoryResourceGraphStore",
]
