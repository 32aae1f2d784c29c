"""Credential stores."""

from toolcreds.credentials.store import CredentialStore
from toolcreds.credentials.stores.inmemory import InMemoryCredentialStore

__all__ = [
    "CredentialStore",
    "InMemoryCredentialStore",
]
