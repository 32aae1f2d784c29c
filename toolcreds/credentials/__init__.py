"""Credentials: scoped credential metadata and its storage."""

from toolcreds.credentials.models import Credential

__all__ = ["Credential"]
