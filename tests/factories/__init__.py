"""Test factories for creating test data."""

from tests.factories.toolinfo import (
    KnowledgeFactory,
    ToolReferenceFactory,
    ToolUserFactory,
    credentials,
)

__all__ = [
    "KnowledgeFactory",
    "ToolReferenceFactory",
    "ToolUserFactory",
    "credentials",
]
