"""Resource graph: tool users, tool references and knowledge objects."""

from toolcreds.graph.enums import ResourceKind
from toolcreds.graph.models import (
    SYNC_FILE_SUFFIX,
    Agent,
    KnowledgeSet,
    KnowledgeSetSpec,
    KnowledgeSource,
    KnowledgeSourceManifest,
    KnowledgeSourceSpec,
    Resource,
    ToolDescription,
    ToolInfo,
    ToolManifest,
    ToolReference,
    ToolReferenceSpec,
    ToolReferenceStatus,
    ToolUser,
    ToolUserSpec,
    ToolUserStatus,
    Workflow,
)

__all__ = [
    # Enums
    "ResourceKind",
    # Models
    "SYNC_FILE_SUFFIX",
    "Agent",
    "KnowledgeSet",
    "KnowledgeSetSpec",
    "KnowledgeSource",
    "KnowledgeSourceManifest",
    "KnowledgeSourceSpec",
    "Resource",
    "ToolDescription",
    "ToolInfo",
    "ToolManifest",
    "ToolReference",
    "ToolReferenceSpec",
    "ToolReferenceStatus",
    "ToolUser",
    "ToolUserSpec",
    "ToolUserStatus",
    "Workflow",
]
