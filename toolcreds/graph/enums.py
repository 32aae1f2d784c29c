"""Resource graph enums."""

from enum import Enum


class ResourceKind(str, Enum):
    """Kinds of objects held in the resource graph."""

    TOOL_REFERENCE = "ToolReference"
    AGENT = "Agent"
    WORKFLOW = "Workflow"
    KNOWLEDGE_SET = "KnowledgeSet"
    KNOWLEDGE_SOURCE = "KnowledgeSource"
