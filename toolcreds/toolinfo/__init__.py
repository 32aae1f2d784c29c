"""Tool info: credential requirements, authorization and cleanup."""

from toolcreds.toolinfo.collector import CredentialGarbageCollector
from toolcreds.toolinfo.evaluator import AuthorizationEvaluator
from toolcreds.toolinfo.external import (
    CredentialRef,
    ExternalToolResolver,
    FileExternalToolResolver,
    Program,
    StaticExternalToolResolver,
    ToolNode,
    is_external_tool,
)
from toolcreds.toolinfo.handler import (
    GENERATION_ERRORED,
    ReconcileRequest,
    ReconcileResponse,
    ToolInfoHandler,
)
from toolcreds.toolinfo.resolver import ToolRequirementResolver

__all__ = [
    "AuthorizationEvaluator",
    "CredentialGarbageCollector",
    "CredentialRef",
    "ExternalToolResolver",
    "FileExternalToolResolver",
    "GENERATION_ERRORED",
    "Program",
    "ReconcileRequest",
    "ReconcileResponse",
    "StaticExternalToolResolver",
    "ToolInfoHandler",
    "ToolNode",
    "ToolRequirementResolver",
    "is_external_tool",
]
