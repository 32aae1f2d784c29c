"""Reconciliation entry points for tool info and credential cleanup.

The external scheduler calls set_tool_info_status whenever a tool user
changes and remove_unneeded_credentials once its tool info is committed.
Failures are raised back to the scheduler, which retries with backoff.
"""

import time
from dataclasses import dataclass, field
from typing import Any

import structlog

from toolcreds.graph.models import ToolUser
from toolcreds.observability.logging import get_logger
from toolcreds.observability.metrics import (
    RECONCILE_COUNT,
    RECONCILE_LATENCY,
    UNAUTHORIZED_TOOLS,
)
from toolcreds.toolinfo.collector import CredentialGarbageCollector
from toolcreds.toolinfo.evaluator import AuthorizationEvaluator
from toolcreds.toolinfo.resolver import ToolRequirementResolver

logger = get_logger(__name__)

# Response attribute read by the observed-generation tracker
GENERATION_ERRORED = "generation:errored"


@dataclass
class ReconcileRequest:
    """A tool user snapshot handed to a handler by the scheduler."""

    object: ToolUser

    @property
    def name(self) -> str:
        return self.object.name

    @property
    def namespace(self) -> str:
        return self.object.namespace


@dataclass
class ReconcileResponse:
    """Attributes a handler reports back to the scheduler."""

    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def errored(self) -> bool:
        return bool(self.attributes.get(GENERATION_ERRORED))


class ToolInfoHandler:
    """Keeps tool info status current and prunes unneeded credentials."""

    def __init__(
        self,
        resolver: ToolRequirementResolver,
        evaluator: AuthorizationEvaluator,
        collector: CredentialGarbageCollector,
        gc_enabled: bool = True,
    ) -> None:
        self._resolver = resolver
        self._evaluator = evaluator
        self._collector = collector
        self._gc_enabled = gc_enabled

    async def set_tool_info_status(
        self, request: ReconcileRequest, response: ReconcileResponse
    ) -> None:
        """Compute credential requirements and authorization for every tool.

        The status is only written once every tool resolved. On failure the
        response is flagged so the generation is reported as errored.
        """
        tool_user = request.object
        kind = tool_user.kind_name
        start = time.perf_counter()

        with structlog.contextvars.bound_contextvars(
            tool_user=request.name, namespace=request.namespace
        ):
            try:
                requirements = await self._resolver.resolve(tool_user)
                tool_infos = await self._evaluator.apply(tool_user, requirements)
            except Exception as e:
                response.attributes[GENERATION_ERRORED] = True
                RECONCILE_COUNT.labels(
                    operation="set_tool_info_status", kind=kind, outcome="error"
                ).inc()
                logger.warning(
                    "tool_info_status_failed",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            finally:
                RECONCILE_LATENCY.labels(
                    operation="set_tool_info_status", kind=kind
                ).observe(time.perf_counter() - start)

            unauthorized = sorted(
                tool for tool, info in tool_infos.items() if not info.authorized
            )
            UNAUTHORIZED_TOOLS.labels(kind=kind).observe(len(unauthorized))
            RECONCILE_COUNT.labels(
                operation="set_tool_info_status", kind=kind, outcome="success"
            ).inc()
            logger.info(
                "tool_info_status_set",
                tools=len(tool_infos),
                unauthorized_tools=unauthorized,
            )

    async def remove_unneeded_credentials(
        self, request: ReconcileRequest, _response: ReconcileResponse
    ) -> list[str]:
        """Delete credentials in the tool user's context nothing references."""
        tool_user = request.object
        kind = tool_user.kind_name

        if not self._gc_enabled:
            logger.debug(
                "credential_gc_disabled",
                tool_user=request.name,
                namespace=request.namespace,
            )
            return []

        start = time.perf_counter()
        with structlog.contextvars.bound_contextvars(
            tool_user=request.name, namespace=request.namespace
        ):
            try:
                deleted = await self._collector.collect(tool_user)
            except Exception:
                RECONCILE_COUNT.labels(
                    operation="remove_unneeded_credentials", kind=kind, outcome="error"
                ).inc()
                raise
            finally:
                RECONCILE_LATENCY.labels(
                    operation="remove_unneeded_credentials", kind=kind
                ).observe(time.perf_counter() - start)

            RECONCILE_COUNT.labels(
                operation="remove_unneeded_credentials", kind=kind, outcome="success"
            ).inc()
            if deleted:
                logger.info("unneeded_credentials_removed", deleted=deleted)
            return deleted
