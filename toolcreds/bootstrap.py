"""Bootstrap module for wiring a ToolInfoHandler from configuration.

Stores and the external tool resolver are injected; everything else comes
from settings. In-memory backends are used for anything not supplied,
which is what local runs and tests want.

Example usage:

    from toolcreds.bootstrap import bootstrap

    handler, ctx = bootstrap()

    request = ReconcileRequest(object=agent)
    await handler.set_tool_info_status(request, ReconcileResponse())
"""

from dataclasses import dataclass

from toolcreds.config import Settings, get_settings
from toolcreds.credentials.store import CredentialStore
from toolcreds.credentials.stores import InMemoryCredentialStore
from toolcreds.graph.store import ResourceGraphStore
from toolcreds.graph.stores import InMemoryResourceGraphStore
from toolcreds.observability.logging import get_logger, setup_logging
from toolcreds.observability.metrics import setup_metrics
from toolcreds.toolinfo.collector import CredentialGarbageCollector
from toolcreds.toolinfo.evaluator import AuthorizationEvaluator
from toolcreds.toolinfo.external import (
    ExternalToolResolver,
    FileExternalToolResolver,
    StaticExternalToolResolver,
)
from toolcreds.toolinfo.handler import ToolInfoHandler
from toolcreds.toolinfo.resolver import ToolRequirementResolver

logger = get_logger(__name__)


@dataclass
class BootstrapContext:
    """Collaborators the handler was built with."""

    settings: Settings
    graph_store: ResourceGraphStore
    credential_store: CredentialStore
    external_resolver: ExternalToolResolver


def default_external_resolver(settings: Settings) -> ExternalToolResolver:
    """File-backed resolver when a definitions directory is configured."""
    definitions_dir = settings.external_tools.definitions_dir
    if definitions_dir is None:
        return StaticExternalToolResolver()
    return FileExternalToolResolver(base_dir=definitions_dir)


def create_handler(
    settings: Settings,
    graph_store: ResourceGraphStore,
    credential_store: CredentialStore,
    external_resolver: ExternalToolResolver,
) -> ToolInfoHandler:
    """Build a ToolInfoHandler from settings and injected collaborators."""
    credentials_config = settings.credentials
    return ToolInfoHandler(
        resolver=ToolRequirementResolver(graph_store, external_resolver),
        evaluator=AuthorizationEvaluator(
            credential_store,
            include_namespace_context=credentials_config.include_namespace_context,
        ),
        collector=CredentialGarbageCollector(graph_store, credential_store),
        gc_enabled=credentials_config.garbage_collection_enabled,
    )


def bootstrap(
    settings: Settings | None = None,
    graph_store: ResourceGraphStore | None = None,
    credential_store: CredentialStore | None = None,
    external_resolver: ExternalToolResolver | None = None,
) -> tuple[ToolInfoHandler, BootstrapContext]:
    """Configure logging and metrics and return a ready handler.

    Args:
        settings: Settings to use; loaded from config files when omitted
        graph_store: Resource graph backend (in-memory when omitted)
        credential_store: Credential backend (in-memory when omitted)
        external_resolver: External tool resolver (from external_tools settings
            when omitted)
    """
    settings = settings or get_settings()

    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_secrets=log_config.redact_secrets,
    )
    if settings.observability.metrics.enabled:
        setup_metrics()

    ctx = BootstrapContext(
        settings=settings,
        graph_store=graph_store or InMemoryResourceGraphStore(),
        credential_store=credential_store or InMemoryCredentialStore(),
        external_resolver=external_resolver or default_external_resolver(settings),
    )
    handler = create_handler(
        ctx.settings, ctx.graph_store, ctx.credential_store, ctx.external_resolver
    )

    logger.info(
        "toolcreds_bootstrapped",
        app_name=settings.app_name,
        gc_enabled=settings.credentials.garbage_collection_enabled,
    )
    return handler, ctx
