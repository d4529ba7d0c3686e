"""Wire settings into a ready-to-use block searcher."""

from __future__ import annotations

import logging

from toolbox_search.blocks.registry import BlockDefinitionRegistry
from toolbox_search.config import Settings
from toolbox_search.observability.logging import configure_logging
from toolbox_search.observability.tracing import init_tracing
from toolbox_search.search.block_searcher import BlockSearcher


logger = logging.getLogger(__name__)


def configure_observability(settings: Settings) -> None:
    """Apply logging and tracing settings to the process."""
    configure_logging(settings.log_level, settings.log_json)
    if settings.trace_enabled:
        init_tracing(service_name=settings.service_name)


def build_registry(settings: Settings) -> BlockDefinitionRegistry:
    registry = BlockDefinitionRegistry.with_builtins() if settings.include_builtin_blocks else BlockDefinitionRegistry()
    if settings.block_definitions_file is not None:
        registry.load_json_file(settings.block_definitions_file)
    return registry


def build_block_searcher(settings: Settings | None = None) -> BlockSearcher:
    """Return an empty searcher backed by the registry described by ``settings``."""
    settings = settings or Settings()
    registry = build_registry(settings)
    logger.info("Block searcher ready with %d block definitions", len(registry))
    return BlockSearcher(registry)
