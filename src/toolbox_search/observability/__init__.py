"""Observability module for tracing, metrics, and structured logging."""

from toolbox_search.observability.context import get_trace_context, set_trace_context, trace_context
from toolbox_search.observability.logging import JsonFormatter, configure_logging
from toolbox_search.observability.metrics import (
    BLOCKS_INDEXED,
    INDEX_TRIGRAM_COUNT,
    OPERATION_LATENCY,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from toolbox_search.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "BLOCKS_INDEXED",
    "INDEX_TRIGRAM_COUNT",
    "OPERATION_LATENCY",
    "JsonFormatter",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
]
