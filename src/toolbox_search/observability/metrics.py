"""Prometheus metrics for the block search index."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


BLOCKS_INDEXED = Counter(
    "toolbox_search_blocks_indexed_total",
    "Block descriptors added to a search index",
    ["outcome"],
)

INDEX_TRIGRAM_COUNT = Gauge(
    "toolbox_search_index_trigrams",
    "Distinct trigram keys held by the most recently updated index",
)

OPERATION_LATENCY = Histogram(
    "toolbox_search_operation_latency_seconds",
    "Block search index and query latency",
    ["operation"],
    buckets=(0.0001, 0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1),
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.labels(**labels).observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get content type for a metrics endpoint."""
    return CONTENT_TYPE_LATEST
