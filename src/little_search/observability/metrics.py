"""Prometheus metrics for index builds and queries."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


DOCUMENTS_INDEXED = Counter(
    "little_search_documents_indexed_total",
    "Documents loaded and merged into the keyword index",
)

BUILD_FAILURES = Counter(
    "little_search_build_failures_total",
    "Index builds aborted because an input source was missing",
    ["source"],
)

INDEX_KEYWORD_COUNT = Gauge(
    "little_search_index_keywords",
    "Distinct keywords in the most recently built index",
)

BUILD_LATENCY = Histogram(
    "little_search_build_latency_seconds",
    "Index build latency in seconds",
    buckets=(0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0, 120.0),
)

SEARCH_LATENCY = Histogram(
    "little_search_search_latency_seconds",
    "Top-k query latency in seconds",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05),
)

SEARCH_COUNT = Counter(
    "little_search_searches_total",
    "Top-k queries answered",
    ["outcome"],
)


@contextmanager
def track_latency(histogram: Histogram) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()
