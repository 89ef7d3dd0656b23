"""Observability module for tracing, metrics, and structured logging."""

from little_search.observability.context import bound_context, get_trace_context
from little_search.observability.logging import JsonFormatter, configure_logging
from little_search.observability.metrics import (
    BUILD_FAILURES,
    BUILD_LATENCY,
    DOCUMENTS_INDEXED,
    INDEX_KEYWORD_COUNT,
    SEARCH_COUNT,
    SEARCH_LATENCY,
    get_metrics,
    track_latency,
)
from little_search.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "BUILD_FAILURES",
    "BUILD_LATENCY",
    "DOCUMENTS_INDEXED",
    "INDEX_KEYWORD_COUNT",
    "SEARCH_COUNT",
    "SEARCH_LATENCY",
    "JsonFormatter",
    "bound_context",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "track_latency",
]
