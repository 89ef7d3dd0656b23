"""OpenTelemetry tracing for index builds and queries."""

from __future__ import annotations

from contextlib import contextmanager
import logging
import sys
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor
from opentelemetry.trace import Status, StatusCode

from little_search.observability.context import bound_context


if TYPE_CHECKING:
    from collections.abc import Generator

    from opentelemetry.trace import Span, Tracer

logger = logging.getLogger(__name__)

SERVICE_NAME = "little-search-engine"

_tracer_holder: dict[str, Tracer | None] = {"tracer": None}


def init_tracing(*, console_export: bool = False) -> TracerProvider:
    """Initialize OpenTelemetry tracing.

    Spans stay in process; ``console_export`` writes finished spans to stderr.
    """
    provider = TracerProvider(resource=Resource.create({"service.name": SERVICE_NAME}))
    if console_export:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    trace.set_tracer_provider(provider)
    _tracer_holder["tracer"] = provider.get_tracer(__name__)
    logger.debug("Tracing initialized for service: %s", SERVICE_NAME)
    return provider


def get_tracer() -> Tracer:
    """Get the configured tracer."""
    if _tracer_holder["tracer"] is None:
        init_tracing()
    return _tracer_holder["tracer"]  # type: ignore[return-value]


@contextmanager
def create_span(name: str, attributes: dict[str, Any] | None = None) -> Generator[Span, None, None]:
    """Create a traced span and expose its ids to the log formatter."""
    tracer = get_tracer()
    with tracer.start_as_current_span(name, record_exception=False, set_status_on_exception=False) as span:
        if attributes:
            for key, value in attributes.items():
                span.set_attribute(key, value)

        span_ctx = span.get_span_context()
        ids = {"trace_id": format(span_ctx.trace_id, "032x"), "span_id": format(span_ctx.span_id, "016x")}

        try:
            with bound_context(**ids):
                yield span
        except Exception as exc:
            span.set_status(Status(StatusCode.ERROR, str(exc)))
            span.record_exception(exc)
            raise
