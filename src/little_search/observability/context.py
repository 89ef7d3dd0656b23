"""Log correlation fields scoped to the code that sets them."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar


_log_context: ContextVar[dict[str, str] | None] = ContextVar("log_context", default=None)


def get_trace_context() -> dict[str, str]:
    """Fields currently bound for log correlation (trace_id, span_id, corpus)."""
    return dict(_log_context.get() or {})


@contextmanager
def bound_context(**fields: str) -> Iterator[None]:
    """Bind ``fields`` on top of the current context until the block exits."""
    token = _log_context.set({**(_log_context.get() or {}), **fields})
    try:
        yield
    finally:
        _log_context.reset(token)
