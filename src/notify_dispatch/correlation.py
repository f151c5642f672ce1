"""Correlation ID tracking for dispatch calls and their log entries."""

from __future__ import annotations

import contextlib
import uuid
from collections.abc import Iterator
from contextvars import ContextVar

# Survives across await points and is copied into gathered channel tasks.
_correlation_id: ContextVar[str | None] = ContextVar("notify_correlation_id", default=None)


def get_correlation_id() -> str | None:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


@contextlib.contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Run a block under a correlation ID, reusing the active one if present."""
    active = correlation_id or get_correlation_id() or generate_correlation_id()
    token = _correlation_id.set(active)
    try:
        yield active
    finally:
        _correlation_id.reset(token)
