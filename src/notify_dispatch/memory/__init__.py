"""Transports that never leave the process: simulated delivery and test fakes."""

from __future__ import annotations

from .console import LoggingTransport
from .fake import InMemoryTransport, TransmittedMessage

__all__ = ["InMemoryTransport", "LoggingTransport", "TransmittedMessage"]
