"""Port definitions for notification dispatch."""

from __future__ import annotations

from .log_store import INotificationLogStore
from .provider import IChannelProvider
from .resolver import ITemplateResolver
from .transport import ITransport

__all__ = [
    "IChannelProvider",
    "INotificationLogStore",
    "ITemplateResolver",
    "ITransport",
]
