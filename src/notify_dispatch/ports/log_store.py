"""Notification log store port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..delivery import NotificationLog
    from ..log_store import LogFilters, LogPage


@runtime_checkable
class INotificationLogStore(Protocol):
    """Protocol for recording and querying delivery attempts."""

    async def append(self, entry: NotificationLog) -> None:
        """Record one delivery attempt."""
        ...

    async def query(self, filters: LogFilters | None = None) -> list[NotificationLog]:
        """Return matching entries, newest first."""
        ...

    async def query_page(self, filters: LogFilters | None = None) -> LogPage:
        """Return one page of matching entries plus the total match count."""
        ...
