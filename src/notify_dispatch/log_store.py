"""Bounded in-memory notification log."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter, deque
from dataclasses import dataclass
from datetime import datetime

from .config import MAX_LOGS
from .delivery import (
    DeliveryStatus,
    NotificationChannel,
    NotificationEvent,
    NotificationLog,
)
from .ports.log_store import INotificationLogStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogFilters:
    """AND-combined query filters; ``None`` means "don't filter".

    ``start_date``/``end_date`` are inclusive bounds on ``created_at``.
    A ``limit`` of ``None`` or ``0`` returns every match.
    """

    event: NotificationEvent | None = None
    channel: NotificationChannel | None = None
    user_id: str | None = None
    role: str | None = None
    status: DeliveryStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    limit: int | None = None
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValueError("limit must not be negative")
        if self.offset < 0:
            raise ValueError("offset must not be negative")

    def matches(self, entry: NotificationLog) -> bool:
        if self.event is not None and entry.event != self.event:
            return False
        if self.channel is not None and entry.channel != self.channel:
            return False
        if self.user_id is not None and entry.recipient.user_id != self.user_id:
            return False
        if self.role is not None and entry.recipient.role != self.role:
            return False
        if self.status is not None and entry.status != self.status:
            return False
        if self.start_date is not None and entry.created_at < self.start_date:
            return False
        if self.end_date is not None and entry.created_at > self.end_date:
            return False
        return True


@dataclass(frozen=True)
class LogPage:
    """One page of query results plus the number of matches before paging."""

    logs: list[NotificationLog]
    total: int


@dataclass(frozen=True)
class LogStats:
    total: int
    by_status: dict[DeliveryStatus, int]
    by_channel: dict[NotificationChannel, int]


class InMemoryNotificationLog(INotificationLogStore):
    """Fixed-capacity, oldest-evicted-first log of delivery attempts.

    Appends are serialized by a per-instance lock so the capacity bound
    holds under concurrent channel dispatch. Entries live for the process
    lifetime only.
    """

    def __init__(self, max_logs: int = MAX_LOGS) -> None:
        if max_logs < 1:
            raise ValueError("max_logs must be at least 1")
        self.max_logs = max_logs
        # (insertion sequence, entry); the sequence breaks created_at ties
        self._entries: deque[tuple[int, NotificationLog]] = deque()
        self._seq = 0
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    async def append(self, entry: NotificationLog) -> None:
        async with self._lock:
            self._entries.append((self._seq, entry))
            self._seq += 1
            while len(self._entries) > self.max_logs:
                _, evicted = self._entries.popleft()
                logger.debug(f"Evicted notification log {evicted.id} (capacity {self.max_logs})")

    async def query(self, filters: LogFilters | None = None) -> list[NotificationLog]:
        """Return matches newest first, after ``offset`` and up to ``limit``."""
        return (await self.query_page(filters)).logs

    async def query_page(self, filters: LogFilters | None = None) -> LogPage:
        filters = filters or LogFilters()
        matched = [item for item in list(self._entries) if filters.matches(item[1])]
        matched.sort(key=lambda item: (item[1].created_at, item[0]), reverse=True)

        start = filters.offset
        end = start + filters.limit if filters.limit else None
        return LogPage(logs=[entry for _, entry in matched[start:end]], total=len(matched))

    async def stats(self) -> LogStats:
        entries = [entry for _, entry in list(self._entries)]
        return LogStats(
            total=len(entries),
            by_status=dict(Counter(entry.status for entry in entries)),
            by_channel=dict(Counter(entry.channel for entry in entries)),
        )

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()
