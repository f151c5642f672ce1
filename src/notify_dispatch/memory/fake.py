"""In-memory transport for test assertions."""

from __future__ import annotations

import asyncio
import uuid
from dataclasses import dataclass
from typing import Any

from ..delivery import RenderedNotification
from ..ports.transport import ITransport


@dataclass
class TransmittedMessage:
    """Record of a transmitted message for test assertions."""

    address: str
    content: RenderedNotification
    metadata: dict[str, Any] | None


class InMemoryTransport(ITransport):
    """
    Test double (Fake) that stores transmitted messages in a list.

    Set ``fail_with`` to make every transmission raise, or ``delay`` to
    make it slow (for timeout tests).
    """

    def __init__(
        self,
        *,
        fail_with: Exception | None = None,
        delay: float = 0.0,
        id_prefix: str = "mem",
    ) -> None:
        self.sent_messages: list[TransmittedMessage] = []
        self.fail_with = fail_with
        self.delay = delay
        self.id_prefix = id_prefix

    async def transmit(
        self,
        address: str,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_with is not None:
            raise self.fail_with
        self.sent_messages.append(TransmittedMessage(address, content, metadata))
        return f"{self.id_prefix}-{uuid.uuid4().hex[:12]}"

    def assert_sent(self, address: str, count: int = 1) -> None:
        """Helper for test assertions."""
        matches = [m for m in self.sent_messages if m.address == address]
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} messages to {address}, but found {len(matches)}."
            )

    def clear(self) -> None:
        """Clear all transmitted messages."""
        self.sent_messages.clear()
