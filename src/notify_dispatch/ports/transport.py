"""Transport port: the wire-level call behind a provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..delivery import RenderedNotification


@runtime_checkable
class ITransport(Protocol):
    """
    Performs the actual transmission for a provider.

    Returns the provider-assigned message id; raises on failure.
    """

    async def transmit(
        self,
        address: str,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        ...
