"""Push provider and an FCM HTTP v1 transport using httpx."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..delivery import NotificationChannel, RenderedNotification
from ..exceptions import NotificationDeliveryError
from ..ports.transport import ITransport
from ..redaction import mask_token
from .base import BaseChannelProvider

if TYPE_CHECKING:
    import httpx

    from ..payload import NotificationRecipient

logger = logging.getLogger(__name__)

FCM_SEND_URL = "https://fcm.googleapis.com/v1/projects/{project_id}/messages:send"


class PushProvider(BaseChannelProvider):
    """Delivers title + body to ``recipient.push_token``."""

    channel = NotificationChannel.PUSH
    missing_address_error = "No push token provided"

    def address_of(self, recipient: NotificationRecipient) -> str | None:
        return recipient.push_token

    def _masked(self, address: str) -> str:
        return mask_token(address)


class FcmPushTransport(ITransport):
    """
    Firebase Cloud Messaging (HTTP v1) transport.

    Data payload values are stringified since FCM only accepts string maps.
    """

    def __init__(
        self,
        project_id: str,
        access_token: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.url = FCM_SEND_URL.format(project_id=project_id)
        self.access_token = access_token
        self.timeout = timeout
        self._client = client

    def build_body(
        self,
        token: str,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        data = {str(k): str(v) for k, v in (metadata or {}).items() if v is not None}
        return {
            "message": {
                "token": token,
                "notification": {"title": content.title or "", "body": content.body_text},
                "data": data,
            }
        }

    async def transmit(
        self,
        address: str,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        # Lazy import of httpx
        try:
            import httpx
        except ImportError as e:
            raise ImportError(
                "httpx is required for FcmPushTransport. "
                "Install with: pip install 'notify-dispatch[http]'"
            ) from e

        body = self.build_body(address, content, metadata)
        headers = {"Authorization": f"Bearer {self.access_token}"}

        if self._client is not None:
            response = await self._client.post(self.url, json=body, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.url, json=body, headers=headers)

        if response.status_code >= 400:
            raise NotificationDeliveryError(
                "push", mask_token(address), f"HTTP {response.status_code}"
            )

        name = response.json().get("name")
        if not name:
            raise NotificationDeliveryError("push", mask_token(address), "missing message name")
        logger.debug(f"FCM accepted message {name}")
        return str(name)
