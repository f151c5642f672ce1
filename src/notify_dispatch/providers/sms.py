"""SMS provider and an HTTP gateway transport using httpx."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..delivery import NotificationChannel, RenderedNotification
from ..exceptions import NotificationDeliveryError
from ..ports.transport import ITransport
from ..redaction import mask_address
from .base import BaseChannelProvider

if TYPE_CHECKING:
    import httpx

    from ..payload import NotificationRecipient

logger = logging.getLogger(__name__)

SMS_MAX_LENGTH = 160
SMS_LENGTH_ERROR = f"Message exceeds SMS length limit ({SMS_MAX_LENGTH} characters)"


class SmsProvider(BaseChannelProvider):
    """Delivers plain text to ``recipient.phone``; bodies over 160 chars are refused."""

    channel = NotificationChannel.SMS
    missing_address_error = "No phone number provided"

    def address_of(self, recipient: NotificationRecipient) -> str | None:
        return recipient.phone

    def validate_content(self, content: RenderedNotification) -> str | None:
        if len(content.body_text) > SMS_MAX_LENGTH:
            return SMS_LENGTH_ERROR
        return None


class HttpSmsGateway(ITransport):
    """
    Form-POST SMS gateway client.

    The gateway answers ``OK;MSG_ID;CHARGE`` or ``ERROR;CODE;DESCRIPTION``.
    """

    def __init__(
        self,
        url: str,
        auth_key: str,
        default_from: str | None = None,
        validity: int = 1,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.url = url
        self.auth_key = auth_key
        self.default_from = default_from
        self.validity = validity
        self.timeout = timeout
        self._client = client

    async def transmit(
        self,
        address: str,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        originator = (metadata or {}).get("from_number") or self.default_from
        if not originator:
            raise ValueError("Sender number (originator) is required.")

        msg_id = str(time.time_ns() // 1_000_000)
        data = {
            "auth_key": self.auth_key,
            "id": msg_id,
            "from": str(originator),
            # Gateway expects numbers without a leading '+'
            "to": address.lstrip("+"),
            "text": content.body_text,
            "validity": str(self.validity),
        }

        # Lazy import of httpx
        try:
            import httpx
        except ImportError as e:
            raise ImportError(
                "httpx is required for HttpSmsGateway. "
                "Install with: pip install 'notify-dispatch[http]'"
            ) from e

        if self._client is not None:
            response = await self._client.post(self.url, data=data)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.url, data=data)
        response.raise_for_status()

        result = response.text
        if not result.startswith("OK"):
            raise NotificationDeliveryError(
                "sms", mask_address(data["to"]) or "", f"Gateway error: {result}"
            )

        logger.debug(f"SMS gateway accepted message {msg_id}")
        return msg_id
