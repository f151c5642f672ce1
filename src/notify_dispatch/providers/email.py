"""Email provider and its SMTP transport."""

from __future__ import annotations

import email.message
import email.policy
import email.utils
import logging
from typing import TYPE_CHECKING, Any

from ..delivery import NotificationChannel, RenderedNotification
from ..ports.transport import ITransport
from .base import BaseChannelProvider

if TYPE_CHECKING:
    from ..payload import NotificationRecipient

logger = logging.getLogger(__name__)


class EmailProvider(BaseChannelProvider):
    """Delivers subject + text + optional HTML to ``recipient.email``."""

    channel = NotificationChannel.EMAIL
    missing_address_error = "No email address provided"

    def address_of(self, recipient: NotificationRecipient) -> str | None:
        return recipient.email


class SmtpEmailTransport(ITransport):
    """
    Async SMTP transport using aiosmtplib.

    The returned message id is the generated ``Message-ID`` header.
    """

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 10.0,
        from_email: str | None = None,
    ):
        if not from_email:
            raise ValueError("Sender email (from_email) is required.")
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout
        self.from_email = from_email

    def build_message(
        self,
        address: str,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> email.message.EmailMessage:
        from_addr = str((metadata or {}).get("from_email") or self.from_email)
        message = email.message.EmailMessage(policy=email.policy.default)
        message["To"] = address
        message["From"] = from_addr
        message["Message-ID"] = email.utils.make_msgid()
        if content.subject:
            message["Subject"] = content.subject

        if content.body_html:
            message.set_content(content.body_text, subtype="plain", charset="utf-8")
            message.add_alternative(content.body_html, subtype="html", charset="utf-8")
        else:
            message.set_content(content.body_text, charset="utf-8")
        return message

    async def transmit(
        self,
        address: str,
        content: RenderedNotification,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        # Lazy import of aiosmtplib
        try:
            import aiosmtplib
        except ImportError as e:
            raise ImportError(
                "aiosmtplib is required for SmtpEmailTransport. "
                "Install with: pip install 'notify-dispatch[smtp]'"
            ) from e

        message = self.build_message(address, content, metadata)
        async with aiosmtplib.SMTP(
            hostname=self.host,
            port=self.port,
            timeout=self.timeout,
            start_tls=self.use_tls,
        ) as smtp:
            if self.username and self.password:
                await smtp.login(self.username, self.password)
            await smtp.send_message(message)

        logger.debug(f"SMTP accepted message {message['Message-ID']}")
        return str(message["Message-ID"])
