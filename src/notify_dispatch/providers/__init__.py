"""Channel providers and their live transports."""

from __future__ import annotations

from .base import BaseChannelProvider
from .email import EmailProvider, SmtpEmailTransport
from .in_app import InAppProvider
from .push import FcmPushTransport, PushProvider
from .sms import SMS_LENGTH_ERROR, SMS_MAX_LENGTH, HttpSmsGateway, SmsProvider

__all__ = [
    "BaseChannelProvider",
    "EmailProvider",
    "FcmPushTransport",
    "HttpSmsGateway",
    "InAppProvider",
    "PushProvider",
    "SMS_LENGTH_ERROR",
    "SMS_MAX_LENGTH",
    "SmsProvider",
    "SmtpEmailTransport",
]
