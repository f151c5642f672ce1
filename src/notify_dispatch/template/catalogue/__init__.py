"""Built-in template catalogue for every event on email, SMS and push."""

from __future__ import annotations

from .email import EMAIL_TEMPLATES
from .push import PUSH_TEMPLATES
from .sms import SMS_TEMPLATES

__all__ = ["EMAIL_TEMPLATES", "PUSH_TEMPLATES", "SMS_TEMPLATES"]
