"""PII redaction: keeps emails, phone numbers and secrets out of logs."""

from __future__ import annotations

import hashlib
import re
from typing import TYPE_CHECKING, Any

from .delivery import RedactedRecipient

if TYPE_CHECKING:
    from .payload import NotificationRecipient

_DIGITS = re.compile(r"[0-9]+")
_EMAIL_IN_TEXT = re.compile(r"([A-Za-z0-9._%+-]+)@([A-Za-z0-9.-]+\.[A-Za-z]{2,})")
_PHONE_IN_TEXT = re.compile(r"\+?[0-9]{7,}")
_PHONE_SEPARATORS = re.compile(r"[\s().-]")

_DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "password",
        "passphrase",
        "secret",
        "token",
        "push_token",
        "access_token",
        "refresh_token",
        "authorization",
        "api_key",
        "auth_key",
        "private_key",
        "otp",
        "card_number",
        "cvv",
    }
)


def mask_pii(value: str | None) -> str | None:
    """Return a display-safe copy of an email address or phone number.

    ``ab***@example.com`` for emails, ``***6780`` for all-digit phone numbers.
    Anything else is returned unchanged; empty input yields ``None``.
    """
    if not value:
        return None
    if "@" in value:
        local, _, domain = value.partition("@")
        return f"{local[:2]}***@{domain}"
    if _DIGITS.fullmatch(value):
        return f"***{value[-4:]}"
    return value


def mask_address(value: str | None) -> str | None:
    """Mask a delivery address for log lines.

    Unlike ``mask_pii``, phone numbers in ``+<country> <number>`` form are
    normalized first, and anything unrecognized is hidden entirely.
    """
    if not value:
        return None
    if "@" in value:
        return mask_pii(value)
    digits = _PHONE_SEPARATORS.sub("", value).lstrip("+")
    if _DIGITS.fullmatch(digits):
        return f"***{digits[-4:]}"
    return "***"


def mask_token(token: str) -> str:
    """Mask a device token, keeping four characters at each end."""
    if len(token) <= 8:
        return "***"
    return f"{token[:4]}***{token[-4:]}"


def redact_text(text: str | None) -> str | None:
    """Mask email addresses and long digit runs embedded in free text."""
    if not text:
        return text
    text = _EMAIL_IN_TEXT.sub(lambda m: f"{m.group(1)[:2]}***@{m.group(2)}", text)
    return _PHONE_IN_TEXT.sub(lambda m: f"***{m.group(0)[-4:]}", text)


def redact_recipient(recipient: NotificationRecipient) -> RedactedRecipient:
    """Project a recipient for logging; user id and role pass through."""
    return RedactedRecipient(
        user_id=recipient.user_id,
        email=mask_pii(recipient.email),
        phone=mask_pii(recipient.phone),
        role=recipient.role,
    )


class MetadataSanitizer:
    """
    Sanitizes request metadata before it reaches providers or log lines.

    Template rendering receives the raw metadata (an OTP has to reach the
    SMS body); everything forwarded past the renderer goes through here.
    """

    def __init__(
        self,
        *,
        redact_fields: set[str] | None = None,
        hash_fields: set[str] | None = None,
        sensitive_fields: set[str] | None = None,
    ) -> None:
        self._redact_fields = {f.lower() for f in (redact_fields or set())}
        self._hash_fields = {f.lower() for f in (hash_fields or set())}
        sensitive = set(sensitive_fields or _DEFAULT_SENSITIVE_FIELDS)
        self._sensitive_fields = {f.lower() for f in sensitive}

    def sanitize(self, metadata: dict[str, Any]) -> dict[str, Any]:
        """Return a sanitized copy of metadata safe for logging/providers."""
        return self._sanitize_dict(metadata)

    def _sanitize_dict(self, data: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            result[str(key)] = self._sanitize_value(value, str(key).lower())
        return result

    def _sanitize_value(self, value: Any, field_name: str | None = None) -> Any:
        if isinstance(value, dict):
            return self._sanitize_dict(value)
        if isinstance(value, list):
            return [self._sanitize_value(item, field_name) for item in value]
        if field_name is None:
            return value
        if field_name in self._hash_fields:
            return self._hash_value(value)
        if field_name in self._redact_fields or field_name in self._sensitive_fields:
            return "***"
        if field_name in {"email", "phone"} and isinstance(value, str):
            return mask_pii(value)
        return value

    def _hash_value(self, value: Any) -> str:
        digest = hashlib.sha256(str(value).encode("utf-8")).hexdigest()
        return f"sha256:{digest}"


default_sanitizer = MetadataSanitizer()
