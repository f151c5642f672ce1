"""Tests for PII redaction and metadata sanitization."""

import re

import pytest

from notify_dispatch.payload import NotificationRecipient
from notify_dispatch.redaction import (
    MetadataSanitizer,
    default_sanitizer,
    mask_address,
    mask_pii,
    mask_token,
    redact_recipient,
    redact_text,
)


class TestMaskPii:
    def test_none_and_empty(self):
        assert mask_pii(None) is None
        assert mask_pii("") is None

    def test_email_keeps_two_chars_and_domain(self):
        assert mask_pii("abcdef@example.com") == "ab***@example.com"

    @pytest.mark.parametrize("email", ["a@x.io", "ab@example.com", "john.doe@mail.example.org"])
    def test_email_shape(self, email):
        assert re.fullmatch(r"^.{1,2}\*\*\*@.+$", mask_pii(email))

    def test_phone_keeps_last_four(self):
        assert mask_pii("9123456780") == "***6780"
        assert re.fullmatch(r"^\*\*\*\d{4}$", mask_pii("00441234567"))

    def test_unrecognized_is_unchanged(self):
        assert mask_pii("+91 91234 56780") == "+91 91234 56780"
        assert mask_pii("user-42") == "user-42"


def test_mask_token():
    assert mask_token("short") == "***"
    assert mask_token("fcm-token-abcdef123456") == "fcm-***3456"


def test_redact_text_masks_embedded_pii():
    text = "550 mailbox bob.smith@example.com unavailable; sms to +919123456780 failed"

    result = redact_text(text)

    assert "bob.smith@example.com" not in result
    assert "bo***@example.com" in result
    assert "+919123456780" not in result
    assert "***6780" in result


def test_redact_text_passthrough():
    assert redact_text(None) is None
    assert redact_text("Connection refused") == "Connection refused"


def test_redact_recipient():
    recipient = NotificationRecipient(
        user_id="u1", email="alice@example.com", phone="9123456780", role="dealer"
    )

    redacted = redact_recipient(recipient)

    assert redacted.user_id == "u1"
    assert redacted.role == "dealer"
    assert redacted.email == "al***@example.com"
    assert redacted.phone == "***6780"


def test_default_sanitizer_redacts_sensitive_fields():
    """Test default sanitizer redacts secrets and masks contact fields."""
    metadata = {
        "event_id": "abc-123",
        "password": "secret123",
        "otp": "4821",
        "api_key": "secret-key",
        "email": "user@example.com",
        "normal_field": "keep-me",
    }

    result = MetadataSanitizer().sanitize(metadata)

    assert result["event_id"] == "abc-123"
    assert result["password"] == "***"
    assert result["otp"] == "***"
    assert result["api_key"] == "***"
    assert result["email"] == "us***@example.com"
    assert result["normal_field"] == "keep-me"


def test_sanitizer_hash_fields():
    """Test sanitizer hashes specified fields."""
    sanitizer = MetadataSanitizer(hash_fields={"user_id"})

    result = sanitizer.sanitize({"user_id": "user-123", "name": "John"})

    assert result["user_id"].startswith("sha256:")
    assert result["name"] == "John"


def test_sanitizer_nested_structures():
    """Test sanitizer handles nested dicts and lists."""
    metadata = {
        "level1": {
            "password": "nested-secret",
            "level2": [{"token": "array-secret"}, {"safe": "value"}],
        },
    }

    result = default_sanitizer.sanitize(metadata)

    assert result["level1"]["password"] == "***"
    assert result["level1"]["level2"][0]["token"] == "***"
    assert result["level1"]["level2"][1]["safe"] == "value"


class TestMaskAddress:
    @pytest.mark.parametrize(
        "phone",
        ["+919123456780", "+91 91234 56780", "+91-91234-56780", "(912) 345-6780", "9123456780"],
    )
    def test_phone_forms_are_normalized(self, phone):
        assert mask_address(phone) == "***6780"

    def test_email_matches_mask_pii(self):
        assert mask_address("alice@example.com") == "al***@example.com"

    def test_unrecognized_is_hidden(self):
        assert mask_address("not-a-phone") == "***"
        assert mask_address(None) is None


def test_mask_pii_degenerate_inputs_are_pinned():
    """Short or local-less inputs keep the simple masking rules."""
    assert mask_pii("@example.com") == "***@example.com"
    assert mask_pii("123") == "***123"
