"""Inbound request models: recipient, caller-supplied template and payload."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .delivery import NotificationChannel, NotificationEvent, NotificationPriority


class NotificationRecipient(BaseModel):
    """Addressing information; only the fields a channel needs are required."""

    model_config = ConfigDict(frozen=True)

    user_id: str | None = None
    email: str | None = None
    phone: str | None = None
    push_token: str | None = None
    role: str | None = None


class NotificationTemplate(BaseModel):
    """Caller-supplied template data.

    ``title``/``message`` are used verbatim for push; ``variables`` feeds
    the registered email/SMS templates.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    message: str = ""
    subject: str | None = None
    html_template: str | None = None
    variables: dict[str, Any] = Field(default_factory=dict)


class NotificationPayload(BaseModel):
    """A single notification request fanned out over one or more channels."""

    model_config = ConfigDict(frozen=True)

    event: NotificationEvent
    channel: list[NotificationChannel] = Field(min_length=1)
    recipient: NotificationRecipient
    template: NotificationTemplate = Field(default_factory=NotificationTemplate)
    priority: NotificationPriority = NotificationPriority.NORMAL
    metadata: dict[str, Any] = Field(default_factory=dict)

    def template_variables(self) -> dict[str, Any]:
        """Variable bag for rendering: template variables overlaid by metadata."""
        return {**self.template.variables, **self.metadata}
