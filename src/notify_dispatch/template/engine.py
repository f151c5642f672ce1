"""Jinja2 rendering for channel templates."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, Template, select_autoescape

from ..delivery import RenderedNotification

EMAIL_LAYOUT = """\
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <style>
    body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .content { padding: 20px; background-color: #f9f9f9; }
    .code { font-size: 24px; color: #007AFF; }
    .footer { text-align: center; padding: 20px; font-size: 12px; color: #666; }
  </style>
</head>
<body>
  <div class="container">
    <div class="content">
{% block content %}{% endblock %}
    </div>
    <div class="footer">
      <p>Shree Om. All rights reserved.</p>
    </div>
  </div>
</body>
</html>
"""


class VariableBag:
    """
    Read-only view over template variables with a get-with-default policy.

    A variable that is absent, ``None`` or the empty string renders as the
    supplied default; anything else renders via ``str()``.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str, default: str = "") -> str:
        value = self._values.get(key)
        if value is None or value == "":
            return default
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)


@dataclass(frozen=True)
class ChannelTemplate:
    """Jinja2 sources for one (event, channel) pair.

    Templates reference variables only through ``v.get(name, default)``.
    """

    body: str
    subject: str | None = None
    html: str | None = None
    title: str | None = None


class JinjaTemplateRenderer:
    """Renders ``ChannelTemplate`` sources; compiled templates are cached."""

    def __init__(self) -> None:
        self._text_env = Environment(undefined=StrictUndefined, autoescape=False)
        self._html_env = Environment(
            loader=DictLoader({"email_layout.html": EMAIL_LAYOUT}),
            undefined=StrictUndefined,
            autoescape=select_autoescape(default_for_string=True, default=True),
        )
        self._cache: dict[tuple[bool, str], Template] = {}

    def render(
        self, template: ChannelTemplate, variables: Mapping[str, Any]
    ) -> RenderedNotification:
        bag = VariableBag(variables)
        return RenderedNotification(
            body_text=self._render(template.body, bag),
            subject=self._render(template.subject, bag) if template.subject else None,
            body_html=self._render(template.html, bag, html=True) if template.html else None,
            title=self._render(template.title, bag) if template.title else None,
        )

    def _render(self, source: str, bag: VariableBag, html: bool = False) -> str:
        key = (html, source)
        compiled = self._cache.get(key)
        if compiled is None:
            env = self._html_env if html else self._text_env
            compiled = env.from_string(source)
            self._cache[key] = compiled
        return compiled.render(v=bag)
