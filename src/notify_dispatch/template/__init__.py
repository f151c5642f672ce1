"""Template registry and rendering components."""

from __future__ import annotations

from .engine import ChannelTemplate, JinjaTemplateRenderer, VariableBag
from .registry import TemplateRegistry

__all__ = [
    "ChannelTemplate",
    "JinjaTemplateRenderer",
    "TemplateRegistry",
    "VariableBag",
]
