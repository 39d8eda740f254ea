"""
Inspector Widgets

Immediate-mode widgets drawn through a DrawingSurface.
"""

from .primitives import (
    label,
    button,
    dependency_button,
    horizontal_separator,
    begin_scroll_view,
    end_scroll_view,
)
from .text_field import text_field
from .object_renderer import render_object, register_member_renderer

__all__ = [
    "label",
    "button",
    "dependency_button",
    "horizontal_separator",
    "begin_scroll_view",
    "end_scroll_view",
    "text_field",
    "render_object",
    "register_member_renderer",
]
