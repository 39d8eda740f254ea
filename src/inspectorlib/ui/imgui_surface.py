"""
ImGui Drawing Surface

DrawingSurface implementation on top of pyimgui. Widgets are placed at
absolute positions inside the current ImGui window.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Optional, Tuple

import imgui

from ..config.settings import TEXT_BUFFER_LENGTH
from .layout_cursor import Rect
from .surface import DrawingSurface, LabelStyle
from .theme import ThemeManager


def _widget_id(rect: Rect) -> str:
    """Hidden ImGui id unique per widget position."""
    return f"##{int(rect.x)}_{int(rect.y)}"


class ImguiSurface(DrawingSurface):
    """Draws inspector widgets with ImGui."""

    def __init__(self, theme_manager: Optional[ThemeManager] = None):
        """
        Initialize surface.

        Args:
            theme_manager: Source of glyph colors and disabled alpha
                (a non-applying sage_green theme by default)
        """
        super().__init__()
        self.theme_manager = theme_manager or ThemeManager(apply=False)

    @contextmanager
    def _item(self, rect: Rect, width: bool = True):
        """Position the next item and apply the enabled state around it."""
        imgui.set_cursor_pos((rect.x, rect.y))
        if width:
            imgui.push_item_width(rect.width)
        if not self.enabled:
            imgui.internal.push_item_flag(imgui.internal.ITEM_DISABLED, True)
            imgui.push_style_var(
                imgui.STYLE_ALPHA,
                imgui.get_style().alpha * self.theme_manager.current_theme.disabled_alpha,
            )
        try:
            yield
        finally:
            if not self.enabled:
                imgui.pop_style_var()
                imgui.internal.pop_item_flag()
            if width:
                imgui.pop_item_width()

    def draw_label(self, rect: Rect, text: str, style: LabelStyle = LabelStyle.NORMAL) -> None:
        with self._item(rect, width=False):
            if style is LabelStyle.NORMAL:
                imgui.text(text)
            else:
                color_name = "error" if style is LabelStyle.ALERT else "success"
                imgui.text_colored(text, *self.theme_manager.get_color(color_name), 1.0)

    def draw_button(self, rect: Rect, text: str) -> bool:
        with self._item(rect, width=False):
            clicked = imgui.button(f"{text}{_widget_id(rect)}", rect.width, rect.height)
        return clicked and self.enabled

    def draw_text_box(self, rect: Rect, text: str) -> str:
        # Room for the current text plus a full buffer of typing
        buffer_length = len(text.encode("utf-8")) + TEXT_BUFFER_LENGTH
        with self._item(rect):
            changed, new_text = imgui.input_text(_widget_id(rect), text, buffer_length)
        return new_text if changed and self.enabled else text

    def draw_toggle(self, rect: Rect, value: bool, label: str) -> bool:
        with self._item(rect, width=False):
            changed, new_value = imgui.checkbox(f"{label}{_widget_id(rect)}", value)
        return new_value if changed and self.enabled else value

    def draw_separator(self, rect: Rect) -> None:
        with self._item(rect, width=False):
            x, y = imgui.get_cursor_screen_pos()
            mid = y + rect.height / 2
            color = imgui.get_color_u32_rgba(*self.theme_manager.get_color("border"), 1.0)
            imgui.get_window_draw_list().add_line(x, mid, x + rect.width, mid, color, 1.0)
            imgui.dummy(rect.width, rect.height)

    def begin_scroll_region(self, rect: Rect, content_size: Tuple[float, float]) -> None:
        imgui.set_cursor_pos((rect.x, rect.y))
        imgui.set_next_window_content_size(*content_size)
        imgui.begin_child("##inspector_scroll", rect.width, rect.height, border=True)

    def end_scroll_region(self) -> None:
        imgui.end_child()
