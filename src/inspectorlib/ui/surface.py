"""
Drawing Surface

Primitive drawing capability the inspector renders through. Each call
draws one control at an absolute rectangle and returns the result of the
user's interaction with it during this frame.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Tuple

from .layout_cursor import Rect


class LabelStyle(Enum):
    """Text styles for labels and status glyphs."""

    NORMAL = auto()
    ALERT = auto()     # Failed dependency
    CONFIRM = auto()   # Satisfied dependency


class DrawingSurface(ABC):
    """
    Abstract drawing surface.

    Mirrors an immediate-mode GUI: the enabled state applies to every
    control drawn after set_enabled() until it is changed again. Disabled
    controls are dimmed and never report interaction.
    """

    def __init__(self):
        self.enabled = True

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the controls drawn from now on."""
        self.enabled = enabled

    @abstractmethod
    def draw_label(self, rect: Rect, text: str, style: LabelStyle = LabelStyle.NORMAL) -> None:
        """Draw static text."""

    @abstractmethod
    def draw_button(self, rect: Rect, text: str) -> bool:
        """
        Draw a button.

        Returns:
            True if the button was clicked this frame
        """

    @abstractmethod
    def draw_text_box(self, rect: Rect, text: str) -> str:
        """
        Draw a single-line text box showing text.

        Returns:
            Text after the user's edits this frame
        """

    @abstractmethod
    def draw_toggle(self, rect: Rect, value: bool, label: str) -> bool:
        """
        Draw a checkbox.

        Returns:
            Toggle state after the user's edits this frame
        """

    @abstractmethod
    def draw_separator(self, rect: Rect) -> None:
        """Draw a horizontal divider line."""

    @abstractmethod
    def begin_scroll_region(self, rect: Rect, content_size: Tuple[float, float]) -> None:
        """Start a clipped scroll region; following rects are region-relative."""

    @abstractmethod
    def end_scroll_region(self) -> None:
        """Close the region opened by begin_scroll_region()."""
