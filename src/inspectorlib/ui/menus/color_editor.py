"""
Color Editor

Sub-editor window for Color members, opened through the sub-editor router.
"""

from __future__ import annotations

from typing import Optional

import imgui

from ...config.settings import COLOR_EDITOR_SIZE, COLOR_EDITOR_TITLE
from ...core.types import Color
from ..sub_editors import EditRequest


class ColorEditorWindow:
    """RGBA color picker that completes an EditRequest on Apply."""

    EDITOR_KEY = "color"

    def __init__(self, title: str = COLOR_EDITOR_TITLE):
        self.title = title
        self.request: Optional[EditRequest] = None
        self.color = Color(1.0, 1.0, 1.0)
        self.show = False

    def open(self, request: EditRequest) -> None:
        """
        Start editing a request. Router handler for the "color" editor.

        A request that is still open is abandoned.
        """
        if self.request is not None and not self.request.finished:
            self.request.cancel()
        self.request = request
        self.color = Color.from_sequence(request.initial_value)
        self.show = True

    def draw(self) -> None:
        """Draw the editor window (no-op while closed)."""
        if not self.show or self.request is None:
            return

        width, height = COLOR_EDITOR_SIZE
        imgui.set_next_window_size(width, height, imgui.ONCE)
        expanded, opened = imgui.begin(f"{self.title}: {self.request.member}##color_editor", True)

        if not opened:
            imgui.end()
            self._cancel()
            return

        if expanded:
            changed, rgba = imgui.color_edit4("##color", *self.color)
            if changed:
                self.color = Color(*rgba)

            imgui.separator()
            if imgui.button("Apply", 100, 0):
                request = self.request
                self._close()
                request.complete(self.color)
            imgui.same_line()
            if imgui.button("Cancel", 100, 0):
                self._cancel()

        imgui.end()

    def _cancel(self) -> None:
        if self.request is not None:
            self.request.cancel()
        self._close()

    def _close(self) -> None:
        self.request = None
        self.show = False
