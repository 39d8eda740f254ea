"""Shared fixtures: a recording drawing surface, fresh render state and a headless ImGui frame."""

from collections import deque
from typing import NamedTuple, Optional

import imgui
import pytest

from inspectorlib.ui.layout_cursor import Rect
from inspectorlib.ui.render_state import RenderState
from inspectorlib.ui.surface import DrawingSurface, LabelStyle


class DrawCall(NamedTuple):
    kind: str
    rect: Optional[Rect]
    text: str
    enabled: bool
    style: LabelStyle = LabelStyle.NORMAL


class FakeSurface(DrawingSurface):
    """
    Surface that records every draw call and replays scripted input.

    - type_text(): text returned by the next text box
    - type_at(): text returned by the text box drawn at (x, y)
    - click(): caption of a button clicked the next time it is drawn
    - toggle(): value returned by the next toggle
    """

    def __init__(self):
        super().__init__()
        self.calls = []
        self._typed = deque()
        self._typed_at = {}
        self._clicks = set()
        self._toggles = deque()

    def type_text(self, text):
        self._typed.append(text)

    def type_at(self, x, y, text):
        self._typed_at[(x, y)] = text

    def click(self, caption):
        self._clicks.add(caption)

    def toggle(self, value):
        self._toggles.append(value)

    def of_kind(self, kind):
        return [call for call in self.calls if call.kind == kind]

    def draw_label(self, rect, text, style=LabelStyle.NORMAL):
        self.calls.append(DrawCall("label", rect, text, self.enabled, style))

    def draw_button(self, rect, text):
        self.calls.append(DrawCall("button", rect, text, self.enabled))
        if text in self._clicks:
            self._clicks.discard(text)
            return self.enabled
        return False

    def draw_text_box(self, rect, text):
        self.calls.append(DrawCall("text_box", rect, text, self.enabled))
        if (rect.x, rect.y) in self._typed_at:
            return self._typed_at.pop((rect.x, rect.y))
        if self._typed:
            return self._typed.popleft()
        return text

    def draw_toggle(self, rect, value, label):
        self.calls.append(DrawCall("toggle", rect, label, self.enabled))
        if self._toggles:
            return self._toggles.popleft()
        return value

    def draw_separator(self, rect):
        self.calls.append(DrawCall("separator", rect, "", self.enabled))

    def begin_scroll_region(self, rect, content_size):
        self.calls.append(DrawCall("begin_scroll", rect, "", self.enabled))
        self.content_size = content_size

    def end_scroll_region(self):
        self.calls.append(DrawCall("end_scroll", None, "", self.enabled))


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def state():
    render_state = RenderState()
    render_state.begin_pass()
    return render_state


@pytest.fixture
def imgui_window(tmp_path, monkeypatch):
    """Headless ImGui frame with an open window; no GL context needed."""
    monkeypatch.chdir(tmp_path)  # imgui.ini is written on shutdown
    context = imgui.create_context()
    io = imgui.get_io()
    io.display_size = (800, 600)
    io.fonts.get_tex_data_as_rgba32()

    imgui.new_frame()
    imgui.begin("Inspector")
    yield imgui
    imgui.end()
    imgui.render()
    imgui.destroy_context(context)
