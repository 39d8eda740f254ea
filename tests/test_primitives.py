"""Tests for primitive widgets and dependency gating"""

from inspectorlib.config import settings
from inspectorlib.ui.layout_cursor import Rect
from inspectorlib.ui.surface import LabelStyle
from inspectorlib.ui.widgets import (
    begin_scroll_view,
    button,
    dependency_button,
    end_scroll_view,
    horizontal_separator,
    label,
    text_field,
)


def test_cursor_monotonic_over_widget_calls(surface, state):
    """Test n widget calls claim n strictly increasing rows"""
    indices = [
        label(surface, state, "Title"),
        button(surface, state, "Go", lambda: None),
        horizontal_separator(surface, state),
        text_field(surface, state, 1.0, lambda v: None),
        dependency_button(surface, state, "ok", "fail", None, lambda: True),
        label(surface, state, "Footer"),
    ]

    assert indices == sorted(set(indices))
    assert indices == list(range(6))


def test_label_position(surface, state):
    """Test labels draw at the current row in the left column"""
    label(surface, state, "first")
    label(surface, state, "second")

    rects = [call.rect for call in surface.of_kind("label")]
    assert rects[0] == Rect(20, 10, settings.LABEL_WIDTH, 20)
    assert rects[1].y == 10 + settings.ROW_HEIGHT


def test_label_sharing_row(surface, state):
    """Test a paired label does not advance the cursor"""
    row = label(surface, state, "speed", advance=False)
    field = text_field(surface, state, 1.0, lambda v: None, rect=state.cursor.paired_rect(row))

    assert row == field == 0
    assert state.cursor_index == 1


def test_button_click(surface, state):
    """Test clicking a button runs its callback"""
    clicks = []
    surface.click("Go")

    button(surface, state, "Go", lambda: clicks.append(True))

    assert clicks == [True]


def test_button_without_callback(surface, state):
    """Test a button without callback is inert but still claims a row"""
    surface.click("Go")

    index = button(surface, state, "Go", None)

    assert index == 0
    assert state.cursor_index == 1


def test_button_disabled_under_error_flag(surface, state):
    """Test disabled buttons ignore clicks"""
    clicks = []
    state.error_flag = True
    surface.click("Go")

    button(surface, state, "Go", lambda: clicks.append(True))

    assert clicks == []
    assert surface.of_kind("button")[0].enabled is False


def test_failing_gate_blocks_action_and_later_widgets(surface, state):
    """Test a failing check disables the action and everything after it"""
    target = {"value": 1}
    clicks = []

    def action():
        target["value"] = 2

    surface.click("Select part")
    dependency_button(surface, state, "Apply", "Select part", action, lambda: False)

    surface.click("Next")
    button(surface, state, "Next", lambda: clicks.append(True))
    text_field(surface, state, 1.0, lambda v: None)

    assert target["value"] == 1
    assert state.error_flag is True

    glyph = surface.of_kind("label")[0]
    assert glyph.text == settings.GLYPH_FAILURE
    assert glyph.style is LabelStyle.ALERT

    assert clicks == []
    assert surface.of_kind("button")[1].enabled is False
    assert surface.of_kind("text_box")[0].enabled is False


def test_passing_gate_clears_error_flag(surface, state):
    """Test a satisfied check runs the action and resolves the flag"""
    clicks = []
    state.error_flag = True
    surface.click("Apply")

    dependency_button(surface, state, "Apply", "Select part", lambda: clicks.append(True), lambda: True)

    assert clicks == [True]
    assert state.error_flag is False
    glyph = surface.of_kind("label")[0]
    assert glyph.text == settings.GLYPH_SUCCESS
    assert glyph.style is LabelStyle.CONFIRM
    assert glyph.rect.x == settings.GLYPH_X


def test_gate_caption_follows_check(surface, state):
    """Test the caption switches between ok and failure text"""
    dependency_button(surface, state, "Apply", "Select part", None, lambda: True)
    dependency_button(surface, state, "Apply", "Select part", None, lambda: False)

    captions = [call.text for call in surface.of_kind("button")]
    assert captions == ["Apply", "Select part"]


def test_gate_status_reflects_post_click_check(surface, state):
    """Test the glyph shows the check as it is after the click"""
    resources = {"available": True}

    def consume():
        resources["available"] = False

    surface.click("Use")
    dependency_button(surface, state, "Use", "Nothing left", consume, lambda: resources["available"])

    assert state.error_flag is True
    assert surface.of_kind("label")[0].text == settings.GLYPH_FAILURE


def test_second_gate_cannot_clear_first_failure(surface, state):
    """Test the flag stays set while any gate in the pass fails"""
    dependency_button(surface, state, "A", "A missing", None, lambda: False)
    dependency_button(surface, state, "B", "B missing", None, lambda: True)

    assert state.error_flag is True
    assert surface.of_kind("button")[1].enabled is False


def test_error_flag_persists_until_gate_clears(surface, state):
    """Test widgets before a gate stay disabled from the previous pass"""
    state.error_flag = True

    label(surface, state, "before")
    dependency_button(surface, state, "ok", "fail", None, lambda: True)
    label(surface, state, "after")

    labels = {call.text: call.enabled for call in surface.of_kind("label")}
    assert labels["before"] is False
    assert labels["after"] is True


def test_separator(surface, state):
    """Test the separator spans the panel and honours the error flag"""
    state.error_flag = True

    horizontal_separator(surface, state, height=4)

    call = surface.of_kind("separator")[0]
    assert call.rect == Rect(settings.SEPARATOR_X, settings.TOP_MARGIN, settings.SEPARATOR_WIDTH, 4)
    assert call.enabled is False


def test_scroll_view(surface, state):
    """Test the scroll region geometry"""
    begin_scroll_view(surface, 300, 900, width=400)
    end_scroll_view(surface)

    begin, end = surface.calls
    assert begin.kind == "begin_scroll"
    assert begin.rect == Rect(10, 30, 380, 300)
    assert surface.content_size == (360, 900)
    assert end.kind == "end_scroll"
    assert state.cursor_index == 0
