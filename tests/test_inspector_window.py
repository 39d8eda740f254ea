"""Tests for the inspector window pass driver"""

from dataclasses import dataclass

from inspectorlib.config import settings
from inspectorlib.ui.menus import InspectorWindow


@dataclass
class Body:
    mass: float = 2.0
    name: str = "crate"


def test_no_target(surface):
    """Test an empty inspector shows a placeholder"""
    window = InspectorWindow(surface)

    rendered = window.draw()

    assert rendered == 0
    assert [call.text for call in surface.of_kind("label")] == [settings.NO_TARGET_TEXT]


def test_pass_is_wrapped_in_scroll_view(surface):
    """Test every pass opens and closes the scroll region"""
    window = InspectorWindow(surface, width=400, view_height=300)
    window.set_target(Body())

    window.draw()

    assert surface.calls[0].kind == "begin_scroll"
    assert surface.calls[-1].kind == "end_scroll"
    assert surface.content_size == (360, 300)


def test_cursor_resets_every_pass(surface):
    """Test widget positions are identical across passes"""
    window = InspectorWindow(surface)
    window.set_target(Body())

    window.draw()
    first = [call.rect for call in surface.calls]
    surface.calls.clear()
    window.draw()

    assert [call.rect for call in surface.calls] == first
    assert window.state.pass_count == 2


def test_edits_reach_target(surface):
    """Test typed values are written into the selected object"""
    body = Body()
    window = InspectorWindow(surface)
    window.set_target(body)
    surface.type_at(200, 10, "4.5")
    surface.type_at(200, 35, "barrel")

    assert window.draw() == 2
    assert body.mass == 4.5
    assert body.name == "barrel"


def test_new_target_discards_pending_text(surface):
    """Test unparsed text does not follow the selection"""
    window = InspectorWindow(surface)
    window.set_target(Body())
    surface.type_at(200, 10, "4.5x")
    window.draw()
    assert len(window.state.parse_cache) == 1

    window.set_target(Body())

    assert len(window.state.parse_cache) == 0


def test_same_target_keeps_pending_text(surface):
    """Test reselecting the current object keeps pending text"""
    body = Body()
    window = InspectorWindow(surface)
    window.set_target(body)
    surface.type_at(200, 10, "4.5x")
    window.draw()

    window.set_target(body)

    assert len(window.state.parse_cache) == 1


def test_failing_dependency_disables_members(surface):
    """Test a failing dependency blocks editing below it"""
    body = Body()
    ready = {"value": False}
    window = InspectorWindow(surface)
    window.set_target(body)
    window.add_dependency("Simulate", "Add a collider", None, lambda: ready["value"])

    window.draw()

    assert window.state.error_flag is True
    assert all(not call.enabled for call in surface.of_kind("text_box"))
    assert surface.of_kind("separator")[0].enabled is False

    ready["value"] = True
    surface.calls.clear()
    window.draw()

    assert window.state.error_flag is False
    assert all(call.enabled for call in surface.of_kind("text_box"))


def test_members_follow_dependencies(surface):
    """Test gates and the separator come before the members"""
    window = InspectorWindow(surface)
    window.set_target(Body())
    window.add_dependency("Simulate", "Add a collider", None, lambda: True)

    window.draw()

    mass = surface.of_kind("text_box")[0]
    assert mass.rect.y == 10 + 2 * settings.ROW_HEIGHT


def test_content_height(surface):
    """Test the scroll content grows with the number of rows"""
    window = InspectorWindow(surface, view_height=20)
    window.set_target(Body())

    window.draw()

    assert window.content_height == 2 * settings.ROW_HEIGHT + settings.TOP_MARGIN


def test_hidden_window_draws_nothing(surface):
    """Test a hidden inspector skips its pass"""
    window = InspectorWindow(surface)
    window.set_target(Body())
    window.show = False

    assert window.draw() == 0
    assert surface.calls == []
