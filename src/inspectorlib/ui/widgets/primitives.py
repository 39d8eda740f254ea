"""
Primitive Widgets

Label, button, dependency-gated button, separator and scroll region.

Every widget draws at the current cursor row (or at an explicit rect),
honours the window's error flag and returns the cursor index it used.
"""

from typing import Callable, Optional

from ...config import settings
from ..layout_cursor import Rect
from ..render_state import RenderState
from ..surface import DrawingSurface, LabelStyle


def label(
    surface: DrawingSurface,
    state: RenderState,
    text: str,
    rect: Optional[Rect] = None,
    advance: bool = True,
) -> int:
    """
    Draw static text.

    With advance=False the label reuses the current index, so a label and
    the control drawn after it return the same index. Member rows rely on
    this to keep one index per scalar member.

    Args:
        surface: Drawing surface
        state: Window render state
        text: Text to show
        rect: Explicit rectangle (defaults to the current row)
        advance: False to share the row with the control drawn next

    Returns:
        Cursor index of the row
    """
    index = state.cursor.advance() if advance else state.cursor.index
    surface.set_enabled(state.interactive)
    surface.draw_label(rect or state.cursor.row_rect(index), text)
    return index


def button(
    surface: DrawingSurface,
    state: RenderState,
    text: str,
    on_click: Optional[Callable[[], None]],
    rect: Optional[Rect] = None,
) -> int:
    """
    Draw a button and run on_click when it is clicked.

    Args:
        surface: Drawing surface
        state: Window render state
        text: Button caption
        on_click: Click callback (None makes the button inert)
        rect: Explicit rectangle (defaults to the current row)

    Returns:
        Cursor index of the row
    """
    index = state.cursor.advance()
    enabled = state.interactive
    surface.set_enabled(enabled)
    clicked = surface.draw_button(rect or state.cursor.row_rect(index, settings.BUTTON_WIDTH), text)
    if clicked and enabled and on_click is not None:
        on_click()
    return index


def dependency_button(
    surface: DrawingSurface,
    state: RenderState,
    ok_text: str,
    fail_text: str,
    on_click: Optional[Callable[[], None]],
    check: Callable[[], bool],
    rect: Optional[Rect] = None,
    glyph_rect: Optional[Rect] = None,
) -> int:
    """
    Draw a button whose availability depends on a precondition.

    The button is usable only while check() passes and no earlier gate
    failed in this pass. After click handling, check() is evaluated again
    and the result drives the window-wide error flag and the status glyph
    ("!" on failure, a check mark on success).

    NOTE: the error flag is not scoped to this button. A failing check
    disables every widget rendered after it, in this pass and later ones,
    until a gate clears the flag.

    Args:
        surface: Drawing surface
        state: Window render state
        ok_text: Caption while the check passes
        fail_text: Caption while the check fails
        on_click: Click callback
        check: Precondition, evaluated every render
        rect: Explicit button rectangle
        glyph_rect: Explicit status glyph rectangle

    Returns:
        Cursor index of the row
    """
    index = state.cursor.advance()

    satisfied = bool(check())
    enabled = satisfied and state.gate_failures == 0
    surface.set_enabled(enabled)
    clicked = surface.draw_button(
        rect or state.cursor.row_rect(index, settings.BUTTON_WIDTH),
        ok_text if satisfied else fail_text,
    )
    if clicked and enabled and on_click is not None:
        on_click()

    # Status reflects the state after the click
    satisfied = bool(check())
    state.record_gate(satisfied)

    surface.set_enabled(True)
    surface.draw_label(
        glyph_rect or Rect(settings.GLYPH_X, state.cursor.row_y(index), settings.GLYPH_WIDTH, settings.WIDGET_HEIGHT),
        settings.GLYPH_SUCCESS if satisfied else settings.GLYPH_FAILURE,
        LabelStyle.CONFIRM if satisfied else LabelStyle.ALERT,
    )
    return index


def horizontal_separator(
    surface: DrawingSurface,
    state: RenderState,
    height: float = settings.SEPARATOR_HEIGHT,
    rect: Optional[Rect] = None,
) -> int:
    """Draw a decorative divider line across the panel."""
    index = state.cursor.advance()
    surface.set_enabled(state.interactive)
    surface.draw_separator(
        rect or Rect(settings.SEPARATOR_X, state.cursor.row_y(index), settings.SEPARATOR_WIDTH, height)
    )
    return index


def begin_scroll_view(
    surface: DrawingSurface,
    view_height: float,
    content_height: float,
    width: float = settings.INSPECTOR_WIDTH,
) -> None:
    """
    Open the scroll region that hosts a pass.

    Args:
        surface: Drawing surface
        view_height: Visible height of the region
        content_height: Height of the scrollable content
        width: Width of the hosting window
    """
    surface.begin_scroll_region(
        Rect(settings.SCROLL_VIEW_X, settings.SCROLL_VIEW_Y, width - settings.SCROLL_VIEW_MARGIN, view_height),
        (width - settings.SCROLL_CONTENT_MARGIN, content_height),
    )


def end_scroll_view(surface: DrawingSurface) -> None:
    """Close the scroll region."""
    surface.end_scroll_region()
