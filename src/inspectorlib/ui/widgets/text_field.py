"""
Typed Text Field

A text box bound to a typed value. Text that does not parse is kept in the
parse cache and shown again on the next pass, while the previous value is
committed, so invalid input never reaches the edited object.
"""

import logging
from typing import Any, Callable, Optional

from ...config import settings
from ...core.parsing import ParseError, ValueFamily, format_literal, parse_literal, value_family, zero_value
from ..layout_cursor import Rect
from ..render_state import RenderState
from ..surface import DrawingSurface


logger = logging.getLogger(__name__)


def text_field(
    surface: DrawingSurface,
    state: RenderState,
    default_value: Any,
    on_commit: Callable[[Any], None],
    rect: Optional[Rect] = None,
    value_type: Optional[type] = None,
) -> int:
    """
    Draw a text field editing a typed value.

    Booleans are drawn as a toggle instead of a text box. Every call commits
    exactly once: the parsed value, the previous value when the text is
    invalid, or the type's zero value when conversion fails unexpectedly.

    Args:
        surface: Drawing surface
        state: Window render state
        default_value: Current (authoritative) value
        on_commit: Receives the value to store
        rect: Explicit rectangle (defaults to the current row)
        value_type: Target type (defaults to type(default_value))

    Returns:
        Cursor index of the field
    """
    index = state.cursor.advance()
    rect = rect or state.cursor.row_rect(index, settings.TEXT_FIELD_WIDTH)
    value_type = value_type or type(default_value)
    surface.set_enabled(state.interactive)

    try:
        result = _edit(surface, state, index, rect, default_value, value_type)
    except Exception as exc:
        logger.debug("Text field %d could not convert %r to %s: %s", index, default_value, value_type, exc)
        result = zero_value(value_type)

    on_commit(result)
    return index


def _edit(
    surface: DrawingSurface,
    state: RenderState,
    index: int,
    rect: Rect,
    default_value: Any,
    value_type: type,
) -> Any:
    if value_family(value_type) is ValueFamily.BOOLEAN:
        return value_type(surface.draw_toggle(rect, bool(default_value), settings.TOGGLE_LABEL))

    shown = state.parse_cache.get(index, anchor=default_value)
    if shown is None:
        shown = format_literal(default_value)

    raw = surface.draw_text_box(rect, shown)
    try:
        value = parse_literal(raw, value_type)
    except ParseError:
        state.parse_cache.set(index, raw, anchor=default_value)
        return default_value

    state.parse_cache.clear(index)
    return value
