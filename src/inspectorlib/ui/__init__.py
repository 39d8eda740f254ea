"""
UI System

Immediate-mode inspector widgets, render state and the ImGui surface.
"""

from .layout_cursor import LayoutCursor, Rect
from .parse_cache import ParseCache
from .render_state import RenderState
from .surface import DrawingSurface, LabelStyle
from .sub_editors import EditRequest, SubEditorError, SubEditorRouter
from .menus import InspectorWindow

__all__ = [
    "LayoutCursor",
    "Rect",
    "ParseCache",
    "RenderState",
    "DrawingSurface",
    "LabelStyle",
    "EditRequest",
    "SubEditorError",
    "SubEditorRouter",
    "InspectorWindow",
]
