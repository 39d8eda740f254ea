"""
InspectorLib - Reflective Property Inspector

Immediate-mode property editor that discovers the editable members of any
object and renders one typed widget per member.
"""

# Configuration
from .config.settings import *

# Core
from .core import (
    Color,
    ValueKind,
    TypeRegistry,
    MemberDescriptor,
    discover_members,
    default_registry,
)

# UI
from .ui import (
    DrawingSurface,
    LabelStyle,
    Rect,
    RenderState,
    EditRequest,
    SubEditorRouter,
    InspectorWindow,
)
from .ui.widgets import (
    label,
    button,
    dependency_button,
    horizontal_separator,
    text_field,
    render_object,
)

__version__ = "0.1.0"
