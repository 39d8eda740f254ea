"""Inspector windows and sub-editor windows."""

from .inspector_window import InspectorWindow, Dependency

__all__ = [
    "InspectorWindow",
    "Dependency",
]
