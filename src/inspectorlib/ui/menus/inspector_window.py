"""
Inspector Window

Host pass driver: runs one inspector pass per frame for the selected object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from ...config import settings
from ...core.type_registry import TypeRegistry
from ..render_state import RenderState
from ..sub_editors import SubEditorRouter
from ..surface import DrawingSurface
from ..widgets import (
    begin_scroll_view,
    dependency_button,
    end_scroll_view,
    horizontal_separator,
    label,
    render_object,
)


@dataclass
class Dependency:
    """Precondition shown as a gated button above the object's members."""

    ok_text: str
    fail_text: str
    on_click: Optional[Callable[[], None]]
    check: Callable[[], bool]


class InspectorWindow:
    """Inspector panel for editing the members of the selected object."""

    def __init__(
        self,
        surface: DrawingSurface,
        router: Optional[SubEditorRouter] = None,
        registry: Optional[TypeRegistry] = None,
        title: str = settings.INSPECTOR_TITLE,
        width: float = settings.INSPECTOR_WIDTH,
        view_height: float = settings.INSPECTOR_VIEW_HEIGHT,
    ):
        """
        Initialize inspector window.

        Args:
            surface: Drawing surface the window renders through
            router: Sub-editor router for colors and composites (optional)
            registry: Type registry (defaults to the built-in types)
            title: Window title, also used as the window token for sub-editors
            width: Window width in pixels
            view_height: Visible height of the scroll view
        """
        self.surface = surface
        self.router = router
        self.registry = registry
        self.title = title
        self.width = width
        self.view_height = view_height
        self.show = True

        self.state = RenderState()
        self.target: Optional[Any] = None
        self.dependencies: List[Dependency] = []

        # Content height measured by the previous pass
        self._content_height = view_height

    def set_target(self, target: Any) -> None:
        """Select the object to edit. Pending unparsed text is discarded."""
        if target is not self.target:
            self.state.parse_cache.reset()
        self.target = target

    def add_dependency(
        self,
        ok_text: str,
        fail_text: str,
        on_click: Optional[Callable[[], None]],
        check: Callable[[], bool],
    ) -> Dependency:
        """Add a precondition gate drawn before the members."""
        dependency = Dependency(ok_text, fail_text, on_click, check)
        self.dependencies.append(dependency)
        return dependency

    def draw(self) -> int:
        """
        Run one pass.

        Returns:
            Number of members rendered
        """
        if not self.show:
            return 0

        self.state.begin_pass()
        begin_scroll_view(self.surface, self.view_height, self._content_height, self.width)

        for dependency in self.dependencies:
            dependency_button(
                self.surface,
                self.state,
                dependency.ok_text,
                dependency.fail_text,
                dependency.on_click,
                dependency.check,
            )
        if self.dependencies:
            horizontal_separator(self.surface, self.state)

        rendered = 0
        if self.target is None:
            label(self.surface, self.state, settings.NO_TARGET_TEXT)
        else:
            rendered = render_object(
                self.surface,
                self.state,
                self.target,
                router=self.router,
                registry=self.registry,
                window=self.title,
            )

        end_scroll_view(self.surface)
        self._content_height = max(self.view_height, self.state.cursor.content_height)
        return rendered

    @property
    def content_height(self) -> float:
        return self._content_height
