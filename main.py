#!/usr/bin/env python3
"""
Property Inspector - Demo Entry Point

Opens a window with an inspector editing a demo light object.
"""

import logging
from dataclasses import dataclass, field

import imgui
import moderngl_window as mglw
import numpy as np
from pyrr import Vector3

from inspectorlib import (
    WINDOW_SIZE, ASPECT_RATIO, GL_VERSION, WINDOW_TITLE, RESIZABLE, CLEAR_COLOR, UI_THEME,
    INSPECTOR_WIDTH, INSPECTOR_VIEW_HEIGHT,
    Color, InspectorWindow, SubEditorRouter,
)
from inspectorlib.ui.imgui_surface import ImguiSurface
from inspectorlib.ui.menus.color_editor import ColorEditorWindow
from inspectorlib.ui.theme import ThemeManager
from inspectorlib.ui.ui_manager import UIManager


logger = logging.getLogger(__name__)

THEME_NAMES = list(ThemeManager.BUILTIN_THEMES)


@dataclass
class DemoLight:
    """Object edited by the demo inspector."""

    name: str = "Key Light"
    position: Vector3 = field(default_factory=lambda: Vector3([5.0, 10.0, 5.0]))
    uv_offset: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0]))
    color: Color = Color(1.0, 0.95, 0.8)
    intensity: float = 1.0
    shadow_map_size: np.uint32 = np.uint32(2048)
    casts_shadow: bool = True


class InspectorDemo(mglw.WindowConfig):
    """Demo window hosting the inspector"""

    gl_version = GL_VERSION
    title = WINDOW_TITLE
    window_size = WINDOW_SIZE
    aspect_ratio = ASPECT_RATIO
    resizable = RESIZABLE

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.ui_manager = UIManager(self.wnd.size, theme_name=UI_THEME)

        # Sub-editors
        self.router = SubEditorRouter(on_resume=self._on_edit_finished)
        self.color_editor = ColorEditorWindow()
        self.router.register(ColorEditorWindow.EDITOR_KEY, self.color_editor.open)

        self.inspector = InspectorWindow(
            ImguiSurface(self.ui_manager.theme_manager),
            router=self.router,
        )
        self.light = DemoLight()
        self.inspector.set_target(self.light)

        # Editing is blocked until a shadow map is assigned (toggled in the Scene window)
        self.shadow_map_ready = False
        self.theme_index = THEME_NAMES.index(UI_THEME)
        self.bake_count = 0
        self.inspector.add_dependency(
            "Bake shadows",
            "Shadow map missing",
            self._bake_shadows,
            lambda: self.shadow_map_ready,
        )

    def _bake_shadows(self) -> None:
        self.bake_count += 1
        logger.info("Baked shadows for '%s' (%d)", self.light.name, self.bake_count)

    def _on_edit_finished(self, window) -> None:
        logger.info("Sub-editor finished, resuming '%s'", window)
        imgui.set_window_focus_labeled(window)

    def on_render(self, time, frametime):
        """
        Render a frame.

        Args:
            time: Total elapsed time (seconds)
            frametime: Time since last frame (seconds)
        """
        self.ctx.clear(*CLEAR_COLOR)
        self.ui_manager.start_frame()

        imgui.set_next_window_position(20, 20, imgui.ONCE)
        imgui.set_next_window_size(INSPECTOR_WIDTH, INSPECTOR_VIEW_HEIGHT + 60, imgui.ONCE)
        expanded, _ = imgui.begin(self.inspector.title)
        if expanded:
            self.inspector.draw()
        imgui.end()

        imgui.set_next_window_position(INSPECTOR_WIDTH + 40, 20, imgui.ONCE)
        imgui.begin("Scene")
        _, self.shadow_map_ready = imgui.checkbox("Shadow map assigned", self.shadow_map_ready)
        changed, self.theme_index = imgui.combo("Theme", self.theme_index, THEME_NAMES)
        if changed:
            self.ui_manager.theme_manager.switch_theme(THEME_NAMES[self.theme_index])
        imgui.end()

        self.color_editor.draw()
        self.router.dispatch()

        self.ui_manager.render()

    def on_mouse_position_event(self, x: int, y: int, dx: int, dy: int):
        self.ui_manager.handle_mouse_position(x, y)

    def on_mouse_drag_event(self, x: int, y: int, dx: int, dy: int):
        self.ui_manager.handle_mouse_position(x, y)

    def on_mouse_press_event(self, x: int, y: int, button: int):
        self.ui_manager.handle_mouse_position(x, y)
        self.ui_manager.handle_mouse_button(button, True)

    def on_mouse_release_event(self, x: int, y: int, button: int):
        self.ui_manager.handle_mouse_position(x, y)
        self.ui_manager.handle_mouse_button(button, False)

    def on_mouse_scroll_event(self, x_offset: float, y_offset: float):
        self.ui_manager.handle_mouse_scroll(x_offset, y_offset)

    def on_key_event(self, key, action, modifiers):
        keys = self.wnd.keys
        if action == keys.ACTION_PRESS:
            self.ui_manager.handle_key(key, True)
        elif action == keys.ACTION_RELEASE:
            self.ui_manager.handle_key(key, False)

    def on_unicode_char_entered(self, char: str):
        self.ui_manager.handle_character(char)

    def on_resize(self, width: int, height: int):
        self.ui_manager.resize(width, height)

    def on_close(self):
        self.ui_manager.shutdown()


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    InspectorDemo.run()
