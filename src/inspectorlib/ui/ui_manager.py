"""
ImGui UI Manager

Owns the ImGui context and OpenGL renderer of the demo host, feeds it the
window's input events and brackets each inspector frame.
"""

from __future__ import annotations

from typing import Tuple

import imgui
from imgui.integrations.opengl import ProgrammablePipelineRenderer

from .theme import ThemeManager


# moderngl_window reports buttons as 1 (left), 2 (right), 3 (middle)
_MOUSE_BUTTON_COUNT = 3


class UIManager:
    """ImGui context for the windows drawn by the inspector demo."""

    def __init__(self, window_size: Tuple[int, int], theme_name: str = "sage_green"):
        """
        Create the ImGui context and renderer.

        Must be called with a current OpenGL context.

        Args:
            window_size: Framebuffer size (width, height)
            theme_name: Theme applied to the ImGui style
        """
        imgui.create_context()
        io = imgui.get_io()
        io.display_size = window_size
        io.ini_file_name = None

        self.renderer = ProgrammablePipelineRenderer()
        self.theme_manager = ThemeManager(theme_name)

    def handle_mouse_position(self, x: float, y: float) -> None:
        imgui.get_io().mouse_pos = (x, y)

    def handle_mouse_button(self, button: int, pressed: bool) -> None:
        """
        Forward a mouse button event.

        Args:
            button: moderngl_window button number (1-based)
            pressed: True on press, False on release
        """
        index = button - 1
        if 0 <= index < _MOUSE_BUTTON_COUNT:
            imgui.get_io().mouse_down[index] = pressed

    def handle_mouse_scroll(self, x_offset: float, y_offset: float) -> None:
        io = imgui.get_io()
        io.mouse_wheel_h = x_offset
        io.mouse_wheel = y_offset

    def handle_key(self, key: int, pressed: bool) -> None:
        """Forward a key press/release used by text box editing."""
        keys_down = imgui.get_io().keys_down
        if 0 <= key < len(keys_down):
            keys_down[key] = pressed

    def handle_character(self, char: str) -> None:
        """Forward a typed character to the focused text box."""
        imgui.get_io().add_input_character(ord(char))

    def resize(self, width: int, height: int) -> None:
        imgui.get_io().display_size = (width, height)

    def start_frame(self) -> None:
        imgui.new_frame()

    def render(self) -> None:
        """End the ImGui frame and draw it into the current framebuffer."""
        imgui.render()
        self.renderer.render(imgui.get_draw_data())

    def shutdown(self) -> None:
        """Release the renderer's GL objects and the ImGui context."""
        self.renderer.shutdown()
        imgui.destroy_context()
