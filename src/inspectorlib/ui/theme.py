"""
ImGui Theme System

Manages visual styling of the inspector, including the colors of the
dependency status glyphs, with support for JSON-based customization.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Dict, Tuple

import imgui

from ..config.settings import DISABLED_ALPHA, THEMES_DIR


logger = logging.getLogger(__name__)

Color4 = Tuple[float, float, float, float]
Color3 = Tuple[float, float, float]


@dataclass
class ColorPalette:
    """Color palette for a theme."""

    # Primary colors
    primary: Color3 = (0.57, 0.77, 0.55)      # Sage green
    primary_dark: Color3 = (0.47, 0.67, 0.45)
    primary_light: Color3 = (0.67, 0.87, 0.65)

    # Background colors
    bg_primary: Color3 = (0.15, 0.15, 0.15)
    bg_secondary: Color3 = (0.20, 0.20, 0.20)
    bg_tertiary: Color3 = (0.25, 0.25, 0.25)

    # Text colors
    text_primary: Color3 = (0.95, 0.95, 0.95)
    text_disabled: Color3 = (0.50, 0.50, 0.50)

    # Status colors (dependency glyphs)
    success: Color3 = (0.35, 0.75, 0.35)
    error: Color3 = (0.85, 0.35, 0.35)

    border: Color3 = (0.40, 0.40, 0.40)


@dataclass
class ThemeConfig:
    """Complete theme configuration."""

    name: str = "sage_green"
    colors: ColorPalette = field(default_factory=ColorPalette)

    # Spacing and sizing
    frame_padding: float = 4.0
    item_spacing: float = 8.0
    frame_rounding: float = 3.0
    window_padding: float = 8.0
    window_rounding: float = 6.0

    # Transparency
    alpha: float = 1.0
    disabled_alpha: float = DISABLED_ALPHA

    @classmethod
    def from_dict(cls, data: Dict) -> ThemeConfig:
        """Load theme from dictionary (JSON compatible). Missing keys keep defaults."""
        colors_data = dict(data.get("colors", {}))
        for key, val in colors_data.items():
            if isinstance(val, list):
                colors_data[key] = tuple(val)
        colors = ColorPalette(**colors_data)

        known = {f.name for f in fields(cls)} - {"colors"}
        values = {key: val for key, val in data.items() if key in known}
        return cls(colors=colors, **values)

    def to_dict(self) -> Dict:
        """Convert theme to dictionary (JSON serializable)."""
        data = asdict(self)
        data["colors"] = {key: list(val) for key, val in data["colors"].items()}
        return data


class ThemeManager:
    """Manages ImGui themes and styling."""

    BUILTIN_THEMES = {
        "sage_green": ColorPalette(),
        "dark": ColorPalette(
            primary=(0.40, 0.40, 0.40),
            primary_dark=(0.30, 0.30, 0.30),
            primary_light=(0.50, 0.50, 0.50),
        ),
        "light": ColorPalette(
            primary=(0.60, 0.60, 0.60),
            primary_dark=(0.50, 0.50, 0.50),
            primary_light=(0.70, 0.70, 0.70),
            bg_primary=(0.95, 0.95, 0.95),
            bg_secondary=(0.90, 0.90, 0.90),
            bg_tertiary=(0.85, 0.85, 0.85),
            text_primary=(0.05, 0.05, 0.05),
            success=(0.15, 0.55, 0.15),
            error=(0.75, 0.15, 0.15),
        ),
    }

    def __init__(self, theme_name: str = "sage_green", apply: bool = True):
        """
        Initialize theme manager.

        Args:
            theme_name: Built-in theme name or JSON theme name
            apply: Push the theme into the ImGui style (needs an ImGui context)
        """
        self.current_theme = self.load_theme(theme_name)
        if apply:
            self.apply_theme(self.current_theme)

    def load_theme(self, theme_name: str) -> ThemeConfig:
        """
        Load theme from JSON or built-in.

        Args:
            theme_name: Theme name

        Returns:
            ThemeConfig instance
        """
        json_path = THEMES_DIR / f"{theme_name}.json"
        if json_path.exists():
            with open(json_path, "r") as f:
                data = json.load(f)
            return ThemeConfig.from_dict(data)

        if theme_name in self.BUILTIN_THEMES:
            return ThemeConfig(name=theme_name, colors=self.BUILTIN_THEMES[theme_name])

        logger.warning("Theme '%s' not found, using 'sage_green'", theme_name)
        return ThemeConfig(name="sage_green", colors=self.BUILTIN_THEMES["sage_green"])

    def apply_theme(self, theme: ThemeConfig) -> None:
        """
        Apply theme colors and styling to ImGui.

        Args:
            theme: ThemeConfig to apply
        """
        self.current_theme = theme
        style = imgui.get_style()

        colors = theme.colors
        style.colors[imgui.COLOR_WINDOW_BACKGROUND] = colors.bg_primary + (theme.alpha,)
        style.colors[imgui.COLOR_CHILD_BACKGROUND] = colors.bg_secondary + (theme.alpha,)
        style.colors[imgui.COLOR_BORDER] = colors.border + (1.0,)

        style.colors[imgui.COLOR_BUTTON] = colors.primary + (1.0,)
        style.colors[imgui.COLOR_BUTTON_HOVERED] = colors.primary_light + (1.0,)
        style.colors[imgui.COLOR_BUTTON_ACTIVE] = colors.primary_dark + (1.0,)

        style.colors[imgui.COLOR_TEXT] = colors.text_primary + (1.0,)
        style.colors[imgui.COLOR_TEXT_DISABLED] = colors.text_disabled + (1.0,)

        style.colors[imgui.COLOR_FRAME_BACKGROUND] = colors.bg_tertiary + (0.9,)
        style.colors[imgui.COLOR_FRAME_BACKGROUND_HOVERED] = colors.bg_primary + (1.0,)
        style.colors[imgui.COLOR_FRAME_BACKGROUND_ACTIVE] = colors.bg_tertiary + (1.0,)
        style.colors[imgui.COLOR_CHECK_MARK] = colors.primary_light + (1.0,)
        style.colors[imgui.COLOR_SEPARATOR] = colors.border + (1.0,)

        style.frame_padding = (theme.frame_padding, theme.frame_padding)
        style.item_spacing = (theme.item_spacing, theme.item_spacing)
        style.frame_rounding = theme.frame_rounding
        style.window_padding = (theme.window_padding, theme.window_padding)
        style.window_rounding = theme.window_rounding

    def switch_theme(self, theme_name: str) -> None:
        """Switch to a different theme."""
        self.apply_theme(self.load_theme(theme_name))

    def get_color(self, color_name: str) -> Color3:
        """
        Get a color from the current theme palette.

        Args:
            color_name: Name of color ("primary", "success", "error", etc.)

        Returns:
            RGB color tuple
        """
        colors = self.current_theme.colors
        return getattr(colors, color_name, colors.primary)
