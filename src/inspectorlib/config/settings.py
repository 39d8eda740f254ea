"""
Inspector Configuration Settings

All configuration constants for the property inspector.
Modify these values to change layout and widget behavior.
"""

from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
THEMES_DIR = ASSETS_DIR / "config" / "themes"

# ============================================================================
# Demo Window Configuration
# ============================================================================

WINDOW_SIZE = (1280, 720)  # Width, Height
ASPECT_RATIO = 16 / 9
WINDOW_TITLE = "Property Inspector"
RESIZABLE = True

# OpenGL version (4.1 is max for macOS)
GL_VERSION = (4, 1)

# Background clear color (R, G, B)
CLEAR_COLOR = (0.1, 0.1, 0.15)

# ============================================================================
# Layout Cursor
# ============================================================================
#
# Every widget occupies one cursor row. The vertical slot of row N is
#   y = N * ROW_HEIGHT + TOP_MARGIN
# Paired widgets (label + control) share the label's row and place the
# control in the right-hand column.
# ============================================================================

ROW_HEIGHT = 25          # Vertical distance between cursor rows (pixels)
TOP_MARGIN = 10          # Offset of row 0 from the top of the scroll view
LEFT_COLUMN_X = 20       # X of labels and stand-alone widgets
RIGHT_COLUMN_X = 200     # X of controls paired with a label
WIDGET_HEIGHT = 20       # Default height of every row widget

# ----------------------------------------------------------------------------
# Widget Sizes
# ----------------------------------------------------------------------------

LABEL_WIDTH = 178
BUTTON_WIDTH = 200
TEXT_FIELD_WIDTH = 178
PAIRED_FIELD_WIDTH = 170      # Scalar text field next to a member label
EDIT_BUTTON_WIDTH = 50        # "Edit" button for colors and composites

# Vector coordinates are drawn side by side on the label's row
VECTOR_FIELD_WIDTH = 50
VECTOR3_FIELD_OFFSETS = (0, 60, 120)   # x, y, z relative to RIGHT_COLUMN_X
VECTOR2_FIELD_OFFSETS = (0, 85)        # x, y relative to RIGHT_COLUMN_X

# Dependency status glyph (drawn beside a gated button)
GLYPH_X = 240
GLYPH_WIDTH = 200

# Horizontal separator
SEPARATOR_X = 10
SEPARATOR_WIDTH = 400
SEPARATOR_HEIGHT = 10

# Scroll view: placed at (SCROLL_VIEW_X, SCROLL_VIEW_Y) inside the window,
# narrower than the window by SCROLL_VIEW_MARGIN, with content narrower still
SCROLL_VIEW_X = 10
SCROLL_VIEW_Y = 30
SCROLL_VIEW_MARGIN = 20
SCROLL_CONTENT_MARGIN = 40

# ============================================================================
# Widget Text
# ============================================================================

GLYPH_FAILURE = "!"
GLYPH_SUCCESS = "✓"
TOGGLE_LABEL = "Bool"
EDIT_BUTTON_TEXT = "Edit"
NO_TARGET_TEXT = "Nothing selected"

# ============================================================================
# Inspector Window
# ============================================================================

INSPECTOR_TITLE = "Inspector"
INSPECTOR_WIDTH = 400          # Window width (pixels)
INSPECTOR_VIEW_HEIGHT = 600    # Visible height of the scroll view

# Sub-editor windows
COLOR_EDITOR_TITLE = "Color"
COLOR_EDITOR_SIZE = (320, 160)

# ============================================================================
# UI Theme
# ============================================================================

UI_THEME = "sage_green"        # "sage_green", "dark", "light" or a JSON theme name
DISABLED_ALPHA = 0.5           # Alpha multiplier for disabled widgets
TEXT_BUFFER_LENGTH = 256       # Extra bytes of typing room in a text field buffer
