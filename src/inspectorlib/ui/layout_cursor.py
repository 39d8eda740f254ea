"""
Layout Cursor

Tracks the vertical stacking position of widgets across one render pass.
"""

from __future__ import annotations

from typing import NamedTuple

from ..config import settings


class Rect(NamedTuple):
    """Widget rectangle in scroll-view coordinates."""

    x: float
    y: float
    width: float
    height: float


class LayoutCursor:
    """
    Row counter for one render pass.

    The cursor only moves forward during a pass. Resetting is the caller's
    job and happens once, before the pass starts.
    """

    def __init__(
        self,
        row_height: float = settings.ROW_HEIGHT,
        top_margin: float = settings.TOP_MARGIN,
    ):
        """
        Initialize cursor.

        Args:
            row_height: Vertical distance between rows (pixels)
            top_margin: Offset of row 0 (pixels)
        """
        self.row_height = row_height
        self.top_margin = top_margin
        self.index = 0

    def reset(self) -> None:
        """Move back to row 0 (start of a new pass)."""
        self.index = 0

    def advance(self) -> int:
        """
        Claim the current row and move to the next one.

        Returns:
            Index of the claimed row
        """
        index = self.index
        self.index += 1
        return index

    def row_y(self, index: int) -> float:
        """Vertical slot of a row."""
        return index * self.row_height + self.top_margin

    def row_rect(
        self,
        index: int,
        width: float = settings.LABEL_WIDTH,
        height: float = settings.WIDGET_HEIGHT,
    ) -> Rect:
        """Rectangle of a row in the left column."""
        return Rect(settings.LEFT_COLUMN_X, self.row_y(index), width, height)

    def paired_rect(
        self,
        index: int,
        width: float = settings.PAIRED_FIELD_WIDTH,
        height: float = settings.WIDGET_HEIGHT,
        offset: float = 0,
    ) -> Rect:
        """Rectangle of a control in the right column, next to a label."""
        return Rect(settings.RIGHT_COLUMN_X + offset, self.row_y(index), width, height)

    @property
    def content_height(self) -> float:
        """Height covered by the rows claimed so far."""
        return self.row_y(self.index)
