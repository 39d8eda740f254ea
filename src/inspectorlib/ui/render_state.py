"""
Render State

Per-window state shared by every widget call of a render pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .layout_cursor import LayoutCursor
from .parse_cache import ParseCache


@dataclass
class RenderState:
    """
    State owned by one inspector window for its whole lifetime.

    The error flag is global to the window: once a dependency gate sets it,
    every widget rendered afterwards (in this pass and the following ones)
    is disabled until a gate clears it.
    """

    cursor: LayoutCursor = field(default_factory=LayoutCursor)
    parse_cache: ParseCache = field(default_factory=ParseCache)
    error_flag: bool = False
    gate_failures: int = 0   # Failing gates seen in the current pass
    pass_count: int = 0

    def begin_pass(self) -> None:
        """Reset per-pass bookkeeping. Called by the host before each pass."""
        self.cursor.reset()
        self.gate_failures = 0
        self.pass_count += 1

    def record_gate(self, satisfied: bool) -> None:
        """
        Update the error flag from a dependency gate's check.

        A passing gate cannot clear the failure of an earlier gate in the
        same pass.
        """
        if satisfied:
            self.error_flag = self.gate_failures > 0
        else:
            self.gate_failures += 1
            self.error_flag = True

    @property
    def cursor_index(self) -> int:
        return self.cursor.index

    @property
    def row_height(self) -> float:
        return self.cursor.row_height

    @property
    def interactive(self) -> bool:
        """True when input widgets are enabled."""
        return not self.error_flag
