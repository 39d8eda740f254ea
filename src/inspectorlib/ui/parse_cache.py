"""
Parse Cache

Remembers text that failed to parse, per field row, so a user typing an
intermediate value such as "-" or "1e" keeps seeing their input instead of
the re-formatted previous value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


_NO_ANCHOR = object()


@dataclass
class _PendingText:
    text: str
    anchor: Any  # Authoritative value the text was typed against


class ParseCache:
    """Pending raw text keyed by cursor index."""

    def __init__(self):
        self._entries: Dict[int, _PendingText] = {}

    def get(self, index: int, anchor: Any = _NO_ANCHOR) -> Optional[str]:
        """
        Get the pending text of a row.

        Args:
            index: Cursor index of the field
            anchor: Current authoritative value. If given and different from
                the value the text was typed against, the stale entry is
                dropped.

        Returns:
            Pending text, or None if the row holds no unparsed input
        """
        entry = self._entries.get(index)
        if entry is None:
            return None
        if anchor is not _NO_ANCHOR and not _same_value(entry.anchor, anchor):
            del self._entries[index]
            return None
        return entry.text

    def set(self, index: int, text: str, anchor: Any = None) -> None:
        """Store unparsed text for a row."""
        self._entries[index] = _PendingText(text, anchor)

    def clear(self, index: int) -> None:
        """Forget the pending text of a row."""
        self._entries.pop(index, None)

    def reset(self) -> None:
        """Forget every pending text (e.g. the edited object changed)."""
        self._entries.clear()

    def __contains__(self, index: int) -> bool:
        return index in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _same_value(a: Any, b: Any) -> bool:
    if type(a) is not type(b):
        return False
    return bool(a == b)
