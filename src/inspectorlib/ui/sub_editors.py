"""
Sub-Editor Hand-off

Values the inspector cannot edit inline (colors, opaque composites) are
handed to external sub-editors as EditRequest continuations. The router
queues requests and delivers them to the sub-editor registered for their
key. A sub-editor finishes by completing the request in one of its own
later passes, which writes the value back into the edited object.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional


logger = logging.getLogger(__name__)


class SubEditorError(RuntimeError):
    """Raised when an edit request is used incorrectly."""


@dataclass
class EditRequest:
    """
    Continuation handed to a sub-editor.

    Never completing a request is a valid outcome (the edit was abandoned).
    """

    editor: str
    initial_value: Any
    on_complete: Callable[[Any], None]
    window: Any = None   # Token of the window that started the edit
    member: str = ""
    finished: bool = False
    resume: Optional[Callable[[Any], None]] = field(default=None, repr=False)

    def complete(self, value: Any) -> None:
        """
        Deliver the edited value back to the originating object.

        Raises:
            SubEditorError: If the request was already completed or cancelled
        """
        if self.finished:
            raise SubEditorError(f"Edit request for '{self.member}' already finished")
        self.finished = True
        self.on_complete(value)
        if self.resume is not None:
            self.resume(self.window)

    def cancel(self) -> None:
        """Abandon the edit without touching the object."""
        self.finished = True


class SubEditorRouter:
    """Routes edit requests to registered sub-editors."""

    def __init__(self, on_resume: Optional[Callable[[Any], None]] = None):
        """
        Initialize router.

        Args:
            on_resume: Called with the window token after a request completes
        """
        self.on_resume = on_resume
        self._editors: Dict[str, Callable[[EditRequest], None]] = {}
        self._pending: Deque[EditRequest] = deque()

    def register(self, editor: str, handler: Callable[[EditRequest], None]) -> None:
        """
        Register a sub-editor.

        Args:
            editor: Key used by EditRequest.editor
            handler: Receives each request for this editor
        """
        self._editors[editor] = handler

    def submit(self, request: EditRequest) -> None:
        """Queue a request for the next dispatch()."""
        request.resume = self._resume
        self._pending.append(request)
        logger.info("Queued '%s' edit for member '%s'", request.editor, request.member)

    def dispatch(self) -> int:
        """
        Deliver queued requests to their sub-editors.

        Returns:
            Number of requests delivered
        """
        delivered = 0
        while self._pending:
            request = self._pending.popleft()
            handler = self._editors.get(request.editor)
            if handler is None:
                logger.warning("No sub-editor registered for '%s', dropping edit of '%s'", request.editor, request.member)
                request.cancel()
                continue
            handler(request)
            delivered += 1
        return delivered

    @property
    def pending(self) -> List[EditRequest]:
        return list(self._pending)

    def _resume(self, window: Any) -> None:
        if self.on_resume is not None:
            self.on_resume(window)
