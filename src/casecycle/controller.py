"""
Editor integration: the one place where editor events reach a case cycle session.

The editor supplies an `EditorPort` for writing converted text back, reverting that
write, and showing a notification. The controller owns the `Session`, guards against
re-entrant invocations (applying an edit usually fires selection-change events of its
own), and only moves the style cursor after the editor confirms the edit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Protocol

from casecycle.cycle import Direction
from casecycle.orchestrator import ConversionOrchestrator, ConversionResult
from casecycle.session import Session
from casecycle.variants import CaseVariant, normalize_case_cycle

log = logging.getLogger(__name__)

UNDO_ACTION = "Undo"


class BufferHistoryEvent(str, Enum):
    """Undo or redo of the editor's text buffer."""

    undo = "undo"
    redo = "redo"


class EditorPort(Protocol):
    async def apply_edits(self, texts: Sequence[str]) -> bool:
        """Replace each selection with the corresponding text. Returns success."""
        ...

    async def revert_last_edit(self) -> None: ...

    async def show_notification(self, message: str, actions: Sequence[str]) -> str | None:
        """Show a message and return the chosen action, if any."""
        ...


def is_selection_empty(spans: Iterable[tuple[int, int]]) -> bool:
    """True if there are no selections or every selection spans zero characters."""
    return all(start == end for start, end in spans)


class CaseCycleController:
    def __init__(self, editor: EditorPort, case_cycle: Iterable[str] | None = None) -> None:
        self.editor: EditorPort = editor
        self.session: Session = Session()
        self.order: tuple[CaseVariant, ...] = normalize_case_cycle(case_cycle)
        self._in_flight: bool = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def current_variant(self) -> CaseVariant:
        return self.session.current_variant

    def set_case_cycle(self, names: Iterable[str] | None) -> None:
        """Apply a changed cycle configuration."""
        self.order = normalize_case_cycle(names)

    async def invoke(
        self, direction: Direction, selections: Sequence[str]
    ) -> ConversionResult | None:
        """
        Convert all selections to the next visibly distinct style. Returns the
        committed result, or `None` if nothing was committed (no selections,
        another invocation running, or the editor rejected the edit).

        The notification is shown after the invocation completes, so reverting
        the edit from it arrives as an ordinary buffer undo event.
        """
        if self._in_flight:
            log.debug("Ignoring invocation while another is in flight")
            return None

        self._in_flight = True
        try:
            orchestrator = ConversionOrchestrator(self.session, self.order)
            result = orchestrator.resolve(direction, selections)
            if result is None:
                return None

            if not await self.editor.apply_edits(result.per_selection_text):
                log.debug("Editor did not apply conversion to %s", result.variant.value)
                return None
            orchestrator.commit(result)
        finally:
            self._in_flight = False

        choice = await self.editor.show_notification(
            f"Converted to {result.variant.value}", [UNDO_ACTION]
        )
        if choice == UNDO_ACTION:
            await self.editor.revert_last_edit()
        return result

    def on_selection_changed(self, is_empty: bool) -> None:
        if is_empty and not self._in_flight:
            self.session.reset()

    def on_buffer_history(self, event: BufferHistoryEvent) -> None:
        if self._in_flight:
            return
        if event == BufferHistoryEvent.undo:
            self.session.history.undo()
        else:
            self.session.history.redo()

    def dispose(self) -> None:
        self.session.reset()
