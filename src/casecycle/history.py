"""Undo/redo history of style transitions."""

from __future__ import annotations

from dataclasses import dataclass, field

from casecycle.variants import CaseVariant


@dataclass
class CycleState:
    """
    The current style and its history. `history_stack` is never empty and its top
    is always the current style; the bottom is `CaseVariant.original`.
    """

    history_stack: list[CaseVariant] = field(default_factory=lambda: [CaseVariant.original])
    redo_stack: list[CaseVariant] = field(default_factory=list)

    @property
    def current_variant(self) -> CaseVariant:
        return self.history_stack[-1]


class HistoryManager:
    """
    Undo and redo over a `CycleState`. Operations whose stack is empty are no-ops.
    """

    def __init__(self, state: CycleState) -> None:
        self.state: CycleState = state

    @property
    def current_variant(self) -> CaseVariant:
        return self.state.current_variant

    def push_variant(self, variant: CaseVariant) -> None:
        self.state.history_stack.append(variant)
        self.state.redo_stack.clear()

    def undo(self) -> bool:
        """Step back one style. Returns whether anything changed."""
        if len(self.state.history_stack) <= 1:
            return False
        self.state.redo_stack.append(self.state.history_stack.pop())
        return True

    def redo(self) -> bool:
        """Re-apply the last undone style. Returns whether anything changed."""
        if not self.state.redo_stack:
            return False
        self.state.history_stack.append(self.state.redo_stack.pop())
        return True

    def reset(self) -> None:
        self.state.history_stack[:] = [CaseVariant.original]
        self.state.redo_stack.clear()
