"""
The state of one continuous "selection is active" period.

A `Session` bundles the selection records and the cycle/history state. It is owned
by the caller and passed into each conversion, so there is no module-level state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from casecycle.history import CycleState, HistoryManager
from casecycle.selection_state import SelectionStateTracker
from casecycle.variants import CaseVariant

log = logging.getLogger(__name__)


@dataclass
class Session:
    tracker: SelectionStateTracker = field(default_factory=SelectionStateTracker)
    cycle_state: CycleState = field(default_factory=CycleState)

    def __post_init__(self) -> None:
        self.history: HistoryManager = HistoryManager(self.cycle_state)

    @property
    def current_variant(self) -> CaseVariant:
        return self.cycle_state.current_variant

    def reset(self) -> None:
        """Forget all selection records and return to the original style."""
        log.debug("Resetting case cycle session")
        self.tracker.clear()
        self.history.reset()
