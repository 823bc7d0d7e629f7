"""
Drives one forward or backward invocation over all active selections.

The next style is resolved from the current one, every selection's original text is
converted to it, and if that leaves every selection looking exactly as it did, the
next style after that is tried instead. At most one full pass over the cycle order is
made, so an input that looks the same in every style still terminates.

Resolving and committing are separate steps so that an editor can apply the edit to
its buffer in between and only commit once the edit is in place:

    orchestrator = ConversionOrchestrator(session, order)
    result = orchestrator.resolve(Direction.forward, ["foo-bar", "baz"])
    if result is not None and apply_to_buffer(result.per_selection_text):
        orchestrator.commit(result)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from casecycle.cycle import Direction, next_variant
from casecycle.session import Session
from casecycle.transforms import convert_text
from casecycle.variants import CaseVariant

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """The style chosen for an invocation and the new text for each selection."""

    variant: CaseVariant
    per_selection_text: tuple[str, ...]
    candidates_tried: int = 1


class ConversionOrchestrator:
    def __init__(self, session: Session, order: Sequence[CaseVariant]) -> None:
        self.session: Session = session
        self.order: tuple[CaseVariant, ...] = tuple(order)

    def resolve(self, direction: Direction, selections: Sequence[str]) -> ConversionResult | None:
        """
        Pick the next visibly distinct style and compute the converted selections.
        Conversions are recorded in the session as they are produced, but the style
        cursor doesn't move until `commit()`. Returns `None` when there are no
        selections.
        """
        if not selections:
            return None

        records = self.session.tracker.reconcile(selections)
        candidate = next_variant(self.session.current_variant, direction, self.order)
        tried = 1
        while True:
            converted = tuple(convert_text(rec.original_text, candidate) for rec in records)
            for rec, text in zip(records, converted):
                self.session.tracker.record(rec.original_text, candidate, text)

            unchanged = all(new == old for new, old in zip(converted, selections))
            if not unchanged or tried >= len(self.order):
                break

            log.debug("Skipping %s: no visible change", candidate.value)
            candidate = next_variant(candidate, direction, self.order)
            tried += 1

        return ConversionResult(
            variant=candidate, per_selection_text=converted, candidates_tried=tried
        )

    def commit(self, result: ConversionResult) -> None:
        """Make `result.variant` the current style, once its edit has been applied."""
        log.debug("Committing case style %s", result.variant.value)
        self.session.history.push_variant(result.variant)

    def apply(self, direction: Direction, selections: Sequence[str]) -> ConversionResult | None:
        """Resolve and immediately commit, for callers that apply edits synchronously."""
        result = self.resolve(direction, selections)
        if result is not None:
            self.commit(result)
        return result
