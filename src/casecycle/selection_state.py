"""
Per-selection tracking of original text across repeated conversions.

An editor reports back whatever is currently under each selection, which after the
first conversion is already converted text. Each selection slot therefore keeps a
record of its original text and of every conversion produced from it, so that the
original can be recovered as long as the visible text is one we produced.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from casecycle.variants import CaseVariant

log = logging.getLogger(__name__)


@dataclass
class SelectionRecord:
    """
    The original text of one selection slot and the conversions produced from it.
    `converted_by_variant` only has entries for non-original styles actually produced.
    """

    original_text: str
    converted_by_variant: dict[CaseVariant, str] = field(default_factory=dict)

    def matches(self, text: str) -> bool:
        """True if `text` is the original or one of the conversions of it."""
        return text == self.original_text or text in self.converted_by_variant.values()


class SelectionStateTracker:
    """
    Reconciles the texts currently under the selections against stored records.
    Records are keyed by position in the selection list.
    """

    def __init__(self) -> None:
        self._records: list[SelectionRecord] = []

    @property
    def records(self) -> list[SelectionRecord]:
        return list(self._records)

    def reconcile(self, current_texts: Sequence[str]) -> list[SelectionRecord]:
        """
        Keep the record for each slot whose current text is its original or a known
        conversion of it; any other slot (including slots beyond the previous count)
        starts a new record with the current text as its original.
        """
        reconciled: list[SelectionRecord] = []
        for i, text in enumerate(current_texts):
            existing = self._records[i] if i < len(self._records) else None
            if existing is not None and existing.matches(text):
                reconciled.append(existing)
            else:
                if existing is not None:
                    log.debug("Selection %d changed, starting a new record: %r", i, text)
                reconciled.append(SelectionRecord(original_text=text))

        self._records = reconciled
        return list(reconciled)

    def record(self, original_text: str, variant: CaseVariant, converted_text: str) -> None:
        """Remember a conversion for every record with the given original text."""
        if variant == CaseVariant.original:
            return
        for rec in self._records:
            if rec.original_text == original_text:
                rec.converted_by_variant.setdefault(variant, converted_text)

    def clear(self) -> None:
        self._records = []
