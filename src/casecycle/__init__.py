"""
Cycle text through case styles (CONST, camel, snake, kebab, ...) on repeated
invocations, always converting from the original text and skipping styles that
would not visibly change it.

Usage::

    from casecycle import ConversionOrchestrator, Direction, Session, normalize_case_cycle

    session = Session()
    orchestrator = ConversionOrchestrator(session, normalize_case_cycle(None))
    result = orchestrator.apply(Direction.forward, ["hello-world"])
    # result.variant == CaseVariant.const
    # result.per_selection_text == ("HELLO_WORLD",)
"""

from casecycle.controller import BufferHistoryEvent, CaseCycleController, EditorPort
from casecycle.cycle import Direction, next_variant
from casecycle.cycle_api import cycle_file, cycle_text
from casecycle.history import CycleState, HistoryManager
from casecycle.orchestrator import ConversionOrchestrator, ConversionResult
from casecycle.segmenter import WordSegment, segment
from casecycle.selection_state import SelectionRecord, SelectionStateTracker
from casecycle.session import Session
from casecycle.transforms import canonical_form, convert_text, transform
from casecycle.variants import (
    DEFAULT_CASE_CYCLE,
    CaseVariant,
    normalize_case_cycle,
    parse_variant,
)

__all__ = [
    "DEFAULT_CASE_CYCLE",
    "BufferHistoryEvent",
    "CaseCycleController",
    "CaseVariant",
    "ConversionOrchestrator",
    "ConversionResult",
    "CycleState",
    "Direction",
    "EditorPort",
    "HistoryManager",
    "SelectionRecord",
    "SelectionStateTracker",
    "Session",
    "WordSegment",
    "canonical_form",
    "convert_text",
    "cycle_file",
    "cycle_text",
    "next_variant",
    "normalize_case_cycle",
    "parse_variant",
    "segment",
    "transform",
]
