"""Cyclic navigation through the configured case order."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from casecycle.variants import CaseVariant


class Direction(str, Enum):
    forward = "forward"
    backward = "backward"


def next_variant(
    current: CaseVariant, direction: Direction, order: Sequence[CaseVariant]
) -> CaseVariant:
    """
    Return the style after (or before) `current` in `order`, wrapping around.

    If `current` isn't in `order` (for example after the configured cycle changed),
    forward starts from the first style and backward from the last.
    """
    if current not in order:
        return order[0] if direction == Direction.forward else order[-1]

    i = order.index(current)
    if direction == Direction.forward:
        return order[(i + 1) % len(order)]
    else:
        return order[(i - 1 + len(order)) % len(order)]
