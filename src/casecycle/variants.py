"""
Case variants and normalization of the configured cycle order.

The configured order is a list of style names from settings. It is turned into a
validated tuple of `CaseVariant` values: unknown names are dropped, duplicates
removed, `original` is always present, and at least one other style follows it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

log = logging.getLogger(__name__)


class CaseVariant(str, Enum):
    """A named text-casing convention."""

    original = "original"  # text as it was before any conversion
    const = "const"  # HELLO_WORLD
    camel = "camel"  # helloWorld
    pascal = "pascal"  # HelloWorld
    snake = "snake"  # hello_world
    kebab = "kebab"  # hello-world


DEFAULT_CASE_CYCLE: tuple[CaseVariant, ...] = (
    CaseVariant.original,
    CaseVariant.const,
    CaseVariant.camel,
    CaseVariant.snake,
    CaseVariant.kebab,
)

FALLBACK_VARIANT = CaseVariant.const
"""Appended when the configured order has no style other than `original`."""

# Alternate spellings accepted in configuration, all lowercase.
_ALIASES: dict[str, CaseVariant] = {
    "none": CaseVariant.original,
    "upper_snake": CaseVariant.const,
    "screaming_snake": CaseVariant.const,
    "constant": CaseVariant.const,
    "upper": CaseVariant.const,
    "camelcase": CaseVariant.camel,
    "lower_camel": CaseVariant.camel,
    "pascalcase": CaseVariant.pascal,
    "upper_camel": CaseVariant.pascal,
    "snake_case": CaseVariant.snake,
    "kebab_case": CaseVariant.kebab,
    "dash": CaseVariant.kebab,
    "hyphen": CaseVariant.kebab,
}


def parse_variant(name: str) -> CaseVariant | None:
    """
    Look up a style by name, case-insensitively, also accepting the aliases above.
    Returns `None` for names that don't match any style.
    """
    key = name.strip().lower().replace("-", "_")
    try:
        return CaseVariant(key)
    except ValueError:
        return _ALIASES.get(key)


def normalize_case_cycle(names: Iterable[object] | None) -> tuple[CaseVariant, ...]:
    """
    Turn configured style names into a usable cycle order.

    Unknown names and non-string entries are dropped, the result is deduplicated
    (first occurrence wins), `original` is prepended if missing, and
    `FALLBACK_VARIANT` is appended if fewer than two styles remain. `None` means
    nothing is configured and gives the default cycle.
    """
    if names is None:
        return DEFAULT_CASE_CYCLE

    order: list[CaseVariant] = []
    for name in names:
        variant = parse_variant(name) if isinstance(name, str) else None
        if variant is None:
            log.warning("Ignoring unknown case style in cycle: %r", name)
            continue
        if variant not in order:
            order.append(variant)

    if CaseVariant.original not in order:
        order.insert(0, CaseVariant.original)

    if len(order) < 2:
        order.append(FALLBACK_VARIANT)

    return tuple(order)
