"""
Per-style conversion of words and of whole texts.

Every non-original style is derived from one canonical form: underscores inserted
at lowercase-to-uppercase boundaries, hyphens turned into underscores, and the
whole word lowercased (`helloWorld`, `Hello-World` and `HELLO_WORLD` all become
`hello_world`). Digits carry no case and never trigger a word boundary, so
`v2Api` is a single part (`V2API` as const).
"""

from __future__ import annotations

import re

from casecycle.segmenter import segment
from casecycle.variants import CaseVariant

_CASE_BOUNDARY: re.Pattern[str] = re.compile(r"([a-z])([A-Z])")
_JOINED_CHAR: re.Pattern[str] = re.compile(r"_(.)")


def canonical_form(word: str) -> str:
    """Underscore-joined lowercase form of a word."""
    return _CASE_BOUNDARY.sub(r"\1_\2", word).replace("-", "_").lower()


def to_const(word: str) -> str:
    return canonical_form(word).upper()


def to_snake(word: str) -> str:
    return canonical_form(word)


def to_kebab(word: str) -> str:
    return canonical_form(word).replace("_", "-")


def to_camel(word: str) -> str:
    camel = _JOINED_CHAR.sub(lambda m: m.group(1).upper(), canonical_form(word))
    return camel[:1].lower() + camel[1:]


def to_pascal(word: str) -> str:
    camel = to_camel(word)
    return camel[:1].upper() + camel[1:]


def transform(word: str, variant: CaseVariant) -> str:
    """
    Convert a single word to the given style. `CaseVariant.original` returns
    the word unchanged.
    """
    if variant == CaseVariant.const:
        return to_const(word)
    elif variant == CaseVariant.camel:
        return to_camel(word)
    elif variant == CaseVariant.pascal:
        return to_pascal(word)
    elif variant == CaseVariant.snake:
        return to_snake(word)
    elif variant == CaseVariant.kebab:
        return to_kebab(word)
    else:
        return word


def convert_text(text: str, variant: CaseVariant) -> str:
    """
    Convert every word in `text` to the given style, leaving delimiters
    (spaces, punctuation, markup) exactly as they are.
    """
    return "".join(
        transform(part.text, variant) if part.is_word else part.text for part in segment(text)
    )
