"""
Lossless splitting of text into word and delimiter runs.

A word is a run of ASCII letters and digits, where single hyphens or underscores
between alphanumeric runs join them into one word (`hello-world`, `foo_bar_2`).
Everything else is a delimiter and is kept verbatim, so joining the segments gives
back the input exactly.

Example:

    segment('<div class="hello-world">')
    # <|div| |class|="|hello-world|">
    # with `div`, `class` and `hello-world` marked as words
"""

from __future__ import annotations

import re
from dataclasses import dataclass

WORD_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z0-9]+(?:[-_][A-Za-z0-9]+)*")


@dataclass(frozen=True)
class WordSegment:
    text: str
    is_word: bool


def segment(text: str) -> list[WordSegment]:
    """
    Split `text` into alternating word and delimiter segments, in order.
    Empty input gives an empty list.
    """
    segments: list[WordSegment] = []
    last_end = 0
    for match in WORD_PATTERN.finditer(text):
        start, end = match.span()
        if start > last_end:
            segments.append(WordSegment(text[last_end:start], is_word=False))
        segments.append(WordSegment(match.group(0), is_word=True))
        last_end = end

    if last_end < len(text):
        segments.append(WordSegment(text[last_end:], is_word=False))

    return segments
