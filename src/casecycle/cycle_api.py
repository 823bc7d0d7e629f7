"""
Text and file level API for cycling case styles outside an editor.

Each run uses a fresh `Session`, and each step sees the output of the previous step,
the same way an editor reports converted text back on the next invocation.
"""

from __future__ import annotations

import logging
import shutil
import sys
from collections.abc import Sequence
from pathlib import Path

from strif import atomic_output_file

from casecycle.cycle import Direction
from casecycle.orchestrator import ConversionOrchestrator
from casecycle.session import Session
from casecycle.variants import DEFAULT_CASE_CYCLE, CaseVariant

log = logging.getLogger(__name__)

BACKUP_SUFFIX = ".orig"


def cycle_text(
    text: str,
    steps: int = 1,
    direction: Direction = Direction.forward,
    order: Sequence[CaseVariant] = DEFAULT_CASE_CYCLE,
    lines: bool = False,
) -> tuple[str, CaseVariant]:
    """
    Cycle `text` through `steps` case styles. With `lines=True` each line is a
    separate selection, otherwise the whole text is one selection.

    Returns the converted text and the style it ended on.
    """
    session = Session()
    orchestrator = ConversionOrchestrator(session, order)
    selections = text.splitlines(keepends=True) if lines else [text]

    for _ in range(steps):
        result = orchestrator.apply(direction, selections)
        if result is None:
            break
        selections = list(result.per_selection_text)
        log.debug(
            "Step to %s after %d candidate(s)", result.variant.value, result.candidates_tried
        )

    return "".join(selections), session.current_variant


def cycle_file(
    path: str | Path,
    output: str | Path = "-",
    inplace: bool = False,
    nobackup: bool = False,
    steps: int = 1,
    direction: Direction = Direction.forward,
    order: Sequence[CaseVariant] = DEFAULT_CASE_CYCLE,
    lines: bool = False,
    make_parents: bool = True,
) -> CaseVariant:
    """
    Cycle the contents of a file (`-` for stdin) and write the result to `output`
    (`-` for stdout), or back to the file itself with `inplace`.
    """
    if inplace and str(path) == "-":
        raise ValueError("Cannot use --inplace with stdin")

    if str(path) == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")

    result, variant = cycle_text(text, steps=steps, direction=direction, order=order, lines=lines)

    if inplace:
        if not nobackup:
            shutil.copyfile(path, f"{path}{BACKUP_SUFFIX}")
        _write_atomic(Path(path), result, make_parents=False)
    elif str(output) == "-":
        sys.stdout.write(result)
    else:
        _write_atomic(Path(output), result, make_parents=make_parents)

    return variant


def _write_atomic(output_path: Path, content: str, make_parents: bool) -> None:
    with atomic_output_file(output_path, make_parents=make_parents) as temp_path:
        Path(temp_path).write_text(content, encoding="utf-8")
