"""Tests for conversion orchestration, including skip-ahead over no-op styles."""

from __future__ import annotations

from casecycle.cycle import Direction
from casecycle.orchestrator import ConversionOrchestrator
from casecycle.session import Session
from casecycle.variants import DEFAULT_CASE_CYCLE, CaseVariant


def _orchestrator(order=DEFAULT_CASE_CYCLE) -> ConversionOrchestrator:
    return ConversionOrchestrator(Session(), order)


def _run(orch: ConversionOrchestrator, texts: list[str], steps: int, direction=Direction.forward):
    """Apply `steps` invocations, feeding each result back in like an editor would."""
    seen = [list(texts)]
    variants = []
    for _ in range(steps):
        result = orch.apply(direction, texts)
        assert result is not None
        texts = list(result.per_selection_text)
        seen.append(texts)
        variants.append(result.variant)
    return seen, variants


def test_first_step_is_const() -> None:
    result = _orchestrator().apply(Direction.forward, ["helloWorld"])
    assert result is not None
    assert result.variant == CaseVariant.const
    assert result.per_selection_text == ("HELLO_WORLD",)
    assert result.candidates_tried == 1


def test_full_forward_cycle() -> None:
    seen, variants = _run(_orchestrator(), ["hello-world"], 5)
    assert [t[0] for t in seen] == [
        "hello-world",
        "HELLO_WORLD",
        "helloWorld",
        "hello_world",
        "hello-world",
        "HELLO_WORLD",
    ]
    # original renders the same as the kebab text before it, so it is skipped.
    assert variants == [
        CaseVariant.const,
        CaseVariant.camel,
        CaseVariant.snake,
        CaseVariant.kebab,
        CaseVariant.const,
    ]


def test_single_token_skips_collisions() -> None:
    orch = _orchestrator()
    seen, variants = _run(orch, ["hello"], 3)
    texts = [t[0] for t in seen]
    assert texts == ["hello", "HELLO", "hello", "HELLO"]
    for prev, cur in zip(texts, texts[1:]):
        assert prev != cur
    assert variants == [CaseVariant.const, CaseVariant.camel, CaseVariant.const]


def test_skip_reports_candidates_tried() -> None:
    orch = _orchestrator()
    orch.apply(Direction.forward, ["hello"])
    orch.apply(Direction.forward, ["HELLO"])
    result = orch.apply(Direction.forward, ["hello"])
    assert result is not None
    # snake, kebab and original all render as "hello"
    assert result.candidates_tried == 4
    assert result.variant == CaseVariant.const


def test_two_selections_share_variant_and_recover_originals() -> None:
    orch = _orchestrator()
    result = orch.apply(Direction.forward, ["foo-bar", "baz"])
    assert result is not None
    assert result.variant == CaseVariant.const
    assert result.per_selection_text == ("FOO_BAR", "BAZ")

    records = orch.session.tracker.reconcile(["FOO_BAR", "BAZ"])
    assert [r.original_text for r in records] == ["foo-bar", "baz"]

    result = orch.apply(Direction.forward, ["FOO_BAR", "BAZ"])
    assert result is not None
    assert result.variant == CaseVariant.camel
    assert result.per_selection_text == ("fooBar", "baz")


def test_skip_is_whole_batch() -> None:
    """A style is only skipped when it changes none of the selections."""
    orch = _orchestrator()
    _, variants = _run(orch, ["hello", "foo-bar"], 3)
    assert variants == [CaseVariant.const, CaseVariant.camel, CaseVariant.snake]
    assert orch.session.tracker.records[1].converted_by_variant[CaseVariant.snake] == "foo_bar"


def test_skip_ahead_is_bounded() -> None:
    for text in ["123", "", "-- ::", "42"]:
        orch = _orchestrator()
        result = orch.apply(Direction.forward, [text])
        assert result is not None
        assert result.candidates_tried == len(DEFAULT_CASE_CYCLE)
        assert result.per_selection_text == (text,)
        # Every style was tried once, ending back on original.
        assert result.variant == CaseVariant.original


def test_backward() -> None:
    seen, variants = _run(_orchestrator(), ["helloWorld"], 2, Direction.backward)
    assert [t[0] for t in seen] == ["helloWorld", "hello-world", "hello_world"]
    assert variants == [CaseVariant.kebab, CaseVariant.snake]


def test_empty_invocation_changes_nothing() -> None:
    orch = _orchestrator()
    assert orch.apply(Direction.forward, []) is None
    assert orch.session.cycle_state.history_stack == [CaseVariant.original]
    assert orch.session.tracker.records == []


def test_new_selection_keeps_cursor() -> None:
    orch = _orchestrator()
    orch.apply(Direction.forward, ["foo"])
    result = orch.apply(Direction.forward, ["bar"])
    assert result is not None
    assert orch.session.tracker.records[0].original_text == "bar"
    assert result.variant == CaseVariant.const
    assert result.per_selection_text == ("BAR",)


def test_resolve_does_not_move_cursor_until_commit() -> None:
    orch = _orchestrator()
    result = orch.resolve(Direction.forward, ["a_b"])
    assert result is not None
    assert orch.session.current_variant == CaseVariant.original
    orch.commit(result)
    assert orch.session.current_variant == CaseVariant.const


def test_undo_then_continue() -> None:
    orch = _orchestrator()
    orch.apply(Direction.forward, ["hello-world"])
    orch.apply(Direction.forward, ["HELLO_WORLD"])
    assert orch.session.current_variant == CaseVariant.camel

    # Buffer was reverted to the const text, then the style cursor follows.
    orch.session.history.undo()
    assert orch.session.current_variant == CaseVariant.const
    result = orch.apply(Direction.forward, ["HELLO_WORLD"])
    assert result is not None
    assert result.variant == CaseVariant.camel
    assert result.per_selection_text == ("helloWorld",)


def test_changed_order_without_current_variant() -> None:
    orch = _orchestrator()
    orch.apply(Direction.forward, ["hello-world"])
    orch.apply(Direction.forward, ["HELLO_WORLD"])

    orch.order = (CaseVariant.original, CaseVariant.snake)
    result = orch.apply(Direction.forward, ["helloWorld"])
    assert result is not None
    assert result.variant == CaseVariant.original
    assert result.per_selection_text == ("hello-world",)


def test_reset_after_selection_cleared() -> None:
    orch = _orchestrator()
    orch.apply(Direction.forward, ["abc_def"])
    orch.session.reset()
    assert orch.session.current_variant == CaseVariant.original
    assert orch.session.cycle_state.history_stack == [CaseVariant.original]
    assert orch.session.cycle_state.redo_stack == []
    assert orch.session.tracker.records == []
