# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for the construct combinators.

Tests validate:
- `call_or_new` for plain callables and for classes that refuse plain calls
- that unrelated errors propagate unchanged
- the railroad shapes produced by each wrapper
"""

from __future__ import annotations

import pytest
import railroad

from railspec.diagrams.combinators import (
    MISSING_RULE_CLASS,
    NT,
    Choice,
    Comment,
    Diagram,
    OneOrMore,
    Optional,
    Sequence,
    Stack,
    T,
    ZeroOrMore,
    call_or_new,
    placeholder,
)
from railspec.exceptions import ConstructionError


class _RequiresNew(type):
    """Metaclass mimicking a primitive that must be instantiated, not called."""

    def __call__(cls, *args, **kwargs):
        raise TypeError(f"Class constructor {cls.__name__} cannot be invoked without 'new'")


class Widget(metaclass=_RequiresNew):
    def __init__(self, label: str, *, size: int = 1) -> None:
        self.label = label
        self.size = size


class BrokenWidget(metaclass=_RequiresNew):
    def __init__(self, label: str) -> None:
        raise TypeError("label must be bytes")


@pytest.mark.unit
class TestCallOrNew:
    """Tests for the calling-convention adapter."""

    def test_plain_callable_is_called(self) -> None:
        assert call_or_new(lambda a, b=0: a + b, 1, b=2) == 3

    def test_class_is_called_normally(self) -> None:
        item = call_or_new(railroad.Terminal, "if")
        assert isinstance(item, railroad.Terminal)
        assert item.text == "if"

    def test_class_refusing_plain_call_is_instantiated(self) -> None:
        widget = call_or_new(Widget, "box", size=3)

        assert isinstance(widget, Widget)
        assert widget.label == "box"
        assert widget.size == 3

    def test_matching_error_from_non_class_propagates(self) -> None:
        def factory() -> None:
            raise TypeError("Class constructor Foo cannot be invoked without 'new'")

        with pytest.raises(TypeError, match="without 'new'"):
            call_or_new(factory)

    def test_unrelated_type_error_propagates(self) -> None:
        class Strict:
            def __init__(self, value: int) -> None:
                self.value = value

        with pytest.raises(TypeError, match="argument"):
            call_or_new(Strict)

    def test_error_from_retry_propagates(self) -> None:
        with pytest.raises(TypeError, match="label must be bytes"):
            call_or_new(BrokenWidget, "box")

    def test_other_exceptions_propagate(self) -> None:
        def factory() -> None:
            raise ValueError("nope")

        with pytest.raises(ValueError, match="nope"):
            call_or_new(factory)


@pytest.mark.unit
class TestWrappers:
    """Tests for the shapes built by each wrapper."""

    def test_terminal_and_non_terminal(self) -> None:
        terminal, reference = T("while"), NT("Statement")

        assert isinstance(terminal, railroad.Terminal)
        assert terminal.text == "while"
        assert isinstance(reference, railroad.NonTerminal)
        assert reference.text == "Statement"

    def test_diagram_adds_start_and_end(self) -> None:
        diagram = Diagram(T("a"))

        assert isinstance(diagram, railroad.Diagram)
        assert isinstance(diagram.items[0], railroad.Start)
        assert isinstance(diagram.items[-1], railroad.End)

    def test_sequence_and_stack_keep_order(self) -> None:
        seq = Sequence(T("a"), NT("B"), T("c"))
        stack = Stack(T("x"), T("y"))

        assert [item.text for item in seq.items] == ["a", "B", "c"]
        assert [item.text for item in stack.items] == ["x", "y"]

    def test_choice_keeps_default(self) -> None:
        choice = Choice(1, T("a"), T("b"), T("c"))

        assert choice.default == 1
        assert len(choice.items) == 3

    @pytest.mark.parametrize("default", [-1, 2, 5])
    def test_choice_rejects_out_of_range_default(self, default: int) -> None:
        with pytest.raises(ConstructionError) as exc_info:
            Choice(default, T("a"), T("b"))

        assert exc_info.value.details == {"default": default, "alternatives": 2}

    def test_choice_without_alternatives_is_rejected(self) -> None:
        with pytest.raises(ConstructionError):
            Choice(0)

    def test_optional_is_a_skip_choice(self) -> None:
        optional = Optional(T("x"))

        assert isinstance(optional, railroad.Choice)
        assert isinstance(optional.items[0], railroad.Skip)
        assert optional.default == 1
        assert Optional(T("x"), skip=True).default == 0

    def test_one_or_more_with_separator(self) -> None:
        loop = OneOrMore(NT("Item"), T(","))

        assert loop.item.text == "Item"
        assert loop.rep.text == ","

    def test_zero_or_more_wraps_one_or_more(self) -> None:
        loop = ZeroOrMore(NT("Item"))

        assert isinstance(loop, railroad.Choice)
        assert isinstance(loop.items[1], railroad.OneOrMore)

    def test_comment_keeps_class(self) -> None:
        note = Comment("[no LineTerminator here]", cls="restriction")

        assert note.text == "[no LineTerminator here]"
        assert note.cls == "restriction"


@pytest.mark.unit
def test_placeholder_names_the_missing_rule() -> None:
    diagram = placeholder("Nowhere")
    (note,) = [item for item in diagram.items if isinstance(item, railroad.Comment)]

    assert note.text == "No factory defined for Nowhere"
    assert MISSING_RULE_CLASS in note.cls.split()
