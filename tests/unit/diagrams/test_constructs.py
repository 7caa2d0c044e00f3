# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for describing railroad trees as construct nodes."""

from __future__ import annotations

import pytest
import railroad

from railspec.diagrams.combinators import (
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
    placeholder,
)
from railspec.diagrams.constructs import ConstructKind, ConstructNode, describe
from railspec.exceptions import ConstructionError


def _terminal(text: str) -> ConstructNode:
    return ConstructNode(kind=ConstructKind.TERMINAL, text=text)


def _reference(name: str) -> ConstructNode:
    return ConstructNode(kind=ConstructKind.NON_TERMINAL, text=name)


@pytest.mark.unit
class TestDescribe:
    """Tests for `describe` on each construct kind."""

    def test_diagram_drops_start_and_end(self) -> None:
        node = describe(Diagram(T("a"), NT("B")))

        assert node.kind is ConstructKind.DIAGRAM
        assert node.children == (_terminal("a"), _reference("B"))

    def test_sequence_and_stack(self) -> None:
        assert describe(Sequence(T("a"), T("b"))) == ConstructNode(
            kind=ConstructKind.SEQUENCE, children=(_terminal("a"), _terminal("b"))
        )
        assert describe(Stack(T("a"))).kind is ConstructKind.STACK

    def test_choice_keeps_every_alternative(self) -> None:
        node = describe(Choice(2, T("a"), T("b"), T("c")))

        assert node.kind is ConstructKind.CHOICE
        assert node.default == 2
        assert [child.text for child in node.children] == ["a", "b", "c"]

    @pytest.mark.parametrize(("skip", "default"), [(False, 1), (True, 0)])
    def test_optional_is_folded(self, skip: bool, default: int) -> None:  # noqa: FBT001
        node = describe(Optional(NT("Initializer"), skip=skip))

        assert node.kind is ConstructKind.OPTIONAL
        assert node.default == default
        assert node.children == (_reference("Initializer"),)

    def test_zero_or_more_is_folded_with_separator(self) -> None:
        node = describe(ZeroOrMore(NT("Element"), T(",")))

        assert node.kind is ConstructKind.ZERO_OR_MORE
        assert node.children == (_reference("Element"),)
        assert node.separator == _terminal(",")

    def test_one_or_more_without_separator(self) -> None:
        node = describe(OneOrMore(NT("Digit")))

        assert node.kind is ConstructKind.ONE_OR_MORE
        assert node.separator is None

    def test_two_way_choice_without_skip_stays_a_choice(self) -> None:
        assert describe(Choice(0, T("a"), T("b"))).kind is ConstructKind.CHOICE

    def test_hand_written_skip_choice_is_folded_like_optional(self) -> None:
        node = describe(Choice(0, railroad.Skip(), T("a")))

        assert node == describe(Optional(T("a"), skip=True))
        assert node.kind is ConstructKind.OPTIONAL

    def test_comment_is_an_annotation(self) -> None:
        node = describe(Comment("[lookahead ≠ {]"))

        assert node.kind is ConstructKind.ANNOTATION
        assert node.text == "[lookahead ≠ {]"
        assert not node.missing

    def test_bare_skip(self) -> None:
        assert describe(railroad.Skip()).kind is ConstructKind.SKIP

    def test_unmodelled_item_is_rejected(self) -> None:
        with pytest.raises(ConstructionError, match="Group"):
            describe(railroad.Group(T("x"), "label"))


@pytest.mark.unit
class TestConstructNode:
    """Tests for comparing and walking construct trees."""

    @staticmethod
    def _build() -> railroad.Diagram:
        return Diagram(Sequence(NT("B"), Optional(NT("A")), ZeroOrMore(NT("B"), NT("Sep"))))

    def test_independent_builds_are_equal_and_hashable(self) -> None:
        first, second = describe(self._build()), describe(self._build())

        assert first == second
        assert hash(first) == hash(second)

    def test_references_are_ordered_and_unique(self) -> None:
        assert describe(self._build()).references() == ("B", "A", "Sep")

    def test_walk_is_pre_order(self) -> None:
        walked = [node.kind for node in describe(Diagram(Sequence(T("a"), NT("B")))).walk()]
        assert walked == [
            ConstructKind.DIAGRAM,
            ConstructKind.SEQUENCE,
            ConstructKind.TERMINAL,
            ConstructKind.NON_TERMINAL,
        ]

    def test_depth(self) -> None:
        assert describe(Diagram(T("a"))).depth == 2
        assert describe(Diagram(Sequence(Optional(T("a"))))).depth == 4

    def test_placeholder_is_recognized(self) -> None:
        assert describe(placeholder("Missing")).is_placeholder
        assert not describe(Diagram(Comment("any code point"))).is_placeholder

    def test_nodes_are_immutable(self) -> None:
        node = _terminal("a")
        with pytest.raises(ValueError, match="frozen"):
            node.text = "b"  # type: ignore[misc]
