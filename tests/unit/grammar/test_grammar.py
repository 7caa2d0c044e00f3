# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for the Grammar facade and edition lookup."""

from __future__ import annotations

import pytest

from railspec.diagrams.combinators import NT, Diagram, Sequence, T, ZeroOrMore
from railspec.diagrams.constructs import ConstructKind
from railspec.exceptions import UnknownEditionError
from railspec.grammar.grammar import Grammar, GrammarEdition, coerce_edition
from railspec.grammar.registry import RuleRegistry
from railspec.grammar.sections import SectionIndex


@pytest.mark.unit
class TestGrammarEdition:
    """Tests for edition names."""

    @pytest.mark.parametrize(
        ("spelling", "edition"),
        [
            ("es2025", GrammarEdition.ES2025),
            ("ES2025", GrammarEdition.ES2025),
            ("es5.1", GrammarEdition.ES5_1),
            ("es5_1", GrammarEdition.ES5_1),
            ("ES5-1", GrammarEdition.ES5_1),
            ("es5", GrammarEdition.ES5_1),
            ("ecmascript2025", GrammarEdition.ES2025),
        ],
    )
    def test_loose_spellings(self, spelling: str, edition: GrammarEdition) -> None:
        assert coerce_edition(spelling) is edition

    def test_members_pass_through(self) -> None:
        assert coerce_edition(GrammarEdition.ES5_1) is GrammarEdition.ES5_1

    def test_unknown_edition(self) -> None:
        with pytest.raises(UnknownEditionError) as exc_info:
            coerce_edition("es3")

        assert exc_info.value.details == {"edition": "es3"}
        assert any("es2025" in s for s in exc_info.value.suggestions)

    def test_display_names(self) -> None:
        assert GrammarEdition.ES5_1.display_name == "ECMAScript 5.1"
        assert GrammarEdition.ES2025.display_name == "ECMAScript 2025"
        assert str(GrammarEdition.ES2025) == "es2025"


@pytest.mark.unit
class TestGrammar:
    """Tests for the facade over registry, sections and definitions."""

    def test_facade_delegates(self, number_grammar: Grammar) -> None:
        assert number_grammar.title == "ECMAScript 2025"
        assert number_grammar.has_textual_definitions
        assert number_grammar.sections_in_order() == ("numbers",)
        assert number_grammar.rules_for("numbers") == ("Number", "Digit")
        assert number_grammar.title_for("numbers") == "Numbers"
        assert number_grammar.text_for("Digit").startswith("Digit :: one of")
        assert number_grammar.diagram_rule_names() == number_grammar.textual_rule_names()

    def test_number_and_digit_end_to_end(self, number_grammar: Grammar) -> None:
        number = number_grammar.describe("Number")
        (sequence,) = number.children

        assert sequence.kind is ConstructKind.SEQUENCE
        assert [child.kind for child in sequence.children] == [
            ConstructKind.OPTIONAL,
            ConstructKind.NON_TERMINAL,
            ConstructKind.ZERO_OR_MORE,
        ]
        assert number.references() == ("Digit",)

        digit = number_grammar.describe("Digit")
        (choice,) = digit.children
        assert choice.kind is ConstructKind.CHOICE
        assert choice.default == 0
        assert [t.text for t in choice.children] == [str(d) for d in range(10)]

    def test_unknown_rule_is_a_placeholder_not_an_error(self, number_grammar: Grammar) -> None:
        assert number_grammar.describe("Letter").is_placeholder
        assert number_grammar.text_for("Letter") is None

    def test_default_definitions_are_empty(self, number_grammar: Grammar) -> None:
        bare = Grammar(
            edition=GrammarEdition.ES5_1,
            registry=number_grammar.registry,
            sections=number_grammar.sections,
        )

        assert not bare.has_textual_definitions
        assert bare.text_for("Number") is None


@pytest.mark.unit
class TestSideBySideGrammars:
    """Tests for two grammars that define the same rule name."""

    def test_same_name_stays_separate(self) -> None:
        single, listed = RuleRegistry("single"), RuleRegistry("listed")
        single.define("Expression", lambda: Diagram(NT("AssignmentExpression")))
        listed.define(
            "Expression",
            lambda: Diagram(
                Sequence(
                    NT("AssignmentExpression"),
                    ZeroOrMore(Sequence(T(","), NT("AssignmentExpression"))),
                )
            ),
        )
        index = SectionIndex.from_tables(("all",), {"all": "All"}, {"all": ("Expression",)})
        first = Grammar(edition=GrammarEdition.ES5_1, registry=single, sections=index)
        second = Grammar(edition=GrammarEdition.ES2025, registry=listed, sections=index)

        assert first.resolve("Expression") is not second.resolve("Expression")
        assert first.describe("Expression") != second.describe("Expression")

        before = second.diagram_rule_names()
        single.define("Comma", lambda: Diagram(T(",")))
        single.freeze()

        assert first.diagram_rule_names() == {"Expression", "Comma"}
        assert second.diagram_rule_names() == before == {"Expression"}
        assert second.describe("Comma").is_placeholder
