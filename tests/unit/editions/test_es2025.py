# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Tests for the ECMAScript 2025 grammar data.

These load the complete edition, so they double as a regression guard on the
transcription: every diagram must have a textual definition and a section.
"""

from __future__ import annotations

import inspect
import sys

import pytest
import railroad

from railspec.diagrams.constructs import ConstructKind, ConstructNode
from railspec.editions import es2025
from railspec.grammar import Grammar, GrammarEdition, check_coverage, get_grammar


# Annex A names that productions refer to but that are only described in
# prose (or not drawn at all) in this edition.
KNOWN_UNDRAWN = frozenset({
    "AssignmentElementList",
    "AssignmentPropertyList",
    "AssignmentRestElement",
    "AssignmentRestProperty",
    "CodePoint",
    "LegacyOctalEscapeSequence",
    "MultiLineCommentChars",
    "NonEscapeCharacter",
    "NonOctalDecimalEscapeSequence",
    "NonOctalDecimalIntegerLiteral",
    "OtherPunctuator",
    "RegularExpressionChar",
    "RegularExpressionFirstChar",
    "SingleLineCommentChars",
    "TemplateCharacter",
})


def _reference(node: ConstructNode, name: str) -> ConstructNode:
    """The first reference to `name` in the production `node` expands to."""
    assert node.target is not None, node.text
    return next(
        n for n in node.target.walk() if n.kind is ConstructKind.NON_TERMINAL and n.text == name
    )


@pytest.fixture(scope="module")
def grammar() -> Grammar:
    return get_grammar(GrammarEdition.ES2025)


@pytest.mark.unit
@pytest.mark.integration
class TestCoverage:
    """Tests tying the three representations of the edition together."""

    def test_module_and_lookup_agree(self, grammar: Grammar) -> None:
        assert es2025.GRAMMAR is grammar
        assert get_grammar("es2025") is grammar

    def test_rule_counts(self, grammar: Grammar) -> None:
        assert len(grammar.diagram_rule_names()) == 261
        assert len(grammar.textual_rule_names()) == 261

    def test_diagram_and_textual_names_match_exactly(self) -> None:
        assert es2025.diagram_rule_names() == es2025.textual_rule_names()

    def test_every_rule_is_in_exactly_one_section(self, grammar: Grammar) -> None:
        listed = grammar.sections.all_rule_names()

        assert len(listed) == len(set(listed))
        assert set(listed) == grammar.diagram_rule_names()

    def test_report_has_only_known_dangling_references(self, grammar: Grammar) -> None:
        report = check_coverage(grammar)

        assert report.is_clean()
        assert not report.unsectioned
        assert not report.unknown_in_sections
        assert not report.mismatched_heads
        dangling = {ref for refs in report.dangling_references.values() for ref in refs}
        assert dangling == KNOWN_UNDRAWN


@pytest.mark.unit
@pytest.mark.integration
class TestSections:
    """Tests for the Annex A section layout."""

    def test_order_and_titles(self) -> None:
        assert es2025.sections_in_order() == (
            "lexical",
            "expressions",
            "statements",
            "functions",
            "modules",
        )
        assert es2025.title_for("lexical") == "A.1 Lexical Grammar"
        assert es2025.title_for("modules") == "A.5 Scripts and Modules"

    def test_sections_start_where_annex_a_does(self) -> None:
        assert es2025.rules_for("lexical")[0] == "SourceCharacter"
        assert es2025.rules_for("modules")[-1] == "ExportSpecifier"


@pytest.mark.unit
@pytest.mark.integration
class TestProductions:
    """Tests for individual productions."""

    def test_every_production_builds_and_describes(self, grammar: Grammar) -> None:
        for name in grammar.registry:
            node = grammar.describe(name)
            assert node.kind is ConstructKind.DIAGRAM, name
            assert not node.is_placeholder, name

    def test_statement_expands_one_level(self, grammar: Grammar) -> None:
        statement = grammar.expand("Statement", depth=1)
        (choice,) = statement.children

        assert choice.kind is ConstructKind.CHOICE
        assert "BlockStatement" in statement.references()
        assert all(child.target is not None for child in choice.children)

    def test_recursive_statement_stays_within_a_small_stack(self, grammar: Grammar) -> None:
        # Statement -> BlockStatement -> Block -> StatementList -> StatementListItem -> Statement
        limit = sys.getrecursionlimit()
        sys.setrecursionlimit(len(inspect.stack(0)) + 300)
        try:
            diagram = es2025.resolve("Statement")
            expanded = grammar.expand("Statement", depth=4)
            repeats = [
                n
                for n in expanded.walk(expanded=True)
                if n.kind is ConstructKind.NON_TERMINAL and n.text == "Statement"
            ]
        finally:
            sys.setrecursionlimit(limit)

        assert isinstance(diagram, railroad.Diagram)
        assert repeats
        (block_statement,) = [n for n in expanded.walk() if n.text == "BlockStatement"]
        block = _reference(block_statement, "Block")
        statement_list = _reference(block, "StatementList")
        item = _reference(statement_list, "StatementListItem")
        deepest = _reference(item, "Statement")
        assert item.target is not None
        assert deepest.target is None

    def test_textual_definition_matches_its_rule(self) -> None:
        text = es2025.text_for("Statement")

        assert text is not None
        assert text.splitlines()[0] == "Statement[Yield, Await, Return] :"

    def test_definitions_keep_escapes_verbatim(self) -> None:
        assert es2025.text_for("SingleEscapeCharacter") == (
            "SingleEscapeCharacter :: one of\n    ' \" \\ b f n r t v"
        )
        assert "`" in (es2025.text_for("NoSubstitutionTemplate") or "")

    def test_undrawn_reference_resolves_to_placeholder(self) -> None:
        assert get_grammar("es2025").describe("CodePoint").is_placeholder

    def test_resolution_is_fresh_each_time(self) -> None:
        assert es2025.resolve("Script") is not es2025.resolve("Script")
