# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Tests for the ECMAScript 5.1 grammar data and its isolation from ES2025."""

from __future__ import annotations

import pytest

from railspec.diagrams.constructs import ConstructKind
from railspec.editions import es5
from railspec.grammar import Grammar, GrammarEdition, all_grammars, check_coverage, get_grammar


@pytest.fixture(scope="module")
def grammar() -> Grammar:
    return get_grammar("es5")


@pytest.mark.unit
@pytest.mark.integration
class TestEs5:
    """Tests for the 5.1 edition."""

    def test_rule_count_and_sections(self, grammar: Grammar) -> None:
        assert grammar is es5.GRAMMAR
        assert len(grammar.diagram_rule_names()) == 144
        assert es5.sections_in_order()[0] == "source"
        assert es5.sections_in_order()[-1] == "program"
        assert es5.title_for("regex") == "§7.8.5 Regular Expression Literals"

    def test_no_textual_definitions(self, grammar: Grammar) -> None:
        assert not grammar.has_textual_definitions
        assert es5.textual_rule_names() == frozenset()
        assert es5.text_for("Program") is None

    def test_coverage_is_clean_even_when_strict(self, grammar: Grammar) -> None:
        report = check_coverage(grammar)

        assert not report.has_textual_definitions
        assert report.is_clean(strict=True)

    def test_every_production_builds_and_describes(self, grammar: Grammar) -> None:
        for name in grammar.registry:
            assert not grammar.describe(name).is_placeholder, name

    def test_binary_expressions_are_left_associative_chains(self, grammar: Grammar) -> None:
        (chain,) = grammar.describe("MultiplicativeExpression").children
        first, loop = chain.children

        assert chain.kind is ConstructKind.SEQUENCE
        assert first.text == "UnaryExpression"
        assert loop.kind is ConstructKind.ZERO_OR_MORE
        (step,) = loop.children
        operators, operand = step.children
        assert [op.text for op in operators.children] == ["*", "/", "%"]
        assert operand.text == "UnaryExpression"


@pytest.mark.unit
@pytest.mark.integration
class TestEditionIsolation:
    """Tests that editions never resolve names against each other."""

    def test_registries_are_separate(self) -> None:
        old, new = get_grammar(GrammarEdition.ES5_1), get_grammar(GrammarEdition.ES2025)

        assert old.registry is not new.registry
        assert "Program" in old.registry
        assert "Program" not in new.registry

    def test_name_only_in_one_edition_is_a_placeholder_in_the_other(self) -> None:
        old, new = get_grammar(GrammarEdition.ES5_1), get_grammar(GrammarEdition.ES2025)

        assert not old.describe("RelationalExpressionNoIn").is_placeholder
        assert new.describe("RelationalExpressionNoIn").is_placeholder

    def test_shared_names_have_edition_specific_productions(self) -> None:
        old, new = get_grammar(GrammarEdition.ES5_1), get_grammar(GrammarEdition.ES2025)

        assert old.describe("SourceCharacter") != new.describe("SourceCharacter")

    def test_all_grammars(self) -> None:
        assert [g.edition for g in all_grammars()] == [GrammarEdition.ES5_1, GrammarEdition.ES2025]

    def test_expression_resolves_within_each_edition(self) -> None:
        old, new = get_grammar(GrammarEdition.ES5_1), get_grammar(GrammarEdition.ES2025)

        assert old.resolve("Expression") is not new.resolve("Expression")
        # Both editions write Expression the same way; what it reaches differs.
        assert old.describe("Expression") == new.describe("Expression")
        old_reach = {n.text for n in old.expand("Expression").walk(expanded=True)}
        new_reach = {n.text for n in new.expand("Expression").walk(expanded=True)}
        assert old.expand("Expression") != new.expand("Expression")
        assert "YieldExpression" in new_reach - old_reach


@pytest.mark.unit
@pytest.mark.integration
class TestEveryEdition:
    """Tests that hold for every rule of every shipped edition."""

    def test_repeated_resolution_is_structurally_equal(self) -> None:
        for grammar in all_grammars():
            for name in grammar.registry:
                assert grammar.describe(name) == grammar.describe(name), (grammar.edition, name)
