# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for coverage checks between diagrams, definitions and sections."""

from __future__ import annotations

import pytest

from railspec.diagrams.combinators import NT, Diagram, T
from railspec.exceptions import CoverageDriftError
from railspec.grammar.coverage import check_coverage, diagram_rule_names, textual_rule_names
from railspec.grammar.definitions import TextualDefinitionTable
from railspec.grammar.grammar import Grammar, GrammarEdition
from railspec.grammar.registry import RuleRegistry
from railspec.grammar.sections import SectionIndex


def _grammar(
    diagrams: dict[str, list[str]],
    definitions: dict[str, str],
    sections: dict[str, tuple[str, ...]],
) -> Grammar:
    """Build a grammar whose rules reference the listed names."""
    rules = RuleRegistry("coverage-test")
    for name, refs in diagrams.items():
        rules.define(name, lambda refs=refs: Diagram(T("x"), *map(NT, refs)))
    return Grammar(
        edition=GrammarEdition.ES2025,
        registry=rules.freeze(),
        sections=SectionIndex.from_tables(tuple(sections), {s: s.title() for s in sections}, sections),
        definitions=TextualDefinitionTable(definitions),
    )


@pytest.mark.unit
class TestEnumeration:
    """Tests for the two name-set primitives."""

    def test_name_sets_are_exact(self, number_grammar: Grammar) -> None:
        assert diagram_rule_names(number_grammar) == frozenset({"Number", "Digit"})
        assert textual_rule_names(number_grammar) == frozenset({"Number", "Digit"})

    def test_names_are_not_normalized(self) -> None:
        grammar = _grammar(
            {"IdentifierName": []}, {"identifierName": "identifierName ::\n    x"}, {}
        )

        assert diagram_rule_names(grammar) != textual_rule_names(grammar)


@pytest.mark.unit
class TestCheckCoverage:
    """Tests for coverage reports."""

    def test_consistent_grammar_is_clean(self, number_grammar: Grammar) -> None:
        report = check_coverage(number_grammar)

        assert not report.has_drift
        assert not report.has_structural_findings
        assert report.is_clean(strict=True)
        report.raise_for_drift(strict=True)

    def test_drift_in_both_directions(self) -> None:
        grammar = _grammar(
            {"A": [], "B": []},
            {"A": "A ::\n    x", "C": "C ::\n    x"},
            {"all": ("A", "B")},
        )

        report = check_coverage(grammar)

        assert report.diagram_only == ("B",)
        assert report.textual_only == ("C",)
        assert report.has_drift
        with pytest.raises(CoverageDriftError) as exc_info:
            report.raise_for_drift()
        assert exc_info.value.details["diagram_only"] == ["B"]
        assert exc_info.value.details["textual_only"] == ["C"]

    def test_structural_findings(self) -> None:
        grammar = _grammar(
            {"A": ["Gone"], "B": [], "C": []},
            {
                "A": "A ::\n    x",
                "B": "Bee ::\n    x",
                "C": "C ::\n    x",
            },
            {"one": ("A", "Ghost"), "two": ("A",)},
        )

        report = check_coverage(grammar)

        assert not report.has_drift
        assert report.unsectioned == ("B", "C")
        assert report.unknown_in_sections == ("Ghost",)
        assert report.multiply_sectioned == ("A",)
        assert report.dangling_references == {"A": ("Gone",)}
        assert report.mismatched_heads == ("B",)
        assert report.has_structural_findings

    def test_strict_mode_fails_on_structural_findings(self) -> None:
        grammar = _grammar({"A": ["Gone"]}, {"A": "A ::\n    x"}, {"s": ("A",)})
        report = check_coverage(grammar)

        assert report.is_clean()
        assert not report.is_clean(strict=True)
        report.raise_for_drift()
        with pytest.raises(CoverageDriftError) as exc_info:
            report.raise_for_drift(strict=True)
        assert exc_info.value.details["dangling_references"] == {"A": ("Gone",)}

    def test_edition_without_textual_table_skips_drift(self) -> None:
        grammar = _grammar({"A": [], "B": []}, {}, {"s": ("A", "B")})

        report = check_coverage(grammar)

        assert not report.has_textual_definitions
        assert not report.has_drift
        assert report.is_clean(strict=True)

    def test_report_serializes_computed_fields(self, number_grammar: Grammar) -> None:
        data = check_coverage(number_grammar).model_dump(mode="json")

        assert data["edition"] == "es2025"
        assert data["has_drift"] is False
        assert data["has_structural_findings"] is False
