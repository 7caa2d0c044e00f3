# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""The grammar model: rule registries, section indexes, textual definitions and coverage."""

from __future__ import annotations

from railspec.grammar.coverage import (
    CoverageReport,
    check_coverage,
    diagram_rule_names,
    textual_rule_names,
)
from railspec.grammar.definitions import ProductionHead, TextualDefinition, TextualDefinitionTable
from railspec.grammar.grammar import (
    Grammar,
    GrammarEdition,
    all_grammars,
    coerce_edition,
    get_grammar,
)
from railspec.grammar.registry import ProductionThunk, RuleName, RuleRegistry
from railspec.grammar.sections import Section, SectionId, SectionIndex


__all__ = (
    "CoverageReport",
    "Grammar",
    "GrammarEdition",
    "ProductionHead",
    "ProductionThunk",
    "RuleName",
    "RuleRegistry",
    "Section",
    "SectionId",
    "SectionIndex",
    "TextualDefinition",
    "TextualDefinitionTable",
    "all_grammars",
    "check_coverage",
    "coerce_edition",
    "diagram_rule_names",
    "get_grammar",
    "textual_rule_names",
)
