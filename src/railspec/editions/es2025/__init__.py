# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""The ECMAScript 2025 grammar: Annex A productions, sections and textual definitions."""

from __future__ import annotations

from railspec.editions.es2025.definitions import definitions
from railspec.editions.es2025.rules import rules
from railspec.editions.es2025.sections import sections
from railspec.grammar.grammar import Grammar, GrammarEdition


GRAMMAR = Grammar(
    edition=GrammarEdition.ES2025, registry=rules, sections=sections, definitions=definitions
)

resolve = GRAMMAR.resolve
sections_in_order = GRAMMAR.sections_in_order
rules_for = GRAMMAR.rules_for
title_for = GRAMMAR.title_for
text_for = GRAMMAR.text_for
diagram_rule_names = GRAMMAR.diagram_rule_names
textual_rule_names = GRAMMAR.textual_rule_names

__all__ = (
    "GRAMMAR",
    "diagram_rule_names",
    "resolve",
    "rules_for",
    "sections_in_order",
    "text_for",
    "textual_rule_names",
    "title_for",
)
