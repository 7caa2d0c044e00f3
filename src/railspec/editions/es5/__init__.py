# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""The ECMAScript 5.1 grammar.

This edition has diagrams and sections only; there is no textual definition
table, so `text_for` is always None and coverage checks skip name-set drift.
"""

from __future__ import annotations

from railspec.editions.es5.rules import rules
from railspec.editions.es5.sections import sections
from railspec.grammar.grammar import Grammar, GrammarEdition


GRAMMAR = Grammar(edition=GrammarEdition.ES5_1, registry=rules, sections=sections)

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
