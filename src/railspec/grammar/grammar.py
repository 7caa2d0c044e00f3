# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Grammar provides the primary API for one edition of a language's grammar.

A Grammar bundles an edition's rule registry, section index and textual
definition table. Editions are separate instances with separate registries,
so a `NT("Expression")` in one edition can only ever resolve against that
edition's own productions.
"""

from __future__ import annotations

import logging

from dataclasses import dataclass, field
from functools import cache
from importlib import import_module
from typing import TYPE_CHECKING

from railspec._common import BaseEnum
from railspec.exceptions import UnknownEditionError
from railspec.grammar.definitions import TextualDefinitionTable


if TYPE_CHECKING:
    import railroad

    from railspec.diagrams.constructs import ConstructNode
    from railspec.grammar.registry import RuleName, RuleRegistry
    from railspec.grammar.sections import SectionId, SectionIndex


logger = logging.getLogger(__name__)


class GrammarEdition(BaseEnum):
    """The grammar editions railspec ships."""

    ES5_1 = "es5.1"
    ES2025 = "es2025"

    @property
    def display_name(self) -> str:
        return {
            GrammarEdition.ES5_1: "ECMAScript 5.1",
            GrammarEdition.ES2025: "ECMAScript 2025",
        }[self]

    @property
    def aka(self) -> tuple[str, ...]:
        """Every spelling this edition answers to, including its common short names."""
        extra = {
            GrammarEdition.ES5_1: ("es5", "ecmascript5", "ecmascript5.1"),
            GrammarEdition.ES2025: ("ecmascript2025",),
        }[self]
        return tuple(sorted({*super().aka, *extra}))

    @property
    def module_name(self) -> str:
        """The module that builds this edition."""
        return {
            GrammarEdition.ES5_1: "railspec.editions.es5",
            GrammarEdition.ES2025: "railspec.editions.es2025",
        }[self]


@dataclass(frozen=True, slots=True)
class Grammar:
    """One grammar edition: productions, sections and textual definitions."""

    edition: GrammarEdition
    registry: RuleRegistry
    sections: SectionIndex
    definitions: TextualDefinitionTable = field(
        default_factory=lambda: TextualDefinitionTable({})
    )

    @property
    def title(self) -> str:
        return self.edition.display_name

    @property
    def has_textual_definitions(self) -> bool:
        """Whether this edition ships a textual definition table at all."""
        return len(self.definitions) > 0

    def resolve(self, name: RuleName) -> railroad.Diagram:
        """A fresh diagram for `name`; a placeholder when the rule is undefined."""
        return self.registry.resolve(name)

    def describe(self, name: RuleName) -> ConstructNode:
        return self.registry.describe(name)

    def expand(self, name: RuleName, depth: int = 1) -> ConstructNode:
        return self.registry.expand(name, depth)

    def sections_in_order(self) -> tuple[SectionId, ...]:
        return self.sections.sections_in_order()

    def rules_for(self, section: SectionId) -> tuple[str, ...]:
        return self.sections.rules_for(section)

    def title_for(self, section: SectionId) -> str:
        return self.sections.title_for(section)

    def text_for(self, name: RuleName) -> str | None:
        return self.definitions.text_for(name)

    def diagram_rule_names(self) -> frozenset[RuleName]:
        """Every rule name with a diagram production."""
        return self.registry.names()

    def textual_rule_names(self) -> frozenset[RuleName]:
        """Every rule name with a textual definition."""
        return self.definitions.names()


def coerce_edition(edition: GrammarEdition | str) -> GrammarEdition:
    """Turn a loose edition spelling into a `GrammarEdition`.

    Raises:
        UnknownEditionError: if nothing matches.
    """
    if isinstance(edition, GrammarEdition):
        return edition
    try:
        return GrammarEdition.from_string(edition)
    except ValueError as e:
        raise UnknownEditionError(
            f"Unknown grammar edition {edition!r}",
            details={"edition": edition},
            suggestions=[f"Use one of: {', '.join(GrammarEdition.values())}"],
        ) from e


@cache
def _load(edition: GrammarEdition) -> Grammar:
    module = import_module(edition.module_name)
    grammar: Grammar = module.GRAMMAR
    logger.debug(
        "Loaded %s: %d productions, %d sections, %d textual definitions",
        edition.display_name,
        len(grammar.registry),
        len(grammar.sections.sections),
        len(grammar.definitions),
    )
    return grammar


def get_grammar(edition: GrammarEdition | str = GrammarEdition.ES2025) -> Grammar:
    """Get the grammar for `edition`, importing its module on first use."""
    return _load(coerce_edition(edition))


def all_grammars() -> tuple[Grammar, ...]:
    """Every shipped edition, oldest first."""
    return tuple(get_grammar(edition) for edition in GrammarEdition)


__all__ = ("Grammar", "GrammarEdition", "all_grammars", "coerce_edition", "get_grammar")
