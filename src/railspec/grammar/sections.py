# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""The section index: an ordered, titled grouping of rule names.

Ordering is significant everywhere here: it is the navigation order of a
rendered grammar. The index does no checking against a rule registry; that is
what `railspec.grammar.coverage` is for.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Annotated, Self

from pydantic import Field, model_validator

from railspec._common import FrozenModel
from railspec.exceptions import UnknownSectionError


type SectionId = str


class Section(FrozenModel):
    """One titled group of rules."""

    id: Annotated[SectionId, Field(min_length=1)]
    """Stable identifier, used as a page anchor."""

    title: str
    """Human-readable heading."""

    rules: tuple[str, ...] = ()
    """Rule names in presentation order."""


class SectionIndex(FrozenModel):
    """Ordered sections of one grammar edition."""

    sections: tuple[Section, ...]

    @model_validator(mode="after")
    def _unique_ids(self) -> Self:
        ids = [s.id for s in self.sections]
        if duplicates := sorted({i for i in ids if ids.count(i) > 1}):
            raise ValueError(f"Duplicate section ids: {', '.join(duplicates)}")
        return self

    @classmethod
    def from_tables(
        cls,
        order: Sequence[SectionId],
        titles: Mapping[SectionId, str],
        rules: Mapping[SectionId, Sequence[str]],
    ) -> Self:
        """Build an index from the three parallel tables an edition is written as."""
        return cls(
            sections=tuple(
                Section(id=section, title=titles[section], rules=tuple(rules.get(section, ())))
                for section in order
            )
        )

    def _section(self, section: SectionId) -> Section:
        if found := next((s for s in self.sections if s.id == section), None):
            return found
        raise UnknownSectionError(
            f"Unknown section {section!r}",
            details={"section": section},
            suggestions=[f"Known sections: {', '.join(self.sections_in_order())}"],
        )

    def sections_in_order(self) -> tuple[SectionId, ...]:
        return tuple(s.id for s in self.sections)

    def rules_for(self, section: SectionId) -> tuple[str, ...]:
        return self._section(section).rules

    def title_for(self, section: SectionId) -> str:
        return self._section(section).title

    def section_of(self, rule: str) -> SectionId | None:
        """The first section listing `rule`, or None."""
        return next((s.id for s in self.sections if rule in s.rules), None)

    def all_rule_names(self) -> tuple[str, ...]:
        """Every listed rule name in section order, duplicates included."""
        return tuple(rule for s in self.sections for rule in s.rules)

    def filtered(self, query: str) -> dict[SectionId, tuple[str, ...]]:
        """Rules per section whose name contains `query`, ignoring case.

        Every section is present in the result, possibly empty; a blank query
        keeps every rule.
        """
        needle = query.strip().lower()
        return {
            s.id: tuple(rule for rule in s.rules if needle in rule.lower()) for s in self.sections
        }


__all__ = ("Section", "SectionId", "SectionIndex")
