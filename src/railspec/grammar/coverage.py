# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Coverage between a grammar's diagrams and its textual definitions.

`diagram_rule_names` and `textual_rule_names` are the enumeration primitives:
exact, complete name sets with no normalization, so that any difference in
spelling or casing shows up as drift. `check_coverage` compares them (and the
section index) and returns a report; nothing here raises unless a caller asks
for it with `CoverageReport.raise_for_drift`.
"""

from __future__ import annotations

import logging

from typing import TYPE_CHECKING, Annotated

from pydantic import Field, computed_field

from railspec._common import FrozenModel
from railspec.exceptions import CoverageDriftError


if TYPE_CHECKING:
    from railspec.grammar.grammar import Grammar


logger = logging.getLogger(__name__)


def diagram_rule_names(grammar: Grammar) -> frozenset[str]:
    """Every rule name the grammar has a diagram production for."""
    return grammar.registry.names()


def textual_rule_names(grammar: Grammar) -> frozenset[str]:
    """Every rule name the grammar has a textual definition for."""
    return grammar.definitions.names()


class CoverageReport(FrozenModel):
    """Findings of a coverage check over one grammar edition."""

    edition: str
    """The edition the report is about."""

    has_textual_definitions: bool
    """False when the edition ships no textual table; name-set drift is not checked then."""

    diagram_only: tuple[str, ...] = ()
    """Rules with a diagram but no textual definition."""

    textual_only: tuple[str, ...] = ()
    """Rules with a textual definition but no diagram."""

    unsectioned: tuple[str, ...] = ()
    """Rules with a diagram that no section lists."""

    unknown_in_sections: tuple[str, ...] = ()
    """Names listed in a section that have no diagram."""

    multiply_sectioned: tuple[str, ...] = ()
    """Names listed more than once across all sections."""

    dangling_references: Annotated[
        dict[str, tuple[str, ...]], Field(default_factory=dict)
    ]
    """Rules referencing names that have no diagram, with the missing names."""

    mismatched_heads: tuple[str, ...] = ()
    """Textual definitions whose text names a different production than their key."""

    @computed_field
    @property
    def has_drift(self) -> bool:
        """Whether the diagram and textual name sets differ."""
        return bool(self.diagram_only or self.textual_only)

    @computed_field
    @property
    def has_structural_findings(self) -> bool:
        """Whether the section index or references hold any finding."""
        return bool(
            self.unsectioned
            or self.unknown_in_sections
            or self.multiply_sectioned
            or self.dangling_references
            or self.mismatched_heads
        )

    def is_clean(self, *, strict: bool = False) -> bool:
        """No drift, and with `strict`, no structural findings either."""
        return not self.has_drift and not (strict and self.has_structural_findings)

    def raise_for_drift(self, *, strict: bool = False) -> None:
        """Raise `CoverageDriftError` unless the report `is_clean`."""
        if self.is_clean(strict=strict):
            return
        raise CoverageDriftError(
            f"Coverage check failed for {self.edition}",
            details={
                "edition": self.edition,
                "diagram_only": list(self.diagram_only),
                "textual_only": list(self.textual_only),
                **(
                    {
                        "unsectioned": list(self.unsectioned),
                        "unknown_in_sections": list(self.unknown_in_sections),
                        "multiply_sectioned": list(self.multiply_sectioned),
                        "dangling_references": dict(self.dangling_references),
                        "mismatched_heads": list(self.mismatched_heads),
                    }
                    if strict
                    else {}
                ),
            },
            suggestions=[
                "Add the missing textual definitions or diagrams so both name sets match exactly",
                "Rule names are compared verbatim; check casing and spelling",
            ],
        )


def check_coverage(grammar: Grammar) -> CoverageReport:
    """Compare a grammar's representations and collect every finding."""
    diagrams = diagram_rule_names(grammar)
    listed = grammar.sections.all_rule_names()
    has_textual = grammar.has_textual_definitions
    textual = textual_rule_names(grammar) if has_textual else diagrams
    report = CoverageReport(
        edition=str(grammar.edition),
        has_textual_definitions=has_textual,
        diagram_only=tuple(sorted(diagrams - textual)),
        textual_only=tuple(sorted(textual - diagrams)),
        unsectioned=tuple(sorted(diagrams - set(listed))),
        unknown_in_sections=tuple(sorted(set(listed) - diagrams)),
        multiply_sectioned=tuple(sorted({name for name in listed if listed.count(name) > 1})),
        dangling_references=grammar.registry.dangling_references(),
        mismatched_heads=grammar.definitions.mismatched_heads(),
    )
    if report.has_drift:
        logger.warning(
            "%s: %d diagram-only and %d textual-only rules",
            grammar.title,
            len(report.diagram_only),
            len(report.textual_only),
        )
    return report


__all__ = ("CoverageReport", "check_coverage", "diagram_rule_names", "textual_rule_names")
