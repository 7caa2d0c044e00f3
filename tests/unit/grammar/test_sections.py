# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for the section index."""

from __future__ import annotations

import pytest

from pydantic import ValidationError

from railspec.exceptions import UnknownSectionError
from railspec.grammar.sections import Section, SectionIndex


@pytest.fixture
def index() -> SectionIndex:
    return SectionIndex.from_tables(
        ("lexical", "expressions", "empty"),
        {"lexical": "Lexical Grammar", "expressions": "Expressions", "empty": "Nothing Yet"},
        {
            "lexical": ("WhiteSpace", "LineTerminator", "Comment"),
            "expressions": ("PrimaryExpression", "Expression", "Comment"),
        },
    )


@pytest.mark.unit
class TestSectionIndex:
    """Tests for ordered, titled sections."""

    def test_sections_keep_declared_order(self, index: SectionIndex) -> None:
        assert index.sections_in_order() == ("lexical", "expressions", "empty")

    def test_rules_and_titles(self, index: SectionIndex) -> None:
        assert index.rules_for("lexical") == ("WhiteSpace", "LineTerminator", "Comment")
        assert index.title_for("expressions") == "Expressions"

    def test_section_missing_from_rules_table_is_empty(self, index: SectionIndex) -> None:
        assert index.rules_for("empty") == ()

    def test_unknown_section_raises(self, index: SectionIndex) -> None:
        with pytest.raises(UnknownSectionError) as exc_info:
            index.rules_for("statements")

        assert exc_info.value.details == {"section": "statements"}
        with pytest.raises(UnknownSectionError):
            index.title_for("statements")

    def test_duplicate_section_ids_are_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate section ids: a"):
            SectionIndex(sections=(Section(id="a", title="A"), Section(id="a", title="Again")))

    def test_section_of_returns_first_listing(self, index: SectionIndex) -> None:
        assert index.section_of("Comment") == "lexical"
        assert index.section_of("Expression") == "expressions"
        assert index.section_of("Statement") is None

    def test_all_rule_names_keeps_duplicates(self, index: SectionIndex) -> None:
        names = index.all_rule_names()

        assert names.count("Comment") == 2
        assert names[:3] == ("WhiteSpace", "LineTerminator", "Comment")

    def test_filtered_is_case_insensitive(self, index: SectionIndex) -> None:
        assert index.filtered("EXPRESSION") == {
            "lexical": (),
            "expressions": ("PrimaryExpression", "Expression"),
            "empty": (),
        }

    def test_blank_filter_keeps_everything(self, index: SectionIndex) -> None:
        assert index.filtered("  ")["lexical"] == index.rules_for("lexical")

    def test_index_is_immutable(self, index: SectionIndex) -> None:
        with pytest.raises(ValidationError):
            index.sections = ()  # type: ignore[misc]
