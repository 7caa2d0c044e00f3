# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for textual definitions."""

from __future__ import annotations

import pytest

from railspec.grammar.definitions import (
    ProductionHead,
    TextualDefinitionTable,
    parse_definition,
    parse_head,
)


@pytest.mark.unit
class TestParseHead:
    """Tests for reading production heads."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("WhiteSpace ::", ProductionHead("WhiteSpace", (), lexical=True, one_of=False)),
            ("Statement :", ProductionHead("Statement", (), lexical=False, one_of=False)),
            ("HexDigit :: one of", ProductionHead("HexDigit", (), lexical=True, one_of=True)),
            (
                "DecimalDigits[Sep] ::",
                ProductionHead("DecimalDigits", ("Sep",), lexical=True, one_of=False),
            ),
            (
                "Block[Yield, Await, Return] :",
                ProductionHead("Block", ("Yield", "Await", "Return"), lexical=False, one_of=False),
            ),
            ("  Pattern :::  ", ProductionHead("Pattern", (), lexical=True, one_of=False)),
        ],
    )
    def test_heads(self, line: str, expected: ProductionHead) -> None:
        assert parse_head(line) == expected

    @pytest.mark.parametrize("line", ["", "WhiteSpace", "not a head ::", ":: Name", "Name = x"])
    def test_non_heads(self, line: str) -> None:
        assert parse_head(line) is None


@pytest.mark.unit
class TestParseDefinition:
    """Tests for splitting definitions into alternatives."""

    def test_alternatives_one_per_line(self) -> None:
        definition = parse_definition("BooleanLiteral ::\n    true\n    false")

        assert definition is not None
        assert definition.head.name == "BooleanLiteral"
        assert definition.is_lexical
        assert definition.alternatives == ("true", "false")

    def test_one_of_splits_tokens(self) -> None:
        definition = parse_definition("OctalDigit :: one of\n    0 1 2 3\n    4 5 6 7")

        assert definition is not None
        assert definition.alternatives == tuple("01234567")

    def test_malformed_head(self) -> None:
        assert parse_definition("just some prose\n    more prose") is None


@pytest.mark.unit
class TestTextualDefinitionTable:
    """Tests for the name-keyed table."""

    @pytest.fixture
    def table(self) -> TextualDefinitionTable:
        return TextualDefinitionTable({
            "Digit": "Digit :: one of\n    0 1",
            "Misnamed": "Number ::\n    Digit",
            "Prose": "a digit, or two",
        })

    def test_text_is_verbatim(self, table: TextualDefinitionTable) -> None:
        assert table.text_for("Digit") == "Digit :: one of\n    0 1"

    def test_missing_name_has_no_text(self, table: TextualDefinitionTable) -> None:
        assert table.text_for("Nothing") is None
        assert table.definition_for("Nothing") is None

    def test_names_len_and_contains(self, table: TextualDefinitionTable) -> None:
        assert table.names() == frozenset({"Digit", "Misnamed", "Prose"})
        assert len(table) == 3
        assert "Digit" in table

    def test_head_of(self, table: TextualDefinitionTable) -> None:
        head = table.head_of("Digit")

        assert head is not None
        assert head.one_of

    def test_mismatched_heads(self, table: TextualDefinitionTable) -> None:
        assert table.mismatched_heads() == ("Misnamed", "Prose")

    def test_table_is_a_copy(self) -> None:
        source = {"A": "A ::\n    a"}
        table = TextualDefinitionTable(source)
        source["B"] = "B ::\n    b"

        assert "B" not in table

    def test_table_is_read_only(self, table: TextualDefinitionTable) -> None:
        with pytest.raises(TypeError):
            table.definitions["New"] = "New ::"  # type: ignore[index]
