# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Textual (EBNF-style) definitions of grammar rules.

The table is authored independently of the diagrams and is kept as inert
text. It is one half of the coverage invariant: its key set must equal the
rule registry's. Definitions follow the ECMAScript specification notation:

    Name[Params] ::        lexical production
    Name[Params] :         syntactic production
    Name :: one of         a list of single-token alternatives

with one alternative per following line.
"""

from __future__ import annotations

import re

from collections.abc import Iterator, Mapping
from functools import cached_property
from types import MappingProxyType
from typing import Final, NamedTuple


_HEAD_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""^(?P<name>[A-Za-z_$][\w$]*)
        (?:\[(?P<params>[^\]]*)\])?
        \s+(?P<sep>:::|::|:)
        (?P<one_of>\s+one\s+of)?
        \s*$""",
    re.VERBOSE,
)


class ProductionHead(NamedTuple):
    """The first line of a textual definition.

    Attributes:
        name: The production name as written in the text
        parameters: Grammar parameters such as `Sep` or `Yield`
        lexical: Whether the production is lexical (`::`) rather than syntactic (`:`)
        one_of: Whether the alternatives are a `one of` token list
    """

    name: str
    parameters: tuple[str, ...]
    lexical: bool
    one_of: bool


class TextualDefinition(NamedTuple):
    """A parsed textual definition."""

    head: ProductionHead
    alternatives: tuple[str, ...]

    @property
    def is_lexical(self) -> bool:
        return self.head.lexical


def parse_head(line: str) -> ProductionHead | None:
    """Parse a definition's first line, or return None if it is not a production head."""
    if not (match := _HEAD_PATTERN.match(line.strip())):
        return None
    params = match["params"]
    return ProductionHead(
        name=match["name"],
        parameters=tuple(p.strip() for p in params.split(",") if p.strip()) if params else (),
        lexical=match["sep"] != ":",
        one_of=match["one_of"] is not None,
    )


def parse_definition(text: str) -> TextualDefinition | None:
    """Split a definition into its head and its alternatives."""
    first, _, rest = text.partition("\n")
    if (head := parse_head(first)) is None:
        return None
    lines = tuple(line.strip() for line in rest.splitlines() if line.strip())
    if head.one_of:
        lines = tuple(token for line in lines for token in line.split())
    return TextualDefinition(head=head, alternatives=lines)


class TextualDefinitionTable:
    """A read-only, name-keyed table of canonical definition text."""

    def __init__(self, definitions: Mapping[str, str]) -> None:
        """Copy `definitions` into a read-only table."""
        self._definitions: MappingProxyType[str, str] = MappingProxyType(dict(definitions))

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __repr__(self) -> str:
        return f"TextualDefinitionTable(definitions={len(self)})"

    @property
    def definitions(self) -> MappingProxyType[str, str]:
        return self._definitions

    def text_for(self, name: str) -> str | None:
        """The definition text for `name`, or None when there is none."""
        return self._definitions.get(name)

    def names(self) -> frozenset[str]:
        """Every rule name with a textual definition."""
        return frozenset(self._definitions)

    def definition_for(self, name: str) -> TextualDefinition | None:
        """The parsed definition for `name`, or None when absent or malformed."""
        return parse_definition(text) if (text := self.text_for(name)) is not None else None

    def head_of(self, name: str) -> ProductionHead | None:
        return definition.head if (definition := self.definition_for(name)) else None

    @cached_property
    def _mismatched(self) -> tuple[str, ...]:
        return tuple(
            name
            for name in self._definitions
            if (head := self.head_of(name)) is None or head.name != name
        )

    def mismatched_heads(self) -> tuple[str, ...]:
        """Keys whose text does not start with a production head of the same name."""
        return self._mismatched


__all__ = (
    "ProductionHead",
    "TextualDefinition",
    "TextualDefinitionTable",
    "parse_definition",
    "parse_head",
)
