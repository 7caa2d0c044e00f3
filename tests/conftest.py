# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Global pytest configuration and fixtures for railspec tests."""

from __future__ import annotations

import os

from collections.abc import Iterator
from pathlib import Path

import pytest

from railspec.diagrams.combinators import NT, Choice, Diagram, Optional, Sequence, T, ZeroOrMore
from railspec.grammar.definitions import TextualDefinitionTable
from railspec.grammar.grammar import Grammar, GrammarEdition
from railspec.grammar.registry import RuleRegistry
from railspec.grammar.sections import SectionIndex


@pytest.fixture(autouse=True)
def isolated_test_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test away from real configuration.

    - Works in a temporary directory, so no `railspec.toml` is picked up
    - Clears `RAILSPEC_*` environment variables
    - Resets the global settings before and after the test
    """
    from railspec.settings import reset_settings

    for name in [var for var in os.environ if var.upper().startswith("RAILSPEC_")]:
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def number_registry() -> RuleRegistry:
    """A two-rule registry: `Number` refers to `Digit` before `Digit` is defined."""
    rules = RuleRegistry("test")

    @rules.production("Number")
    def number():
        return Diagram(Sequence(Optional(T("-")), NT("Digit"), ZeroOrMore(NT("Digit"))))

    @rules.production("Digit")
    def digit():
        return Diagram(Choice(0, *(T(str(d)) for d in range(10))))

    return rules.freeze()


@pytest.fixture
def number_grammar(number_registry: RuleRegistry) -> Grammar:
    """A complete, consistent grammar built around `number_registry`."""
    return Grammar(
        edition=GrammarEdition.ES2025,
        registry=number_registry,
        sections=SectionIndex.from_tables(
            ("numbers",), {"numbers": "Numbers"}, {"numbers": ("Number", "Digit")}
        ),
        definitions=TextualDefinitionTable({
            "Number": "Number ::\n    -_opt Digit Digits_opt",
            "Digit": "Digit :: one of\n    0 1 2 3 4 5 6 7 8 9",
        }),
    )
