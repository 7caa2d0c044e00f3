# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for the rule registry.

Tests validate:
- registration never evaluates a production
- resolution is lazy, per call and unmemoized
- undefined names resolve to a placeholder instead of raising
- forward, self and mutual references need no ordering
- freezing, redefinition, enumeration and expansion
"""

from __future__ import annotations

import logging

import pytest

from railspec.diagrams.combinators import NT, Choice, Diagram, Optional, Sequence, T
from railspec.diagrams.constructs import ConstructKind
from railspec.exceptions import RegistryFrozenError
from railspec.grammar.registry import RuleRegistry


@pytest.fixture
def rules() -> RuleRegistry:
    return RuleRegistry("test")


@pytest.mark.unit
class TestDefine:
    """Tests for registering productions."""

    def test_define_does_not_evaluate(self, rules: RuleRegistry) -> None:
        def exploding():
            raise AssertionError("evaluated at registration")

        rules.define("Boom", exploding)

        assert "Boom" in rules
        assert rules.get("Boom") is exploding

    def test_production_decorator_returns_the_thunk(self, rules: RuleRegistry) -> None:
        @rules.production("Digit")
        def digit():
            return Diagram(Choice(0, T("0"), T("1")))

        assert rules.get("Digit") is digit

    def test_redefinition_replaces_and_warns(
        self, rules: RuleRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        rules.define("A", lambda: Diagram(T("first")))
        with caplog.at_level(logging.WARNING, logger="railspec"):
            rules.define("A", lambda: Diagram(T("second")))

        assert rules.references("A") == ()
        assert rules.describe("A").children[0].text == "second"
        assert len(rules) == 1
        assert "Redefining A" in caplog.text

    def test_frozen_registry_refuses_definitions(self, rules: RuleRegistry) -> None:
        assert rules.freeze() is rules
        assert rules.frozen

        with pytest.raises(RegistryFrozenError) as exc_info:
            rules.define("Late", lambda: Diagram(T("x")))

        assert exc_info.value.details["rule"] == "Late"
        assert "Late" not in rules


@pytest.mark.unit
class TestResolve:
    """Tests for lazy, per-call resolution."""

    def test_each_resolve_builds_a_fresh_diagram(self, rules: RuleRegistry) -> None:
        calls: list[int] = []

        def counted():
            calls.append(1)
            return Diagram(T("x"))

        rules.define("X", counted)

        first, second = rules.resolve("X"), rules.resolve("X")

        assert first is not second
        assert len(calls) == 2

    def test_forward_and_self_references(self, rules: RuleRegistry) -> None:
        rules.define("List", lambda: Diagram(Sequence(NT("Item"), Optional(NT("List")))))
        rules.define("Item", lambda: Diagram(T("x")))

        assert rules.references("List") == ("Item", "List")
        assert rules.resolve("List") is not None

    def test_mutual_references(self, rules: RuleRegistry) -> None:
        rules.define("Even", lambda: Diagram(Optional(Sequence(T("a"), NT("Odd")))))
        rules.define("Odd", lambda: Diagram(Sequence(T("a"), NT("Even"))))

        assert rules.references("Even") == ("Odd",)
        assert rules.references("Odd") == ("Even",)

    def test_undefined_name_resolves_to_placeholder(
        self, rules: RuleRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="railspec"):
            node = rules.describe("Nowhere")

        assert node.is_placeholder
        assert node.children[0].text == "No factory defined for Nowhere"
        assert "Nowhere" in caplog.text

    def test_undefined_name_is_not_registered(self, rules: RuleRegistry) -> None:
        rules.resolve("Nowhere")

        assert "Nowhere" not in rules
        assert rules.names() == frozenset()


@pytest.mark.unit
class TestEnumeration:
    """Tests for enumerating the defined names."""

    def test_names_iteration_and_len(self, rules: RuleRegistry) -> None:
        for name in ("C", "A", "B"):
            rules.define(name, lambda: Diagram(T("x")))

        assert rules.names() == frozenset({"A", "B", "C"})
        assert list(rules) == ["C", "A", "B"]
        assert len(rules) == 3

    def test_rules_view_is_read_only(self, rules: RuleRegistry) -> None:
        rules.define("A", lambda: Diagram(T("x")))

        with pytest.raises(TypeError):
            rules.rules["B"] = lambda: Diagram(T("y"))  # type: ignore[index]

    def test_dangling_references(self, rules: RuleRegistry) -> None:
        rules.define("A", lambda: Diagram(Sequence(NT("B"), NT("Gone"), NT("Lost"))))
        rules.define("B", lambda: Diagram(NT("A")))

        assert rules.dangling_references() == {"A": ("Gone", "Lost")}


@pytest.mark.unit
class TestExpand:
    """Tests for bounded expansion of references."""

    def test_depth_zero_leaves_references_as_names(self, number_registry: RuleRegistry) -> None:
        node = number_registry.expand("Number", depth=0)

        assert all(n.target is None for n in node.walk())

    def test_depth_one_resolves_direct_references(self, number_registry: RuleRegistry) -> None:
        node = number_registry.expand("Number", depth=1)
        targets = [n.target for n in node.walk() if n.kind is ConstructKind.NON_TERMINAL]

        assert len(targets) == 2
        assert all(t is not None and t.kind is ConstructKind.DIAGRAM for t in targets)
        assert targets[0] == number_registry.describe("Digit")

    def test_recursive_rule_expansion_terminates(self, rules: RuleRegistry) -> None:
        rules.define("Nest", lambda: Diagram(Optional(Sequence(T("("), NT("Nest"), T(")")))))

        node = rules.expand("Nest", depth=3)
        chain = [n for n in node.walk(expanded=True) if n.kind is ConstructKind.NON_TERMINAL]

        assert len(chain) == 4
        assert chain[-1].target is None

    def test_expanding_a_missing_reference_gives_a_placeholder(self, rules: RuleRegistry) -> None:
        rules.define("A", lambda: Diagram(NT("Gone")))

        (reference,) = [
            n for n in rules.expand("A").walk() if n.kind is ConstructKind.NON_TERMINAL
        ]

        assert reference.target is not None
        assert reference.target.is_placeholder

    def test_negative_depth_is_rejected(self, rules: RuleRegistry) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            rules.expand("A", depth=-1)
