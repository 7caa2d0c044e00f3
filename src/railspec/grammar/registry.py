# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""RuleRegistry stores the named productions of one grammar edition.

A production is registered as a zero-argument thunk that builds the rule's
diagram. Registering never evaluates the thunk, and a thunk refers to other
rules only through `NT("Name")` nodes, which are names, not objects. Rules can
therefore be registered in any order and may refer to themselves or to each
other; nothing is resolved until a diagram is requested, and even then only
one level deep.
"""

from __future__ import annotations

import logging

from collections.abc import Callable, Iterator
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

from railspec.diagrams.combinators import placeholder
from railspec.diagrams.constructs import ConstructKind, ConstructNode, describe
from railspec.exceptions import RegistryFrozenError


if TYPE_CHECKING:
    import railroad


logger = logging.getLogger(__name__)

type RuleName = str
type ProductionThunk = Callable[[], railroad.Diagram]


class RuleRegistry:
    """Registry of the productions of a single grammar edition.

    Responsibilities:
        - A name-keyed store of production thunks, filled once at import
        - Per-call resolution of a name to a fresh diagram, with a visible
          placeholder for names that have no production
        - Enumeration of every defined name for coverage checks

    Resolution is deliberately not memoized: railroad items are mutated when
    they are laid out, so every caller gets a tree of its own.
    """

    def __init__(self, edition: str) -> None:
        """Initialize an empty registry for `edition`."""
        self.edition = edition
        self._rules: dict[RuleName, ProductionThunk] = {}
        self._frozen = False

    def __contains__(self, name: object) -> bool:
        """Check whether a production is registered under `name`."""
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[RuleName]:
        """Iterate rule names in registration order."""
        return iter(tuple(self._rules))

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "loading"
        return f"RuleRegistry({self.edition!r}, rules={len(self)}, {state})"

    @property
    def frozen(self) -> bool:
        """Whether the registry has finished loading."""
        return self._frozen

    @property
    def rules(self) -> MappingProxyType[RuleName, ProductionThunk]:
        """A read-only view of the registered thunks."""
        return MappingProxyType(self._rules)

    def define(self, name: RuleName, thunk: ProductionThunk) -> None:
        """Register `thunk` as the production for `name`.

        Redefining a name replaces the earlier production. That is a data-entry
        mistake rather than a runtime fault, so it is logged, not refused.

        Raises:
            RegistryFrozenError: if the registry has already been frozen.
        """
        if self._frozen:
            raise RegistryFrozenError(
                "Cannot define a production after the registry was frozen",
                details={"edition": self.edition, "rule": name},
                suggestions=["Define every production in the edition module before it calls freeze()"],
            )
        if name in self._rules:
            logger.warning("Redefining %s in %s; the last definition wins", name, self.edition)
        self._rules[name] = thunk
        logger.debug("Registered %s in %s", name, self.edition)

    def production(self, name: RuleName) -> Callable[[ProductionThunk], ProductionThunk]:
        """Decorator form of `define`.

        Example:
            >>> @rules.production("Digit")
            ... def _():
            ...     return Diagram(Choice(0, T("0"), T("1")))
        """

        def register(thunk: ProductionThunk) -> ProductionThunk:
            self.define(name, thunk)
            return thunk

        return register

    def freeze(self) -> Self:
        """Finish loading; any later `define` raises."""
        self._frozen = True
        logger.debug("Froze %s with %d productions", self.edition, len(self._rules))
        return self

    def get(self, name: RuleName) -> ProductionThunk | None:
        """Return the thunk registered for `name`, if any."""
        return self._rules.get(name)

    def resolve(self, name: RuleName) -> railroad.Diagram:
        """Build a fresh diagram for `name`.

        Names without a production resolve to a placeholder diagram whose
        comment reads "No factory defined for <name>" instead of raising, so
        one stale reference cannot break a whole page.
        """
        if (thunk := self._rules.get(name)) is None:
            logger.warning("No production for %s in %s; using a placeholder", name, self.edition)
            return placeholder(name)
        return thunk()

    def names(self) -> frozenset[RuleName]:
        """Every defined rule name."""
        return frozenset(self._rules)

    def describe(self, name: RuleName) -> ConstructNode:
        """Resolve `name` and describe the result."""
        return describe(self.resolve(name))

    def references(self, name: RuleName) -> tuple[RuleName, ...]:
        """Rule names referenced by the production of `name`, in first-use order."""
        return self.describe(name).references()

    def expand(self, name: RuleName, depth: int = 1) -> ConstructNode:
        """Describe `name` with its references resolved `depth` levels deep.

        Each non-terminal within reach gets a `target` holding the described
        production it names. References beyond `depth` are left as plain
        names, so the result is finite even for recursive rules.
        """
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        return self._expand(self.describe(name), depth)

    def _expand(self, node: ConstructNode, depth: int) -> ConstructNode:
        if node.kind is ConstructKind.NON_TERMINAL:
            if depth == 0 or node.text is None:
                return node
            return node.model_copy(
                update={"target": self._expand(self.describe(node.text), depth - 1)}
            )
        if not node.children and node.separator is None:
            return node
        return node.model_copy(
            update={
                "children": tuple(self._expand(child, depth) for child in node.children),
                "separator": None
                if node.separator is None
                else self._expand(node.separator, depth),
            }
        )

    def dangling_references(self) -> dict[RuleName, tuple[RuleName, ...]]:
        """Map each rule to the names it references that have no production here."""
        dangling: dict[RuleName, tuple[RuleName, ...]] = {}
        for name in self._rules:
            if missing := tuple(ref for ref in self.references(name) if ref not in self._rules):
                dangling[name] = missing
        return dangling


__all__ = ("ProductionThunk", "RuleName", "RuleRegistry")
