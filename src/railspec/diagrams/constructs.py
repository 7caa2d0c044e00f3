# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Structural view of railroad diagram trees.

`railroad` items are layout objects: they are mutated when formatted, carry
geometry, and have no notion of equality. `describe` turns an item tree into
an immutable `ConstructNode` tree that can be compared, hashed, walked and
serialized. The railroad helpers `Optional` and `ZeroOrMore` build plain
`Choice` items; `describe` folds those shapes back into the construct the rule
author wrote.
"""

from __future__ import annotations

from collections.abc import Iterator

import railroad

from pydantic import NonNegativeInt

from railspec._common import BaseEnum, FrozenModel
from railspec.diagrams.combinators import MISSING_RULE_CLASS
from railspec.exceptions import ConstructionError


class ConstructKind(BaseEnum):
    """The kinds of node in a production's construct tree."""

    DIAGRAM = "diagram"
    TERMINAL = "terminal"
    NON_TERMINAL = "non_terminal"
    SEQUENCE = "sequence"
    CHOICE = "choice"
    OPTIONAL = "optional"
    ONE_OR_MORE = "one_or_more"
    ZERO_OR_MORE = "zero_or_more"
    STACK = "stack"
    ANNOTATION = "annotation"
    SKIP = "skip"


class ConstructNode(FrozenModel):
    """An immutable node of a production's construct tree."""

    kind: ConstructKind
    """What this node is."""

    text: str | None = None
    """Terminal text, referenced rule name, or annotation text."""

    default: NonNegativeInt | None = None
    """Index of the straight-through branch of choice-shaped constructs."""

    children: tuple[ConstructNode, ...] = ()
    """Ordered children (alternatives for a choice)."""

    separator: ConstructNode | None = None
    """The construct drawn on the loop-back of a repetition, if any."""

    target: ConstructNode | None = None
    """The resolved production of a non-terminal, filled in only by expansion."""

    missing: bool = False
    """True for the annotation of a placeholder for an undefined rule."""

    def walk(self, *, expanded: bool = False) -> Iterator[ConstructNode]:
        """Yield this node and its descendants in pre-order.

        Expanded non-terminal targets are visited only when `expanded` is set.
        """
        yield self
        for child in self.children:
            yield from child.walk(expanded=expanded)
        if self.separator is not None:
            yield from self.separator.walk(expanded=expanded)
        if expanded and self.target is not None:
            yield from self.target.walk(expanded=expanded)

    def references(self) -> tuple[str, ...]:
        """Names of the rules this tree refers to, in first-use order."""
        return tuple(
            dict.fromkeys(
                node.text
                for node in self.walk()
                if node.kind is ConstructKind.NON_TERMINAL and node.text is not None
            )
        )

    @property
    def is_placeholder(self) -> bool:
        """Whether this is the stand-in diagram for an undefined rule."""
        return self.kind is ConstructKind.DIAGRAM and any(node.missing for node in self.children)

    @property
    def depth(self) -> int:
        """Height of the tree, counting expanded targets."""
        nested = [*self.children, *(n for n in (self.separator, self.target) if n is not None)]
        return 1 + max((node.depth for node in nested), default=0)


def _is_skip(item: railroad.DiagramItem) -> bool:
    return isinstance(item, railroad.Skip)


def _describe_choice(item: railroad.Choice) -> ConstructNode:
    # Folding is by shape: any two-way Choice led by a Skip reads as optional,
    # including one written out by hand.
    if len(item.items) == 2 and _is_skip(item.items[0]):
        body = item.items[1]
        if isinstance(body, railroad.OneOrMore):
            return ConstructNode(
                kind=ConstructKind.ZERO_OR_MORE,
                default=item.default,
                children=(describe(body.item),),
                separator=None if _is_skip(body.rep) else describe(body.rep),
            )
        return ConstructNode(
            kind=ConstructKind.OPTIONAL, default=item.default, children=(describe(body),)
        )
    return ConstructNode(
        kind=ConstructKind.CHOICE,
        default=item.default,
        children=tuple(describe(child) for child in item.items),
    )


def describe(item: railroad.DiagramItem) -> ConstructNode:
    """Describe a railroad item tree as a `ConstructNode` tree.

    Raises:
        ConstructionError: if the tree holds an item kind railspec does not model.
    """
    match item:
        case railroad.Diagram():
            return ConstructNode(
                kind=ConstructKind.DIAGRAM,
                children=tuple(
                    describe(child)
                    for child in item.items
                    if not isinstance(child, railroad.Start | railroad.End)
                ),
            )
        case railroad.Sequence():
            return ConstructNode(
                kind=ConstructKind.SEQUENCE, children=tuple(describe(c) for c in item.items)
            )
        case railroad.Stack():
            return ConstructNode(
                kind=ConstructKind.STACK, children=tuple(describe(c) for c in item.items)
            )
        case railroad.Choice():
            return _describe_choice(item)
        case railroad.OneOrMore():
            return ConstructNode(
                kind=ConstructKind.ONE_OR_MORE,
                children=(describe(item.item),),
                separator=None if _is_skip(item.rep) else describe(item.rep),
            )
        case railroad.Terminal():
            return ConstructNode(kind=ConstructKind.TERMINAL, text=item.text)
        case railroad.NonTerminal():
            return ConstructNode(kind=ConstructKind.NON_TERMINAL, text=item.text)
        case railroad.Comment():
            return ConstructNode(
                kind=ConstructKind.ANNOTATION,
                text=item.text,
                missing=MISSING_RULE_CLASS in (item.cls or "").split(),
            )
        case railroad.Skip():
            return ConstructNode(kind=ConstructKind.SKIP)
        case _:
            raise ConstructionError(
                f"Cannot describe diagram item {type(item).__name__}",
                details={"primitive": type(item).__name__},
            )


ConstructNode.model_rebuild()

__all__ = ("ConstructKind", "ConstructNode", "describe")
