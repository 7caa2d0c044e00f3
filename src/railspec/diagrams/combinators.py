# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Construct combinators for grammar productions.

Every grammar rule body is written against the wrappers in this module rather
than against `railroad` directly. The diagram-primitive library has shipped
primitives both as plain factory functions (`Optional`, `ZeroOrMore`) and as
classes, and a class may refuse a plain call and insist on being instantiated.
`call_or_new` hides that difference behind a single call signature so that
rule bodies never special-case it.
"""

from __future__ import annotations

import logging
import re

from collections.abc import Callable
from typing import Any, Final

import railroad

from railroad import DiagramItem

from railspec.exceptions import ConstructionError


logger = logging.getLogger(__name__)

type Node = str | DiagramItem
type Primitive = Callable[..., Any]

MISSING_RULE_CLASS: Final[str] = "missing-rule"
"""CSS class carried by the comment of a placeholder diagram."""

_INSTANTIATION_REQUIRED: Final[re.Pattern[str]] = re.compile(
    r"cannot be invoked without 'new'|must be instantiated"
)


def _instantiate(cls: type[Any], *args: Any, **kwargs: Any) -> Any:
    """Build an instance of `cls` without going through its metaclass `__call__`."""
    instance = (
        cls.__new__(cls) if cls.__new__ is object.__new__ else cls.__new__(cls, *args, **kwargs)
    )
    instance.__init__(*args, **kwargs)
    return instance


def call_or_new(primitive: Primitive, *args: Any, **kwargs: Any) -> Any:
    """Invoke a diagram primitive regardless of its calling convention.

    The primitive is called plainly first. If that fails with the known
    "must be instantiated" `TypeError` and the primitive is a class, it is
    instantiated directly, once. Every other error propagates unchanged.
    """
    try:
        return primitive(*args, **kwargs)
    except TypeError as e:
        if not (isinstance(primitive, type) and _INSTANTIATION_REQUIRED.search(str(e))):
            raise
        logger.debug("%s refused a plain call; instantiating it instead", primitive.__qualname__)
    return _instantiate(primitive, *args, **kwargs)


def Diagram(*items: Node, **kwargs: Any) -> railroad.Diagram:
    """The top-level root of a production."""
    return call_or_new(railroad.Diagram, *items, **kwargs)


def Sequence(*items: Node) -> railroad.Sequence:
    return call_or_new(railroad.Sequence, *items)


def Stack(*items: Node) -> railroad.Stack:
    return call_or_new(railroad.Stack, *items)


def Choice(default: int, *items: Node) -> railroad.Choice:
    """Alternatives; `default` is the branch drawn as the straight-through path."""
    if not 0 <= default < len(items):
        raise ConstructionError(
            "Choice default must index one of its alternatives",
            details={"default": default, "alternatives": len(items)},
        )
    return call_or_new(railroad.Choice, default, *items)


def Optional(item: Node, skip: bool = False) -> railroad.Choice:
    return call_or_new(railroad.Optional, item, skip)


def OneOrMore(item: Node, repeat: Node | None = None) -> railroad.OneOrMore:
    """One or more of `item`, with `repeat` drawn on the loop-back as a separator."""
    return call_or_new(railroad.OneOrMore, item, repeat)


def ZeroOrMore(item: Node, repeat: Node | None = None, skip: bool = False) -> railroad.Choice:
    return call_or_new(railroad.ZeroOrMore, item, repeat, skip)


def Terminal(text: str, href: str | None = None, title: str | None = None, cls: str = "") -> Any:
    return call_or_new(railroad.Terminal, text, href, title, cls)


def NonTerminal(name: str, href: str | None = None, title: str | None = None, cls: str = "") -> Any:
    """A by-name reference to another production; never resolved here."""
    return call_or_new(railroad.NonTerminal, name, href, title, cls)


def Comment(text: str, href: str | None = None, title: str | None = None, cls: str = "") -> Any:
    """Free-form commentary, such as a lookahead restriction."""
    return call_or_new(railroad.Comment, text, href, title, cls)


def T(text: str) -> Any:
    return Terminal(text)


def NT(name: str) -> Any:
    return NonTerminal(name)


def placeholder(name: str) -> railroad.Diagram:
    """The diagram shown for a rule name with no production."""
    return Diagram(Comment(f"No factory defined for {name}", cls=MISSING_RULE_CLASS))


__all__ = (
    "MISSING_RULE_CLASS",
    "NT",
    "Choice",
    "Comment",
    "Diagram",
    "Node",
    "NonTerminal",
    "OneOrMore",
    "Optional",
    "Primitive",
    "Sequence",
    "Stack",
    "T",
    "Terminal",
    "ZeroOrMore",
    "call_or_new",
    "placeholder",
)
