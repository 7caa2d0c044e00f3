# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Diagram construction and inspection: the combinator layer over `railroad`."""

from __future__ import annotations

from railspec.diagrams.combinators import MISSING_RULE_CLASS, call_or_new, placeholder
from railspec.diagrams.constructs import ConstructKind, ConstructNode, describe


__all__ = (
    "MISSING_RULE_CLASS",
    "ConstructKind",
    "ConstructNode",
    "call_or_new",
    "describe",
    "placeholder",
)
