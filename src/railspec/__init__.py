# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""railspec: railroad-diagram models of the ECMAScript grammars."""

from railspec._version import __version__
from railspec.exceptions import (
    ConfigurationError,
    ConstructionError,
    CoverageDriftError,
    GrammarError,
    RailspecError,
    RegistryFrozenError,
    UnknownEditionError,
    UnknownSectionError,
)
from railspec.grammar import Grammar, GrammarEdition, check_coverage, get_grammar


__all__ = (
    "ConfigurationError",
    "ConstructionError",
    "CoverageDriftError",
    "Grammar",
    "GrammarEdition",
    "GrammarError",
    "RailspecError",
    "RegistryFrozenError",
    "UnknownEditionError",
    "UnknownSectionError",
    "__version__",
    "check_coverage",
    "get_grammar",
)
