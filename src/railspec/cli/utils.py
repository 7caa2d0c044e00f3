# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys

from typing import TYPE_CHECKING, NoReturn

from rich.console import Console

from railspec.common import RAILSPEC_PREFIX, setup_logger
from railspec.grammar.grammar import GrammarEdition, coerce_edition
from railspec.settings import get_settings


if TYPE_CHECKING:
    from railspec.exceptions import RailspecError
    from railspec.settings import RailspecSettings


ALL_EDITIONS = "all"

console = Console(markup=True, emoji=True)


def load_settings() -> RailspecSettings:
    """Load settings and configure logging from them, exiting on invalid configuration."""
    from railspec.exceptions import ConfigurationError

    try:
        settings = get_settings()
    except ConfigurationError as e:
        exit_with_error(e)
    setup_logger("railspec", level=settings.log_level, rich=settings.rich_logging)
    return settings


def exit_with_error(error: RailspecError) -> NoReturn:
    """Print a railspec error with its suggestions and exit with status 1."""
    console.print(f"{RAILSPEC_PREFIX} [red]Error: {error}[/red]")
    if error.suggestions:
        console.print("[yellow]Suggestions:[/yellow]")
        for suggestion in error.suggestions:
            console.print(f"  • {suggestion}")
    sys.exit(1)


def selected_editions(
    edition: str | None, default: GrammarEdition, *, allow_all: bool = False
) -> tuple[GrammarEdition, ...]:
    """Turn an `--edition` option into the editions it selects.

    `None` selects `default`; with `allow_all`, the literal `all` selects
    every shipped edition.

    Raises:
        UnknownEditionError: if `edition` names no shipped edition.
    """
    if edition is None:
        return (default,)
    if allow_all and edition.strip().lower() == ALL_EDITIONS:
        return tuple(GrammarEdition)
    return (coerce_edition(edition),)


__all__ = ("ALL_EDITIONS", "console", "exit_with_error", "load_settings", "selected_editions")
