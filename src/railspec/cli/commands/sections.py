# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Sections command: list an edition's sections and their rules in order."""

from __future__ import annotations

import sys

from typing import Annotated

import cyclopts

from cyclopts import App
from rich.table import Table

from railspec.cli.utils import console, exit_with_error, load_settings, selected_editions
from railspec.common import RAILSPEC_PREFIX
from railspec.exceptions import RailspecError
from railspec.grammar import get_grammar


app = App("sections", help="List the sections of a grammar edition.", console=console)


@app.default
def sections(
    *,
    edition: Annotated[
        str | None, cyclopts.Parameter(name=["--edition", "-e"], help="Edition to list")
    ] = None,
    query: Annotated[
        str | None,
        cyclopts.Parameter(name=["--filter", "-f"], help="Only rules whose name contains this"),
    ] = None,
) -> None:
    """List sections and the rules in each, in presentation order.

    Args:
        edition: Edition to list (default from settings)
        query: Case-insensitive substring a rule name must contain
    """
    settings = load_settings()
    try:
        (selected,) = selected_editions(edition, settings.default_edition)
        grammar = get_grammar(selected)
    except RailspecError as e:
        exit_with_error(e)

    rules_by_section = grammar.sections.filtered(query or "")

    table = Table(show_header=True, header_style="bold blue", title=grammar.title)
    table.add_column("Section", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Rules", style="yellow", justify="right")
    table.add_column("Names", style="white")

    for section in grammar.sections_in_order():
        rules = rules_by_section[section]
        if query and not rules:
            continue
        table.add_row(section, grammar.title_for(section), str(len(rules)), ", ".join(rules))

    if table.row_count == 0:
        console.print(f"{RAILSPEC_PREFIX} [yellow]No rules match {query!r}[/yellow]")
        return
    console.print(table)


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(1)


__all__ = ("app", "sections")
