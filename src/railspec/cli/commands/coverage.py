# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Coverage command: check that diagrams, textual definitions and sections agree.

Exits with status 1 when any selected edition has drift between its diagram
and textual rule sets, or, with `--strict`, any structural finding.
"""

from __future__ import annotations

import sys

from collections.abc import Sequence
from typing import Annotated, Literal

import cyclopts

from cyclopts import App
from rich.table import Table

from railspec.cli.utils import (
    ALL_EDITIONS,
    console,
    exit_with_error,
    load_settings,
    selected_editions,
)
from railspec.common import RAILSPEC_PREFIX
from railspec.exceptions import RailspecError
from railspec.grammar import CoverageReport, check_coverage, get_grammar


app = App(
    "coverage",
    help="Check that every diagram has a textual definition and vice versa.",
    console=console,
)


def _names(names: Sequence[str], *, limit: int = 8) -> str:
    if not names:
        return "[dim]none[/dim]"
    shown = ", ".join(names[:limit])
    return f"{shown}, … (+{len(names) - limit})" if len(names) > limit else shown


def _display_report(report: CoverageReport, title: str, *, strict: bool) -> None:
    table = Table(show_header=True, header_style="bold blue", title=title)
    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Count", style="yellow", justify="right")
    table.add_column("Rules", style="white")

    if report.has_textual_definitions:
        table.add_row("Diagram only", str(len(report.diagram_only)), _names(report.diagram_only))
        table.add_row("Textual only", str(len(report.textual_only)), _names(report.textual_only))
        table.add_row(
            "Mismatched heads", str(len(report.mismatched_heads)), _names(report.mismatched_heads)
        )
    else:
        table.add_row("Textual definitions", "-", "[dim]not shipped for this edition[/dim]")
    table.add_row("Unsectioned", str(len(report.unsectioned)), _names(report.unsectioned))
    table.add_row(
        "Unknown in sections",
        str(len(report.unknown_in_sections)),
        _names(report.unknown_in_sections),
    )
    table.add_row(
        "Listed twice", str(len(report.multiply_sectioned)), _names(report.multiply_sectioned)
    )
    dangling = sorted({ref for refs in report.dangling_references.values() for ref in refs})
    table.add_row("Dangling references", str(len(dangling)), _names(dangling))
    console.print(table)

    if report.is_clean(strict=strict):
        console.print(f"{RAILSPEC_PREFIX} [green]✓ {title} is consistent[/green]\n")
    else:
        console.print(f"{RAILSPEC_PREFIX} [red]✗ {title} has coverage problems[/red]\n")


@app.default
def coverage(
    *,
    edition: Annotated[
        str | None,
        cyclopts.Parameter(
            name=["--edition", "-e"], help="Edition to check, or `all` (default: all)"
        ),
    ] = None,
    strict: bool = False,
    output_format: Literal["table", "json"] = "table",
) -> None:
    """Check grammar coverage.

    Args:
        edition: Edition to check, or `all`
        strict: Also fail on section and reference findings
        output_format: Output as a table or as JSON
    """
    settings = load_settings()
    strict = strict or settings.strict_coverage
    try:
        editions = selected_editions(
            edition or ALL_EDITIONS, settings.default_edition, allow_all=True
        )
        grammars = [get_grammar(e) for e in editions]
    except RailspecError as e:
        exit_with_error(e)

    reports = [check_coverage(grammar) for grammar in grammars]

    if output_format == "json":
        console.print_json(data=[report.model_dump(mode="json") for report in reports])
    else:
        for grammar, report in zip(grammars, reports, strict=True):
            _display_report(report, grammar.title, strict=strict)

    if not all(report.is_clean(strict=strict) for report in reports):
        sys.exit(1)


def main() -> None:
    """Entry point for the coverage command."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[red]Operation cancelled by user.[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()


__all__ = ("app", "coverage")
