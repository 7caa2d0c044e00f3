# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Show command: print one rule's textual definition, diagram and references."""

from __future__ import annotations

import sys

from typing import TYPE_CHECKING, Annotated

import cyclopts

from cyclopts import App
from rich.panel import Panel
from rich.text import Text
from rich.tree import Tree

from railspec.cli.utils import console, exit_with_error, load_settings, selected_editions
from railspec.common import RAILSPEC_PREFIX
from railspec.diagrams.constructs import ConstructKind
from railspec.exceptions import RailspecError
from railspec.grammar import get_grammar


if TYPE_CHECKING:
    import railroad

    from railspec.diagrams.constructs import ConstructNode


app = App("show", help="Show a rule's definition and railroad diagram.", console=console)


def diagram_text(diagram: railroad.Diagram) -> str:
    """Render a diagram as plain text art."""
    return "\n".join(diagram.textDiagram().lines)


def _label(node: ConstructNode) -> Text:
    match node.kind:
        case ConstructKind.TERMINAL:
            return Text(f'"{node.text}"', style="green")
        case ConstructKind.NON_TERMINAL:
            return Text(node.text or "", style="bold cyan")
        case ConstructKind.ANNOTATION:
            return Text(node.text or "", style="red" if node.missing else "dim italic")
        case ConstructKind.CHOICE:
            return Text(f"choice (default {node.default})", style="magenta")
        case _:
            return Text(node.kind.as_title, style="magenta")


def construct_tree(node: ConstructNode, tree: Tree | None = None) -> Tree:
    """Build a rich tree of a construct, following expanded non-terminals."""
    branch = Tree(_label(node)) if tree is None else tree.add(_label(node))
    for child in node.children:
        construct_tree(child, branch)
    if node.separator is not None:
        construct_tree(node.separator, branch.add(Text("separator", style="dim")))
    if node.target is not None:
        for child in node.target.children:
            construct_tree(child, branch)
    return branch


@app.default
def show(
    name: str,
    *,
    edition: Annotated[
        str | None, cyclopts.Parameter(name=["--edition", "-e"], help="Edition to look in")
    ] = None,
    depth: Annotated[
        int,
        cyclopts.Parameter(name=["--depth", "-d"], help="Levels of references to expand"),
    ] = 0,
) -> None:
    """Show a rule.

    Args:
        name: The rule name, matched exactly
        edition: Edition to look in (default from settings)
        depth: Levels of referenced rules to expand in the construct tree
    """
    settings = load_settings()
    if depth < 0:
        console.print(f"{RAILSPEC_PREFIX} [red]Error: --depth must be 0 or more[/red]")
        sys.exit(1)
    try:
        (selected,) = selected_editions(edition, settings.default_edition)
        grammar = get_grammar(selected)
    except RailspecError as e:
        exit_with_error(e)

    if name not in grammar.registry:
        console.print(
            f"{RAILSPEC_PREFIX} [yellow]{grammar.title} has no rule named {name!r}[/yellow]"
        )

    section = grammar.sections.section_of(name)
    heading = f"{name} [dim]({grammar.title}"
    heading += f", {grammar.title_for(section)})[/dim]" if section else ")[/dim]"

    if (text := grammar.text_for(name)) is not None:
        console.print(Panel(Text(text), title=heading, title_align="left", border_style="blue"))
    else:
        console.print(
            Panel(Text("No textual definition", style="dim"), title=heading, title_align="left")
        )

    console.print(Text(diagram_text(grammar.resolve(name))), soft_wrap=True)

    construct = grammar.expand(name, depth)
    if depth:
        console.print(construct_tree(construct))
    references = construct.references()
    console.print(
        f"\n[bold]References:[/bold] {', '.join(references)}"
        if references
        else "\n[bold]References:[/bold] [dim]none[/dim]"
    )


if __name__ == "__main__":
    app()


__all__ = ("app", "construct_tree", "diagram_text", "show")
