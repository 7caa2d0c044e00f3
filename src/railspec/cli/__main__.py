# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""railspec CLI entrypoint.

Commands are registered and lazy-loaded from here.
"""

from __future__ import annotations

import sys

from cyclopts import App, Parameter

from railspec import __version__
from railspec.cli.utils import console
from railspec.common import RAILSPEC_PREFIX


app = App(
    "railspec",
    help="railspec: railroad diagrams, sections and textual definitions of the ECMAScript grammars.",
    default_parameter=Parameter(negative=()),
    version=__version__,
    console=console,
)
app.command("railspec.cli.commands.coverage:app", name="coverage")
app.command("railspec.cli.commands.sections:app", name="sections", alias="ls")
app.command("railspec.cli.commands.show:app", name="show")


def main() -> None:
    """Main CLI entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print(f"\n{RAILSPEC_PREFIX} [yellow]Interrupted.[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"{RAILSPEC_PREFIX} [bold red]Fatal error: {e}[/bold red]")
        console.print("\n[red]Traceback:[/red]")
        console.print_exception(max_frames=10)
        sys.exit(1)


if __name__ == "__main__":
    main()


__all__ = ("app", "main")
