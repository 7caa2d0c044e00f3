# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for the CLI commands.

Commands are run through their cyclopts apps with argument lists, the way the
console script runs them, and their exit codes and output are checked.
"""

from __future__ import annotations

import json

from collections.abc import Callable
from pathlib import Path

import pytest

from cyclopts import App

from railspec.cli.commands.coverage import app as coverage_app
from railspec.cli.commands.sections import app as sections_app
from railspec.cli.commands.show import app as show_app
from railspec.cli.commands.show import diagram_text
from railspec.cli.utils import console, selected_editions
from railspec.diagrams.combinators import NT, Diagram, Sequence, T
from railspec.exceptions import UnknownEditionError
from railspec.grammar.grammar import GrammarEdition


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tables and diagrams on one line each."""
    monkeypatch.setattr(console, "width", 240)


@pytest.fixture
def run() -> Callable[[App, list[str]], int]:
    """Run a cyclopts app and return its exit code."""

    def _run(app: App, argv: list[str]) -> int:
        try:
            app(argv)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 0
        return 0

    return _run


@pytest.mark.unit
@pytest.mark.cli
class TestCoverageCommand:
    """Tests for `railspec coverage`."""

    def test_all_editions_pass(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(coverage_app, []) == 0

        out = capsys.readouterr().out
        assert "ECMAScript 5.1" in out
        assert "ECMAScript 2025" in out
        assert "not shipped for this edition" in out

    def test_strict_fails_on_dangling_references(
        self, run: Callable[[App, list[str]], int]
    ) -> None:
        assert run(coverage_app, ["--edition", "es2025", "--strict"]) == 1
        assert run(coverage_app, ["--edition", "es5", "--strict"]) == 0

    def test_strict_from_settings(
        self, run: Callable[[App, list[str]], int], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RAILSPEC_STRICT_COVERAGE", "true")

        assert run(coverage_app, ["--edition", "es2025"]) == 1

    def test_json_output(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(coverage_app, ["--edition", "es2025", "--output-format", "json"]) == 0

        (report,) = json.loads(capsys.readouterr().out)
        assert report["edition"] == "es2025"
        assert report["has_drift"] is False
        assert report["diagram_only"] == []
        assert "CodePoint" in {r for refs in report["dangling_references"].values() for r in refs}

    def test_unknown_edition(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(coverage_app, ["--edition", "es3"]) == 1
        assert "Unknown grammar edition" in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestSectionsCommand:
    """Tests for `railspec sections`."""

    def test_lists_sections_in_order(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(sections_app, []) == 0

        out = capsys.readouterr().out
        assert out.index("A.1 Lexical Grammar") < out.index("A.5 Scripts and Modules")

    def test_default_edition_from_settings(
        self,
        run: Callable[[App, list[str]], int],
        capsys: pytest.CaptureFixture[str],
        tmp_path: Path,
    ) -> None:
        (tmp_path / "railspec.toml").write_text('default_edition = "es5.1"\n')

        assert run(sections_app, []) == 0
        assert "§14 Program" in capsys.readouterr().out

    def test_filter(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(sections_app, ["--filter", "hexdigit"]) == 0

        out = capsys.readouterr().out
        assert "HexDigit" in out
        assert "A.3 Statements" not in out

    def test_filter_without_matches(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(sections_app, ["-f", "zzz"]) == 0
        assert "No rules match" in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestShowCommand:
    """Tests for `railspec show`."""

    def test_shows_definition_diagram_and_references(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(show_app, ["BooleanLiteral"]) == 0

        out = capsys.readouterr().out
        assert "BooleanLiteral ::" in out
        assert "A.1 Lexical Grammar" in out
        assert "References:" in out

    def test_depth_expands_references(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(show_app, ["Program", "--edition", "es5", "--depth", "1"]) == 0

        out = capsys.readouterr().out
        assert "No textual definition" in out
        assert "SourceElements" in out

    def test_unknown_rule_shows_placeholder(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(show_app, ["CodePoint"]) == 0

        out = capsys.readouterr().out
        assert "has no rule named 'CodePoint'" in out
        assert "No factory defined for CodePoint" in out

    def test_negative_depth(self, run: Callable[[App, list[str]], int]) -> None:
        assert run(show_app, ["Script", "--depth", "-1"]) == 1


@pytest.mark.unit
@pytest.mark.cli
class TestHelpers:
    """Tests for shared CLI helpers."""

    def test_selected_editions(self) -> None:
        default = GrammarEdition.ES2025

        assert selected_editions(None, default) == (default,)
        assert selected_editions("es5", default) == (GrammarEdition.ES5_1,)
        assert selected_editions("ALL", default, allow_all=True) == tuple(GrammarEdition)
        with pytest.raises(UnknownEditionError):
            selected_editions("all", default)

    def test_diagram_text_contains_every_item(self) -> None:
        text = diagram_text(Diagram(Sequence(T("let"), NT("BindingList"))))

        assert "let" in text
        assert "BindingList" in text


@pytest.mark.unit
@pytest.mark.cli
class TestRootApp:
    """Tests for command routing through the top-level app."""

    def test_lazy_commands_are_routed(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        from railspec.cli.__main__ import app as root_app

        assert run(root_app, ["ls", "--edition", "es5"]) == 0
        assert "§14 Program" in capsys.readouterr().out

    def test_version(
        self, run: Callable[[App, list[str]], int], capsys: pytest.CaptureFixture[str]
    ) -> None:
        from railspec import __version__
        from railspec.cli.__main__ import app as root_app

        assert run(root_app, ["--version"]) == 0
        assert __version__ in capsys.readouterr().out
