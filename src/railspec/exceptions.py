# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unified exception hierarchy for railspec.

All railspec exceptions inherit from RailspecError. Missing productions and
drift between the diagram and textual representations are deliberately *not*
exceptions on the lookup path; they surface as placeholder diagrams and as
coverage reports respectively.
"""

from __future__ import annotations

from typing import Any, ClassVar


class RailspecError(Exception):
    """Base exception for all railspec errors.

    Provides structured error information including details and suggestions
    for resolution.
    """

    _issue_information: ClassVar[tuple[str, ...]] = (
        "If you think a grammar transcription is wrong, compare the diagram with its textual definition first.",
        "",
        "`railspec coverage --strict` lists every known inconsistency in an edition.",
    )

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        """Initialize railspec error.

        Args:
            message: Human-readable error message
            details: Additional context about the error
            suggestions: Actionable suggestions for resolving the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.suggestions = suggestions or []

    def __str__(self) -> str:
        """Return descriptive error message with context details."""
        parts = [self.message]
        if self.details:
            detail_parts = [
                f"{key.replace('_', ' ')}: {self.details[key]}"
                for key in ("edition", "rule", "section", "primitive", "default", "alternatives")
                if key in self.details
            ]
            if detail_parts:
                parts.append(f"({', '.join(detail_parts)})")
        return " ".join(parts)

    @property
    def _reporting_info(self) -> str:
        """Generate issue reporting information."""
        return "\n".join((
            "Include the following information when reporting issues:",
            f"- Error Message: {self.message}",
            "- Details: " + ", ".join(f"{k}: {v}" for k, v in self.details.items())
            if self.details
            else "- No additional details provided.",
            "- Suggestions: " + ", ".join(self.suggestions)
            if self.suggestions
            else "- No suggestions provided.",
        ))

    @property
    def report(self) -> str:
        """Generate a full error report including reporting information."""
        about = type(self)._issue_information
        return f"{'\n'.join(about)}\n\n{self._reporting_info}"


class ConfigurationError(RailspecError):
    """Configuration and settings errors.

    Raised when environment variables or the `railspec.toml` file hold values
    that fail validation.
    """


class ConstructionError(RailspecError):
    """Diagram construction errors.

    Raised when a construct is built with invalid arguments (for example a
    choice whose default branch does not exist) or when a diagram tree contains
    an item that cannot be described.
    """


class GrammarError(RailspecError):
    """Grammar model errors.

    Base for errors raised by the rule registry, the section index and the
    edition lookup.
    """


class RegistryFrozenError(GrammarError):
    """Raised when a production is defined after its registry finished loading."""


class UnknownSectionError(GrammarError):
    """Raised when a section id is not part of a section index."""


class UnknownEditionError(GrammarError):
    """Raised when a grammar edition name cannot be matched."""


class CoverageDriftError(RailspecError):
    """Raised on request when the diagram and textual rule sets disagree.

    The registry itself never raises this; it is produced from a coverage
    report by callers that want a build to fail on drift.
    """


__all__ = (
    "ConfigurationError",
    "ConstructionError",
    "CoverageDriftError",
    "GrammarError",
    "RailspecError",
    "RegistryFrozenError",
    "UnknownEditionError",
    "UnknownSectionError",
)
