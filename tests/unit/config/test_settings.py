# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Unit tests for settings and logging setup.

Tests validate:
- defaults
- environment variables and TOML files, and their precedence
- invalid configuration surfacing as ConfigurationError
"""

from __future__ import annotations

import logging

from pathlib import Path

import pytest

from rich.logging import RichHandler

from railspec.common import setup_logger
from railspec.exceptions import ConfigurationError
from railspec.grammar.grammar import GrammarEdition
from railspec.settings import RailspecSettings, get_settings, reset_settings


@pytest.mark.unit
class TestSettings:
    """Tests for settings sources."""

    def test_defaults(self) -> None:
        settings = RailspecSettings()

        assert settings.default_edition is GrammarEdition.ES2025
        assert settings.log_level == "WARNING"
        assert settings.rich_logging
        assert not settings.strict_coverage

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RAILSPEC_DEFAULT_EDITION", "es5")
        monkeypatch.setenv("RAILSPEC_LOG_LEVEL", "debug")
        monkeypatch.setenv("RAILSPEC_STRICT_COVERAGE", "true")

        settings = RailspecSettings()

        assert settings.default_edition is GrammarEdition.ES5_1
        assert settings.log_level == "DEBUG"
        assert settings.strict_coverage

    def test_toml_file(self, tmp_path: Path) -> None:
        (tmp_path / "railspec.toml").write_text('default_edition = "es5.1"\nrich_logging = false\n')

        settings = RailspecSettings()

        assert settings.default_edition is GrammarEdition.ES5_1
        assert not settings.rich_logging

    def test_local_toml_beats_shared_toml(self, tmp_path: Path) -> None:
        (tmp_path / "railspec.toml").write_text('log_level = "INFO"\n')
        (tmp_path / "railspec.local.toml").write_text('log_level = "ERROR"\n')

        assert RailspecSettings().log_level == "ERROR"

    def test_environment_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "railspec.toml").write_text('log_level = "INFO"\n')
        monkeypatch.setenv("RAILSPEC_LOG_LEVEL", "CRITICAL")

        assert RailspecSettings().log_level == "CRITICAL"

    def test_init_arguments_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RAILSPEC_DEFAULT_EDITION", "es5")

        assert RailspecSettings(default_edition="es2025").default_edition is GrammarEdition.ES2025


@pytest.mark.unit
class TestGlobalSettings:
    """Tests for the shared settings instance."""

    def test_get_settings_is_cached_until_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        assert get_settings() is first

        monkeypatch.setenv("RAILSPEC_STRICT_COVERAGE", "1")
        assert not get_settings().strict_coverage

        reset_settings()
        assert get_settings().strict_coverage

    def test_invalid_values_raise_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RAILSPEC_DEFAULT_EDITION", "es3")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert "default_edition" in exc_info.value.details["errors"]
        assert exc_info.value.suggestions


@pytest.mark.unit
class TestSetupLogger:
    """Tests for logger configuration."""

    def test_rich_handler_is_installed_once(self) -> None:
        logger = setup_logger("railspec.test", level="debug")
        setup_logger("railspec.test", level=logging.INFO)

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_plain_setup_removes_an_earlier_rich_handler(self) -> None:
        setup_logger("railspec.test", level="info")
        logger = setup_logger("railspec.test", level="info", rich=False)

        assert logger.level == logging.INFO
        assert not any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_unknown_level_name_falls_back_to_warning(self) -> None:
        assert setup_logger("railspec.test", level="chatty").level == logging.WARNING
