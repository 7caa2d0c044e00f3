# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Configuration for railspec.

Settings are read with pydantic-settings. Precedence (highest to lowest):

1. Direct initialization arguments
2. Environment variables (`RAILSPEC_*`)
3. `railspec.local.toml` in the current directory
4. `railspec.toml` in the current directory
5. Defaults
"""

from __future__ import annotations

import logging

from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from railspec.exceptions import ConfigurationError
from railspec.grammar.grammar import GrammarEdition


logger = logging.getLogger(__name__)

type LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_FILE_LOCATIONS: tuple[str, ...] = ("railspec.local.toml", "railspec.toml")


class RailspecSettings(BaseSettings):
    """Runtime settings for the railspec CLI and logging."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_ignore_empty=True,
        env_prefix="RAILSPEC_",
        extra="ignore",
        title="railspec Settings",
        use_attribute_docstrings=True,
        validate_assignment=True,
    )

    default_edition: Annotated[
        GrammarEdition,
        Field(description="The grammar edition used when a command is not told which one to use."),
    ] = GrammarEdition.ES2025

    log_level: Annotated[
        LogLevelName, Field(description="Minimum level for railspec log records.")
    ] = "WARNING"

    rich_logging: Annotated[
        bool, Field(description="Render log records with rich instead of plain logging.")
    ] = True

    strict_coverage: Annotated[
        bool,
        Field(
            description="Also fail coverage checks on section and reference findings, not only on rule-set drift."
        ),
    ] = False

    @field_validator("default_edition", mode="before")
    @classmethod
    def _coerce_edition(cls, value: object) -> object:
        """Accept loose edition spellings such as `ES2025` or `es-5.1`."""
        if isinstance(value, str):
            return GrammarEdition.from_string(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read init arguments, then the environment, then local TOML files."""
        config_files = [
            TomlConfigSettingsSource(settings_cls, Path(location))
            for location in CONFIG_FILE_LOCATIONS
        ]
        return (init_settings, env_settings, *config_files)


_settings: RailspecSettings | None = None
"""The global settings instance. Use `get_settings()` to access it."""


def get_settings() -> RailspecSettings:
    """Get the global settings instance, creating it on first use."""
    global _settings
    if _settings is None:
        try:
            _settings = RailspecSettings()
        except (ValidationError, ValueError) as e:
            raise ConfigurationError(
                "Invalid railspec configuration",
                details={"errors": str(e)},
                suggestions=[
                    "Check RAILSPEC_* environment variables",
                    f"Check {' and '.join(CONFIG_FILE_LOCATIONS)} in the current directory",
                ],
            ) from e
        logger.debug("Loaded settings: %s", _settings.model_dump())
    return _settings


def reset_settings() -> None:
    """Drop the global settings instance so the next `get_settings()` re-reads its sources."""
    global _settings
    _settings = None


__all__ = ("CONFIG_FILE_LOCATIONS", "RailspecSettings", "get_settings", "reset_settings")
