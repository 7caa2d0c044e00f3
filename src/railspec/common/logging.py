# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0

"""Set up a logger with optional rich formatting."""

from __future__ import annotations

import logging

from typing import Any

from rich.console import Console
from rich.logging import RichHandler


def get_rich_handler(**kwargs: Any) -> RichHandler:
    """Build a `RichHandler` writing to stderr with markup enabled."""
    return RichHandler(
        console=Console(stderr=True, markup=True, soft_wrap=True, emoji=True),
        markup=True,
        **kwargs,
    )


def setup_logger(
    name: str | None = "railspec",
    *,
    level: int | str = logging.WARNING,
    rich: bool = True,
    rich_options: dict[str, Any] | None = None,
) -> logging.Logger:
    """Set up a logger with optional rich formatting."""
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
    if not rich:
        logging.basicConfig(level=level)
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Drop handlers from an earlier rich setup
        logger.handlers.clear()
        return logger
    handler = get_rich_handler(**(rich_options or {}))
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Clear existing handlers to prevent duplication
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger


__all__ = ("get_rich_handler", "setup_logger")
