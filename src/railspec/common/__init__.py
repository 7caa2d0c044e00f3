# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Cross-cutting infrastructure for railspec: logging and console markup."""

from railspec.common.logging import get_rich_handler, setup_logger


_MARKUP_TAG = "bold dark_orange"

RAILSPEC_PREFIX = f"[{_MARKUP_TAG}]railspec[/{_MARKUP_TAG}]"

__all__ = ("RAILSPEC_PREFIX", "get_rich_handler", "setup_logger")
