# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Command line interface for railspec."""

from importlib import import_module
from types import MappingProxyType
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from railspec.cli.__main__ import app, main
    from railspec.cli.utils import console


_dynamic_imports: MappingProxyType[str, tuple[str, str]] = MappingProxyType({
    "app": (__spec__.parent, "__main__"),
    "console": (__spec__.parent, "utils"),
    "main": (__spec__.parent, "__main__"),
})


def __getattr__(name: str) -> object:
    """Import CLI objects on first access so `python -m railspec.cli` loads `__main__` once."""
    if name not in _dynamic_imports:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    package, module = _dynamic_imports[name]
    value = getattr(import_module(f"{package}.{module}"), name)
    globals()[name] = value
    return value


__all__ = ("app", "console", "main")


def __dir__() -> list[str]:
    return list(__all__)
