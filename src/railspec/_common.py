# SPDX-FileCopyrightText: 2025 Knitli Inc.
# SPDX-FileContributor: Adam Poulemanos <adam@knit.li>
#
# SPDX-License-Identifier: MIT OR Apache-2.0
"""Foundational model and enum classes shared across railspec."""

from __future__ import annotations

from enum import Enum, unique
from typing import Any, Self, cast

import textcase

from pydantic import BaseModel, ConfigDict
from pydantic.fields import ComputedFieldInfo, FieldInfo


def _generate_title(model: type[Any]) -> str:
    """Generate a title for a model."""
    model_name = model.__name__ if hasattr(model, "__name__") else str(model)
    return textcase.title(model_name.replace("Model", ""))


def _generate_field_title(name: str, info: FieldInfo | ComputedFieldInfo) -> str:
    """Generate a title for a model field."""
    if titled := info.title:
        return titled
    return textcase.sentence(name)


class BasedModel(BaseModel):
    """A baser `BaseModel` for all models in railspec.

    Whitespace is never stripped: terminals and definition text are verbatim.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        cache_strings="all",
        field_title_generator=_generate_field_title,
        model_title_generator=_generate_title,
        serialize_by_alias=True,
        use_attribute_docstrings=True,
        validate_by_alias=True,
        validate_by_name=True,
    )


class FrozenModel(BasedModel):
    """An immutable, hashable `BasedModel`."""

    model_config = ConfigDict(frozen=True)


@unique
class BaseEnum(str, Enum):
    """A string enum with forgiving string conversion.

    `from_string` matches values and names case-insensitively, and tolerates
    dashes, dots, underscores and spaces used interchangeably.
    """

    @staticmethod
    def _deconstruct_string(value: str) -> list[str]:
        """Deconstruct a string into its component parts."""
        value = value.strip().lower()
        for sep in ("-", ".", " "):
            value = value.replace(sep, "_")
        for underscore_length in range(4, 0, -1):
            value = value.replace("_" * underscore_length, "_")
        return [v for v in value.split("_") if v]

    @classmethod
    def _multiply_variations(cls, s: str) -> set[str]:
        """Generate multiple variations of a string."""
        return {
            s,
            textcase.snake(s),
            textcase.kebab(s),
            textcase.camel(s),
            "".join(cls._deconstruct_string(s)),
        }

    @property
    def aka(self) -> tuple[str, ...]:
        """Return every spelling this member answers to."""
        return tuple(
            sorted({
                v.lower()
                for v in self._multiply_variations(self.name) | self._multiply_variations(self.value)
                if v
            })
        )

    @property
    def as_title(self) -> str:
        """Return the member's value as a title."""
        return textcase.title(self.value)

    @classmethod
    def aliases(cls) -> dict[str, Self]:
        """Map every known spelling to its member."""
        alias_map: dict[str, Self] = {}
        for member in cls:
            for alias in member.aka:
                alias_map.setdefault(alias, member)
        return alias_map

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Convert a string to the corresponding enum member."""
        lowered = str(value).strip().lower()
        if literal_value := next(
            (
                member
                for member in cls
                if member.value.lower() == lowered or member.name.lower() == lowered
            ),
            None,
        ):
            return cast(Self, literal_value)
        if found_member := cls.aliases().get(lowered):
            return found_member
        value_parts = cls._deconstruct_string(lowered)
        if found_member := next(
            (
                member
                for member in cls
                if value_parts
                in (cls._deconstruct_string(member.name), cls._deconstruct_string(member.value))
                or "".join(value_parts) == "".join(cls._deconstruct_string(member.value))
            ),
            None,
        ):
            return found_member
        raise ValueError(f"{value} is not a valid {cls.__qualname__} member")

    @classmethod
    def members(cls) -> tuple[Self, ...]:
        """Return all members in definition order."""
        return tuple(cls)

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """Return all member values in definition order."""
        return tuple(member.value for member in cls)

    def __str__(self) -> str:
        """Return the member's value."""
        return str(self.value)


__all__ = ("BaseEnum", "BasedModel", "FrozenModel")
