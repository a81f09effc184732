"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictStr

# Generic wire-format token produced by decoding a stored blob.
type JsonValue = dict[str, JsonValue] | list[JsonValue] | str | int | float | bool | None
type JsonDict = dict[str, JsonValue]

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]

__all__ = [
    "JsonDict",
    "JsonValue",
    "NonEmptyString",
]
