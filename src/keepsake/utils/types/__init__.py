"""Utilities for reusable typed field annotations."""

from .fields import JsonDict, JsonValue, NonEmptyString

__all__ = [
    "JsonDict",
    "JsonValue",
    "NonEmptyString",
]
