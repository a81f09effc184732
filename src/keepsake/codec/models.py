"""Codec error models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class CodecError(BaseModel):
    """Failure to encode, decode or re-materialize stored data."""

    model_config = ConfigDict(extra="forbid")

    operation: Literal["encode", "decode", "materialize"]
    message: str
