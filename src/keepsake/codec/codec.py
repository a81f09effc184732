"""JSON codec for the whole store, with optional obfuscation."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import get_origin

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python
from result import Err, Ok, Result

from keepsake.common import JsonDict
from keepsake.config import PersistenceSettings

from .models import CodecError
from .obfuscation import obfuscate_text, reveal_text


class Codec:
    """Turns a store snapshot into a text blob and back.

    The blob is a single JSON object with one property per store key. When
    obfuscation is enabled the JSON text is XOR-masked with the repeating key
    and base64 encoded.
    """

    def __init__(self, *, pretty_print: bool = True, use_encryption: bool = False, encryption_key: str = "") -> None:
        if use_encryption and not encryption_key:
            raise ValueError("encryption_key is required when use_encryption is enabled")
        self.pretty_print = pretty_print
        self.use_encryption = use_encryption
        self._encryption_key = encryption_key

    @classmethod
    def from_settings(cls, settings: PersistenceSettings) -> Codec:
        return cls(
            pretty_print=settings.pretty_print,
            use_encryption=settings.use_encryption,
            encryption_key=settings.encryption_key,
        )

    def encode(self, store: Mapping[str, object]) -> Result[str, CodecError]:
        try:
            payload = to_jsonable_python(dict(store))
            if self.pretty_print:
                text = json.dumps(payload, indent=2, ensure_ascii=False)
            else:
                text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            return Err(CodecError(operation="encode", message=f"Failed to serialize data: {e}"))

        if self.use_encryption:
            text = obfuscate_text(text, self._encryption_key)

        return Ok(text)

    def decode(self, blob: str) -> Result[JsonDict, CodecError]:
        try:
            text = reveal_text(blob, self._encryption_key) if self.use_encryption else blob
            data = json.loads(text)
        except ValueError as e:
            return Err(CodecError(operation="decode", message=f"Failed to deserialize data: {e}"))

        if not isinstance(data, dict):
            return Err(CodecError(operation="decode", message="Stored data must be a JSON object"))

        return Ok(data)

    @staticmethod
    def materialize[T](value: object, target: type[T]) -> Result[T, CodecError]:
        """Convert a stored value into ``target``.

        Values that went through the wire format come back as generic JSON
        tokens (dicts, lists, str, int, float, bool, None). Pydantic validation
        turns them back into the requested type, nested containers, models and
        dataclasses included.
        """
        if get_origin(target) is None and isinstance(target, type) and isinstance(value, target):
            return Ok(value)

        try:
            return Ok(TypeAdapter(target).validate_python(value))
        except (ValidationError, PydanticSchemaGenerationError, TypeError, ValueError) as e:
            return Err(
                CodecError(
                    operation="materialize",
                    message=f"Cannot convert {type(value).__name__} to {getattr(target, '__name__', target)}: {e}",
                )
            )
