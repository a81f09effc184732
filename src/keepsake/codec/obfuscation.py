"""Repeating-key XOR obfuscation.

This is a light obfuscation that keeps casual readers out of save files. It is
not encryption: anyone holding one plaintext/blob pair recovers the key.
Layer a real cipher on top when confidentiality matters.
"""

from __future__ import annotations

import base64


def xor_obfuscate(data: bytes, key: bytes) -> bytes:
    """XOR every byte of ``data`` with the repeating ``key``. Applying it twice is the identity."""
    if not key:
        raise ValueError("Obfuscation key must not be empty")

    key_length = len(key)
    return bytes(byte ^ key[index % key_length] for index, byte in enumerate(data))


def obfuscate_text(text: str, key: str) -> str:
    masked = xor_obfuscate(text.encode("utf-8"), key.encode("utf-8"))
    return base64.b64encode(masked).decode("ascii")


def reveal_text(blob: str, key: str) -> str:
    masked = base64.b64decode(blob.strip(), validate=True)
    return xor_obfuscate(masked, key.encode("utf-8")).decode("utf-8")
