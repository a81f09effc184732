"""Keepsake codec module."""

from .codec import Codec
from .models import CodecError
from .obfuscation import obfuscate_text, reveal_text, xor_obfuscate

__all__ = [
    "Codec",
    "CodecError",
    "obfuscate_text",
    "reveal_text",
    "xor_obfuscate",
]
