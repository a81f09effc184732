"""Components that opt into bulk auto-save and auto-load."""

from .base import SaveableComponentBase
from .protocol import SaveableComponent
from .registry import ComponentRegistry

__all__ = [
    "ComponentRegistry",
    "SaveableComponent",
    "SaveableComponentBase",
]
