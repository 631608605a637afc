"""Testing utilities for CardStash."""

from .factory import CardFactory
from .fixtures import inventory, memory_app
from .scripted_view import ScriptedView

__all__ = [
    "CardFactory",
    "inventory",
    "memory_app",
    "ScriptedView",
]
