"""Domain models and services."""

from .cards import Card, Rarity, Variation, normalize_name, parse_rarity, parse_value, parse_variation
from .collection import CardCollection, CollectionEntry
from .binder import Binder
from .deck import Deck
from .events import EventBus
from .inventory import InventorySystem, TradeOutcome, TradeStatus
from .exceptions import (
    CardStashError,
    DuplicateCardError,
    DuplicateError,
    DuplicateInBinderError,
    DuplicateInDeckError,
    DuplicateNameError,
    EmptyStockError,
    IndexOutOfRangeError,
    InvalidAttributeError,
    NotFoundError,
    NotFoundInBinderError,
    NotFoundInDeckError,
)

__all__ = [
    "Card",
    "Rarity",
    "Variation",
    "normalize_name",
    "parse_rarity",
    "parse_value",
    "parse_variation",
    "CardCollection",
    "CollectionEntry",
    "Binder",
    "Deck",
    "EventBus",
    "InventorySystem",
    "TradeOutcome",
    "TradeStatus",
    "CardStashError",
    "DuplicateCardError",
    "DuplicateError",
    "DuplicateInBinderError",
    "DuplicateInDeckError",
    "DuplicateNameError",
    "EmptyStockError",
    "IndexOutOfRangeError",
    "InvalidAttributeError",
    "NotFoundError",
    "NotFoundInBinderError",
    "NotFoundInDeckError",
]
