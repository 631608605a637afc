"""CardStash public API."""

from .app import CardStashApp
from .config import CardStashConfig, TradeConfig
from .domain import Card, InventorySystem, Rarity, TradeOutcome, TradeStatus, Variation

__all__ = [
    "CardStashApp",
    "CardStashConfig",
    "TradeConfig",
    "Card",
    "InventorySystem",
    "Rarity",
    "TradeOutcome",
    "TradeStatus",
    "Variation",
]
