"""Top level application object for CardStash."""

from __future__ import annotations

from typing import Any

from .config import CardStashConfig
from .domain.events import EventBus
from .domain.inventory import InventorySystem


class CardStashApp:
    """Central dependency container used by the terminal front-end and tools."""

    def __init__(
        self,
        config: CardStashConfig,
        *,
        event_bus: EventBus | None = None,
        inventory: InventorySystem | None = None,
    ) -> None:
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.inventory = inventory or InventorySystem(
            trade_config=self.config.trade,
            event_bus=self.event_bus,
        )

    def snapshot(self) -> dict[str, Any]:
        """Export current inventory state for debugging."""
        return {
            "trade_threshold": str(self.config.trade.confirmation_threshold),
            "collection": {
                entry.card.name: entry.quantity
                for entry in self.inventory.collection.sorted_view()
            },
            "binders": {
                binder.name: [card.name for card in binder.list_cards()]
                for binder in self.inventory.binders()
            },
            "decks": {
                deck.name: [card.name for card in deck.list_cards()]
                for deck in self.inventory.decks()
            },
        }
