"""Inventory aggregate: collection, binders, decks and the trade protocol."""

from __future__ import annotations

import functools
import logging
import threading
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, TypeVar

from .binder import Binder
from .cards import Card, normalize_name
from .collection import CardCollection
from .deck import Deck
from .events import EventBus
from .exceptions import (
    CardStashError,
    DuplicateError,
    DuplicateNameError,
    InvalidAttributeError,
    NotFoundError,
    NotFoundInBinderError,
)
from ..config import TradeConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _synchronized(method: Callable[..., T]) -> Callable[..., T]:
    @functools.wraps(method)
    def wrapper(self: "InventorySystem", *args, **kwargs) -> T:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class TradeStatus(str, Enum):
    COMPLETED = "completed"
    NEEDS_CONFIRMATION = "needs_confirmation"


@dataclass(frozen=True, slots=True)
class TradeOutcome:
    status: TradeStatus
    outgoing: Card
    incoming: Card
    delta: Decimal

    @property
    def completed(self) -> bool:
        return self.status is TradeStatus.COMPLETED

    @property
    def needs_confirmation(self) -> bool:
        return self.status is TradeStatus.NEEDS_CONFIRMATION


Container = Binder | Deck


class InventorySystem:
    """Single entry point for every inventory mutation.

    Each public operation either fully succeeds or leaves the collection, binders
    and decks exactly as they were. Cards move between the collection and a
    container one unit at a time, so a unit is never both free and held.
    """

    def __init__(
        self,
        *,
        trade_config: TradeConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._collection = CardCollection()
        self._binders: dict[str, Binder] = {}
        self._decks: dict[str, Deck] = {}
        self._trade = trade_config or TradeConfig()
        self._event_bus = event_bus or EventBus()
        self._lock = threading.RLock()

    @property
    def collection(self) -> CardCollection:
        return self._collection

    # ------------------------------------------------------------ collection
    @_synchronized
    def add_card_to_collection(self, card: Card) -> None:
        self._collection.add(card)
        logger.info("Card %s added to collection", card.name)
        self._event_bus.publish("collection.card.added", {"card": card.name})

    @_synchronized
    def increment_card_in_collection(self, name: str) -> int:
        card = self._collection.increment(name)
        quantity = self._collection.quantity(card.name)
        self._event_bus.publish(
            "collection.card.incremented", {"card": card.name, "quantity": quantity}
        )
        return quantity

    @_synchronized
    def decrement_card_in_collection(self, name: str) -> int:
        card = self._collection.decrement(name)
        quantity = self._collection.quantity(card.name)
        self._event_bus.publish(
            "collection.card.decremented", {"card": card.name, "quantity": quantity}
        )
        return quantity

    # --------------------------------------------------------------- binders
    @_synchronized
    def create_binder(self, name: str) -> Binder:
        key = self._container_key(name, "Binder")
        if key in self._binders:
            raise DuplicateNameError(f"Binder '{name.strip()}' already exists")
        binder = Binder(name)
        self._binders[key] = binder
        logger.info("Binder %s created", binder.name)
        self._event_bus.publish("binder.created", {"binder": binder.name})
        return binder

    @_synchronized
    def delete_binder(self, name: str) -> None:
        binder = self._require_binder(name)
        returned = self._return_all(binder)
        del self._binders[binder.key]
        logger.info("Binder %s deleted, %d cards returned", binder.name, len(returned))
        self._event_bus.publish(
            "binder.deleted", {"binder": binder.name, "returned": returned}
        )

    @_synchronized
    def add_card_to_binder(self, binder_name: str, card_name: str) -> Card:
        binder = self._require_binder(binder_name)
        card = self._move_into(binder, card_name)
        self._event_bus.publish("binder.card.added", {"binder": binder.name, "card": card.name})
        return card

    @_synchronized
    def remove_card_from_binder(self, binder_name: str, card_name: str) -> Card:
        binder = self._require_binder(binder_name)
        card = binder.remove_card(card_name)
        self._collection.restore(card)
        self._event_bus.publish(
            "binder.card.removed", {"binder": binder.name, "card": card.name}
        )
        return card

    @_synchronized
    def trade_card(
        self,
        binder_name: str,
        outgoing_name: str,
        incoming_card: Card,
        force_approve: bool = False,
    ) -> TradeOutcome:
        """Swap a binder card for one drawn from the collection.

        A value difference at or above the configured threshold is only traded
        when ``force_approve`` is set; otherwise nothing changes and the outcome
        asks the caller for confirmation.
        """
        binder = self._require_binder(binder_name)
        outgoing = binder.find(outgoing_name)
        if outgoing is None:
            raise NotFoundInBinderError(binder.name, outgoing_name.strip())

        # The value rule applies to the unit that actually moves, not the caller's copy.
        incoming = self._collection.find(incoming_card.name)
        if incoming is None and incoming_card.key == outgoing.key:
            incoming = outgoing
        if incoming is None:
            raise NotFoundError(f"Card '{incoming_card.name}' not available in collection")

        delta = abs(incoming.base_value - outgoing.base_value)
        if delta >= self._trade.confirmation_threshold and not force_approve:
            logger.info(
                "Trade %s -> %s in %s needs confirmation (delta %s)",
                outgoing.name,
                incoming.name,
                binder.name,
                delta,
            )
            return TradeOutcome(TradeStatus.NEEDS_CONFIRMATION, outgoing, incoming, delta)

        binder.remove_card(outgoing.name)
        self._collection.restore(outgoing)
        try:
            incoming = self._move_into(binder, incoming.name)
        except CardStashError:
            self._collection.take(outgoing.name)
            binder.add_card(outgoing)
            logger.warning(
                "Trade %s -> %s in %s rolled back", outgoing.name, incoming.name, binder.name
            )
            raise

        logger.info(
            "Traded %s for %s in %s (delta %s)", outgoing.name, incoming.name, binder.name, delta
        )
        self._event_bus.publish(
            "binder.trade.completed",
            {
                "binder": binder.name,
                "outgoing": outgoing.name,
                "incoming": incoming.name,
                "delta": str(delta),
            },
        )
        return TradeOutcome(TradeStatus.COMPLETED, outgoing, incoming, delta)

    # ----------------------------------------------------------------- decks
    @_synchronized
    def create_deck(self, name: str) -> Deck:
        key = self._container_key(name, "Deck")
        if key in self._decks:
            raise DuplicateNameError(f"Deck '{name.strip()}' already exists")
        deck = Deck(name)
        self._decks[key] = deck
        logger.info("Deck %s created", deck.name)
        self._event_bus.publish("deck.created", {"deck": deck.name})
        return deck

    @_synchronized
    def delete_deck(self, name: str) -> None:
        deck = self._require_deck(name)
        returned = self._return_all(deck)
        del self._decks[deck.key]
        logger.info("Deck %s deleted, %d cards returned", deck.name, len(returned))
        self._event_bus.publish("deck.deleted", {"deck": deck.name, "returned": returned})

    @_synchronized
    def add_card_to_deck(self, deck_name: str, card_name: str) -> Card:
        deck = self._require_deck(deck_name)
        card = self._move_into(deck, card_name)
        self._event_bus.publish("deck.card.added", {"deck": deck.name, "card": card.name})
        return card

    @_synchronized
    def delete_card_from_deck(self, deck_name: str, card_name: str) -> Card:
        deck = self._require_deck(deck_name)
        card = deck.remove_card(card_name)
        self._collection.restore(card)
        self._event_bus.publish("deck.card.removed", {"deck": deck.name, "card": card.name})
        return card

    # --------------------------------------------------------------- lookups
    @_synchronized
    def find_card_by_name_in_collection(self, name: str) -> Card | None:
        return self._collection.find(name)

    @_synchronized
    def find_binder_by_name(self, name: str) -> Binder | None:
        return self._binders.get(normalize_name(name))

    @_synchronized
    def find_deck_by_name(self, name: str) -> Deck | None:
        return self._decks.get(normalize_name(name))

    @_synchronized
    def get_binder_names(self) -> list[str]:
        return [binder.name for binder in self._binders.values()]

    @_synchronized
    def get_deck_names(self) -> list[str]:
        return [deck.name for deck in self._decks.values()]

    @_synchronized
    def binders(self) -> tuple[Binder, ...]:
        return tuple(self._binders.values())

    @_synchronized
    def decks(self) -> tuple[Deck, ...]:
        return tuple(self._decks.values())

    @_synchronized
    def circulation(self, name: str) -> int:
        """Collection quantity plus one for every container holding the card."""
        held = sum(1 for binder in self._binders.values() if binder.contains(name))
        held += sum(1 for deck in self._decks.values() if deck.contains(name))
        return self._collection.quantity(name) + held

    # --------------------------------------------------------------- helpers
    def _move_into(self, container: Container, card_name: str) -> Card:
        card = self._collection.take(card_name)
        try:
            container.add_card(card)
        except DuplicateError:
            self._collection.restore(card)
            logger.warning("Move of %s into %s rolled back", card.name, container.name)
            raise
        logger.debug("Moved %s into %s", card.name, container.name)
        return card

    def _return_all(self, container: Container) -> list[str]:
        returned = []
        for card in container.list_cards():
            self._collection.restore(card)
            returned.append(card.name)
        return returned

    def _require_binder(self, name: str) -> Binder:
        binder = self._binders.get(normalize_name(name))
        if binder is None:
            raise NotFoundError(f"Binder '{name.strip()}' not found")
        return binder

    def _require_deck(self, name: str) -> Deck:
        deck = self._decks.get(normalize_name(name))
        if deck is None:
            raise NotFoundError(f"Deck '{name.strip()}' not found")
        return deck

    @staticmethod
    def _container_key(name: str, kind: str) -> str:
        key = normalize_name(name)
        if not key:
            raise InvalidAttributeError(f"{kind} name must not be blank")
        return key
