"""Quantity-tracking store for owned cards."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .cards import Card, normalize_name
from .exceptions import DuplicateCardError, EmptyStockError, NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CollectionEntry:
    card: Card
    quantity: int


@dataclass(slots=True)
class _Stock:
    card: Card
    quantity: int


class CardCollection:
    """Owned pool of cards not currently held by a binder or deck."""

    def __init__(self) -> None:
        self._stock: dict[str, _Stock] = {}

    def __len__(self) -> int:
        return len(self._stock)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._stock

    def __iter__(self) -> Iterator[CollectionEntry]:
        return iter(self.sorted_view())

    def is_empty(self) -> bool:
        return not self._stock

    def find(self, name: str) -> Card | None:
        stock = self._stock.get(normalize_name(name))
        return stock.card if stock else None

    def quantity(self, name: str) -> int:
        stock = self._stock.get(normalize_name(name))
        return stock.quantity if stock else 0

    def add(self, card: Card) -> None:
        if card.key in self._stock:
            raise DuplicateCardError(f"Card '{card.name}' already exists in collection")
        self._stock[card.key] = _Stock(card=card, quantity=1)
        logger.debug("Added %s to collection", card.name)

    def increment(self, name: str) -> Card:
        stock = self._require(name)
        stock.quantity += 1
        return stock.card

    def decrement(self, name: str) -> Card:
        """Drop one unit; the entry disappears once the last unit is gone."""
        key = normalize_name(name)
        stock = self._require(name)
        if stock.quantity <= 0:
            raise EmptyStockError(f"Card '{stock.card.name}' has no stock left")
        stock.quantity -= 1
        if stock.quantity == 0:
            del self._stock[key]
            logger.debug("Removed %s from collection: stock exhausted", stock.card.name)
        return stock.card

    def take(self, name: str) -> Card:
        """Consume one unit for a move into a binder or deck."""
        stock = self._stock.get(normalize_name(name))
        if stock is None or stock.quantity <= 0:
            raise NotFoundError(f"Card '{name.strip()}' not available in collection")
        return self.decrement(name)

    def restore(self, card: Card) -> None:
        """Return one unit moved out of a container.

        When the collection has no live entry the container's copy becomes the
        definition again.
        """
        stock = self._stock.get(card.key)
        if stock is None:
            self._stock[card.key] = _Stock(card=card, quantity=1)
        else:
            stock.quantity += 1

    def sorted_view(self) -> tuple[CollectionEntry, ...]:
        ordered = sorted(self._stock.values(), key=lambda stock: stock.card.sort_key)
        return tuple(CollectionEntry(card=stock.card, quantity=stock.quantity) for stock in ordered)

    def _require(self, name: str) -> _Stock:
        try:
            return self._stock[normalize_name(name)]
        except KeyError as exc:
            raise NotFoundError(f"Card '{name.strip()}' not found in collection") from exc
