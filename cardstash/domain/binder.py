"""Binder container."""

from __future__ import annotations

from .cards import Card, normalize_name
from .exceptions import DuplicateInBinderError, NotFoundInBinderError


class Binder:
    """Unordered holding area for distinct cards, used for trading.

    A binder knows nothing about the collection; moving stock in and out is the
    job of :class:`~cardstash.domain.inventory.InventorySystem`.
    """

    def __init__(self, name: str) -> None:
        self.name = name.strip()
        self._cards: dict[str, Card] = {}

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Binder(name={self.name!r}, cards={len(self._cards)})"

    def is_empty(self) -> bool:
        return not self._cards

    def contains(self, name: str) -> bool:
        return normalize_name(name) in self._cards

    def find(self, name: str) -> Card | None:
        return self._cards.get(normalize_name(name))

    def list_cards(self) -> tuple[Card, ...]:
        return tuple(sorted(self._cards.values(), key=lambda card: card.sort_key))

    def add_card(self, card: Card) -> None:
        if card.key in self._cards:
            raise DuplicateInBinderError(self.name, card.name)
        self._cards[card.key] = card

    def remove_card(self, name: str) -> Card:
        try:
            return self._cards.pop(normalize_name(name))
        except KeyError as exc:
            raise NotFoundInBinderError(self.name, name.strip()) from exc
