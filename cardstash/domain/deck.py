"""Deck container."""

from __future__ import annotations

from .cards import Card, normalize_name
from .exceptions import DuplicateInDeckError, IndexOutOfRangeError, NotFoundInDeckError


class Deck:
    """Ordered playset of distinct cards, addressable by position or name."""

    def __init__(self, name: str) -> None:
        self.name = name.strip()
        self._cards: list[Card] = []

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(name={self.name!r}, cards={len(self._cards)})"

    def is_empty(self) -> bool:
        return not self._cards

    def contains(self, name: str) -> bool:
        return self._index_of(name) is not None

    def list_cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def add_card(self, card: Card) -> None:
        if self._index_of(card.name) is not None:
            raise DuplicateInDeckError(self.name, card.name)
        self._cards.append(card)

    def remove_card(self, name: str) -> Card:
        index = self._index_of(name)
        if index is None:
            raise NotFoundInDeckError(self.name, name.strip())
        return self._cards.pop(index)

    def card_at(self, index: int) -> Card:
        if index < 0 or index >= len(self._cards):
            raise IndexOutOfRangeError(index, len(self._cards))
        return self._cards[index]

    def find_by_name(self, name: str) -> Card:
        index = self._index_of(name)
        if index is None:
            raise NotFoundInDeckError(self.name, name.strip())
        return self._cards[index]

    def _index_of(self, name: str) -> int | None:
        key = normalize_name(name)
        for idx, card in enumerate(self._cards):
            if card.key == key:
                return idx
        return None
