"""Exceptions raised by CardStash domain services."""


class CardStashError(RuntimeError):
    """Base class for domain exceptions."""


class NotFoundError(CardStashError):
    """Raised when a referenced card, binder, deck or position does not exist."""


class NotFoundInBinderError(NotFoundError):
    """Raised when a binder does not hold the requested card."""

    def __init__(self, binder_name: str, card_name: str) -> None:
        super().__init__(f"Card '{card_name}' not found in binder '{binder_name}'")
        self.binder_name = binder_name
        self.card_name = card_name


class NotFoundInDeckError(NotFoundError):
    """Raised when a deck does not hold the requested card."""

    def __init__(self, deck_name: str, card_name: str) -> None:
        super().__init__(f"Card '{card_name}' not found in deck '{deck_name}'")
        self.deck_name = deck_name
        self.card_name = card_name


class IndexOutOfRangeError(NotFoundError):
    """Raised on positional deck lookup outside the deck bounds."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Index {index} out of range for deck of {size} cards")
        self.index = index
        self.size = size


class DuplicateError(CardStashError):
    """Base class for identity collisions."""


class DuplicateCardError(DuplicateError):
    """Raised when the collection already knows a card with the same name."""


class DuplicateInBinderError(DuplicateError):
    """Raised when a binder already holds a card with the same name."""

    def __init__(self, binder_name: str, card_name: str) -> None:
        super().__init__(f"Card '{card_name}' already in binder '{binder_name}'")
        self.binder_name = binder_name
        self.card_name = card_name


class DuplicateInDeckError(DuplicateError):
    """Raised when a deck already holds a card with the same name."""

    def __init__(self, deck_name: str, card_name: str) -> None:
        super().__init__(f"Card '{card_name}' already in deck '{deck_name}'")
        self.deck_name = deck_name
        self.card_name = card_name


class DuplicateNameError(DuplicateError):
    """Raised when a binder or deck name is already taken."""


class EmptyStockError(CardStashError):
    """Raised when stock would drop below zero."""


class InvalidAttributeError(CardStashError):
    """Raised for malformed rarity, variation, value or name input."""
