"""Validation utilities for CardStash inventories."""

from __future__ import annotations

from .config import CardStashConfig
from .domain.cards import Card
from .domain.inventory import InventorySystem


def validate_inventory(system: InventorySystem, config: CardStashConfig | None = None) -> list[str]:
    """Return list of invariant violations discovered in an inventory."""
    errors: list[str] = []

    definitions: dict[str, Card] = {}
    for entry in system.collection.sorted_view():
        definitions[entry.card.key] = entry.card
        if entry.quantity <= 0:
            errors.append(
                f"Card '{entry.card.name}' is kept in the collection with quantity {entry.quantity}."
            )

    containers = [("Binder", binder) for binder in system.binders()]
    containers += [("Deck", deck) for deck in system.decks()]
    for kind, container in containers:
        if not container.name:
            errors.append(f"{kind} with blank name found.")
        seen: set[str] = set()
        for card in container.list_cards():
            if card.key in seen:
                errors.append(f"{kind} '{container.name}' holds card '{card.name}' more than once.")
            seen.add(card.key)
            known = definitions.setdefault(card.key, card)
            if known != card:
                errors.append(
                    f"{kind} '{container.name}' holds '{card.name}' with attributes "
                    f"that differ from the collection definition."
                )

    if config is not None and config.trade.confirmation_threshold < 0:
        errors.append("Trade configuration 'confirmation_threshold' cannot be negative.")

    return errors


__all__ = ["validate_inventory"]
