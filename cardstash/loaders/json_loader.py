"""Load a starter collection, binders and decks from JSON seed files."""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence

from ..domain.cards import Card, normalize_name
from ..domain.exceptions import InvalidAttributeError
from ..domain.inventory import InventorySystem


@dataclass(slots=True)
class SeedCard:
    card: Card
    quantity: int = 1


@dataclass(slots=True)
class SeedContainer:
    name: str
    cards: Sequence[str]


@dataclass(slots=True)
class SeedDefinition:
    cards: Sequence[SeedCard]
    binders: Sequence[SeedContainer]
    decks: Sequence[SeedContainer]


def load_seed_from_json(system: InventorySystem, path: str | Path) -> SeedDefinition:
    """Load a seed JSON file and apply it through the inventory's public operations."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    definition = parse_seed_dict(data)
    apply_seed(system, definition)
    return definition


def apply_seed(system: InventorySystem, definition: SeedDefinition) -> None:
    for seed in definition.cards:
        system.add_card_to_collection(seed.card)
        for _ in range(seed.quantity - 1):
            system.increment_card_in_collection(seed.card.name)
    for binder in definition.binders:
        system.create_binder(binder.name)
        for card_name in binder.cards:
            system.add_card_to_binder(binder.name, card_name)
    for deck in definition.decks:
        system.create_deck(deck.name)
        for card_name in deck.cards:
            system.add_card_to_deck(deck.name, card_name)


def parse_seed_dict(data: dict[str, Any]) -> SeedDefinition:
    """Parse a JSON dict (already decoded) into seed objects."""
    errors = validate_seed_dict(data)
    if errors:
        raise ValueError(_format_errors("Seed validation failed", errors))
    cards = tuple(parse_seed_card(entry) for entry in data.get("cards", []))
    binders = tuple(parse_container(entry) for entry in data.get("binders", []))
    decks = tuple(parse_container(entry) for entry in data.get("decks", []))
    return SeedDefinition(cards=cards, binders=binders, decks=decks)


def parse_seed_card(entry: dict[str, Any]) -> SeedCard:
    card = Card.parse(
        entry["name"],
        entry["rarity"],
        entry.get("variation"),
        entry["value"],
    )
    return SeedCard(card=card, quantity=int(entry.get("quantity", 1)))


def parse_container(entry: dict[str, Any]) -> SeedContainer:
    return SeedContainer(name=entry["name"], cards=tuple(entry.get("cards", ())))


def validate_seed_file(path: str | Path) -> list[str]:
    """Validate seed JSON file and return a list of errors."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return validate_seed_dict(data)


def validate_seed_dict(data: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    if not isinstance(data, dict):
        return ["Seed must be a JSON object."]

    stock: dict[str, int] = {}
    seen_cards: set[str] = set()
    cards_raw = data.get("cards", [])
    if not isinstance(cards_raw, list):
        errors.append("Seed 'cards' must be an array.")
        cards_raw = []
    for idx, entry in enumerate(cards_raw, start=1):
        if not isinstance(entry, dict):
            errors.append(f"Card #{idx} must be an object.")
            continue
        name = entry.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"Card #{idx} must define non-empty 'name'.")
            continue
        key = normalize_name(name)
        if key in seen_cards:
            errors.append(f"Card '{name}' defined multiple times.")
            continue
        seen_cards.add(key)

        if "rarity" not in entry or "value" not in entry:
            errors.append(f"Card '{name}' must define 'rarity' and 'value'.")
            continue
        try:
            Card.parse(name, entry["rarity"], entry.get("variation"), entry["value"])
        except InvalidAttributeError as exc:
            errors.append(f"Card '{name}': {exc}")
            continue

        quantity = entry.get("quantity", 1)
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            errors.append(f"Card '{name}' has invalid 'quantity' value '{quantity}'.")
            continue
        stock[key] = quantity

    demand: Counter[str] = Counter()
    for section in ("binders", "decks"):
        kind = section[:-1].title()
        containers = data.get(section, [])
        if not isinstance(containers, list):
            errors.append(f"Seed '{section}' must be an array.")
            continue
        seen: set[str] = set()
        for idx, entry in enumerate(containers, start=1):
            if not isinstance(entry, dict):
                errors.append(f"{kind} #{idx} must be an object.")
                continue
            name = entry.get("name")
            if not isinstance(name, str) or not name.strip():
                errors.append(f"{kind} #{idx} must define non-empty 'name'.")
                continue
            if normalize_name(name) in seen:
                errors.append(f"{kind} '{name}' defined multiple times.")
            seen.add(normalize_name(name))

            card_names = entry.get("cards", [])
            if not isinstance(card_names, list):
                errors.append(f"{kind} '{name}' 'cards' must be an array.")
                continue
            held: set[str] = set()
            for card_name in card_names:
                if not isinstance(card_name, str) or normalize_name(card_name) not in stock:
                    errors.append(f"{kind} '{name}' references unknown card '{card_name}'.")
                    continue
                key = normalize_name(card_name)
                if key in held:
                    errors.append(f"{kind} '{name}' lists card '{card_name}' more than once.")
                    continue
                held.add(key)
                demand[key] += 1

    for key, wanted in demand.items():
        if wanted > stock[key]:
            errors.append(
                f"Card '{key}' is placed in {wanted} containers but only {stock[key]} owned."
            )

    return errors


def _format_errors(prefix: str, errors: Iterable[str]) -> str:
    formatted = "\n".join(f"- {err}" for err in errors)
    return f"{prefix}:\n{formatted}"
