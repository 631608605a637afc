"""Card domain models and utilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum

from .exceptions import InvalidAttributeError


def normalize_name(name: str) -> str:
    """Identity key shared by cards, binders and decks."""
    return name.strip().casefold()


class Rarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"

    @property
    def allows_variations(self) -> bool:
        return self in (Rarity.RARE, Rarity.LEGENDARY)

    @property
    def order(self) -> int:
        return _RARITY_ORDER.index(self)


class Variation(str, Enum):
    NORMAL = "normal"
    EXTENDED_ART = "extended_art"
    FULL_ART = "full_art"
    ALT_ART = "alt_art"

    @property
    def order(self) -> int:
        return _VARIATION_ORDER.index(self)


_RARITY_ORDER = tuple(Rarity)
_VARIATION_ORDER = tuple(Variation)


@dataclass(frozen=True, slots=True)
class Card:
    """Definition of an owned card.

    ``name`` keeps the casing the user typed; equality of identity goes through
    :attr:`key`.
    """

    name: str
    rarity: Rarity = Rarity.COMMON
    variation: Variation = Variation.NORMAL
    base_value: Decimal = field(default=Decimal("0"))

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidAttributeError("Card name must not be blank")
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "rarity", parse_rarity(self.rarity))
        object.__setattr__(self, "variation", parse_variation(self.variation))
        object.__setattr__(self, "base_value", parse_value(self.base_value))
        if self.variation is not Variation.NORMAL and not self.rarity.allows_variations:
            raise InvalidAttributeError(
                f"Variation '{self.variation.value}' is only allowed for rare or legendary cards"
            )

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    @property
    def sort_key(self) -> tuple[str, int, int]:
        return (self.key, self.rarity.order, self.variation.order)

    @classmethod
    def parse(
        cls,
        name: str,
        rarity: str | Rarity,
        variation: str | Variation | None,
        value: str | Decimal | int,
    ) -> "Card":
        """Build a card from raw user input."""
        parsed_rarity = parse_rarity(rarity)
        if variation is None or (isinstance(variation, str) and not variation.strip()):
            parsed_variation = Variation.NORMAL
        else:
            parsed_variation = parse_variation(variation)
        return cls(
            name=name,
            rarity=parsed_rarity,
            variation=parsed_variation,
            base_value=parse_value(value),
        )


def parse_rarity(raw: str | Rarity) -> Rarity:
    if isinstance(raw, Rarity):
        return raw
    try:
        return Rarity(str(raw).strip().lower())
    except ValueError as exc:
        raise InvalidAttributeError(f"Invalid rarity: {raw}") from exc


def parse_variation(raw: str | Variation) -> Variation:
    if isinstance(raw, Variation):
        return raw
    code = str(raw).strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return Variation(code)
    except ValueError as exc:
        raise InvalidAttributeError(f"Invalid variation: {raw}") from exc


def parse_value(raw: str | Decimal | int | float) -> Decimal:
    if isinstance(raw, bool):
        raise InvalidAttributeError(f"Invalid value: {raw}")
    if isinstance(raw, float):
        raw = str(raw)
    try:
        value = raw if isinstance(raw, Decimal) else Decimal(str(raw).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAttributeError(f"Invalid number: {raw}") from exc
    if not value.is_finite():
        raise InvalidAttributeError(f"Invalid number: {raw}")
    if value < 0:
        raise InvalidAttributeError(f"Value cannot be negative: {raw}")
    return value
