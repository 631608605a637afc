"""Presentation layer for the interactive terminal front-end."""

from __future__ import annotations

from typing import Protocol, Sequence

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from ..domain.binder import Binder
from ..domain.cards import Card, Rarity, Variation
from ..domain.collection import CollectionEntry
from ..domain.deck import Deck

RARITY_OPTIONS = [
    (Rarity.COMMON, "Common"),
    (Rarity.UNCOMMON, "Uncommon"),
    (Rarity.RARE, "Rare"),
    (Rarity.LEGENDARY, "Legendary"),
]

VARIATION_OPTIONS = [
    (Variation.NORMAL, "Normal"),
    (Variation.EXTENDED_ART, "Extended-art"),
    (Variation.FULL_ART, "Full-art"),
    (Variation.ALT_ART, "Alt-art"),
]


class View(Protocol):
    """Input/output surface the controller talks to."""

    def read_line(self, prompt: str) -> str: ...
    def confirm(self, prompt: str) -> bool: ...
    def show_message(self, text: str) -> None: ...
    def show_error(self, text: str) -> None: ...
    def show_main_menu(self, has_cards: bool, has_binders: bool, has_decks: bool) -> None: ...
    def show_collection(self, entries: Sequence[CollectionEntry]) -> None: ...
    def show_collection_options(self) -> None: ...
    def show_card_details(self, card: Card) -> None: ...
    def show_rarity_options(self) -> None: ...
    def show_variation_options(self) -> None: ...
    def show_manage_binder_menu(self) -> None: ...
    def show_manage_deck_menu(self) -> None: ...
    def show_binder_names(self, names: Sequence[str]) -> None: ...
    def show_deck_names(self, names: Sequence[str]) -> None: ...
    def show_binder_menu(self, name: str, has_cards: bool) -> None: ...
    def show_deck_menu(self, name: str, has_cards: bool) -> None: ...
    def show_binder(self, binder: Binder) -> None: ...
    def show_deck(self, deck: Deck) -> None: ...


def format_value(card: Card) -> str:
    return f"${card.base_value:,.2f}"


def _label(prompt: str) -> str:
    # rich appends its own prompt suffix
    return prompt.rstrip().rstrip(":").rstrip()


class RichView:
    """Render menus and inventory snapshots with rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ----------------------------------------------------------------- input
    def read_line(self, prompt: str) -> str:
        return Prompt.ask(_label(prompt), console=self.console, default="", show_default=False)

    def confirm(self, prompt: str) -> bool:
        return Confirm.ask(_label(prompt), console=self.console, default=False)

    # ---------------------------------------------------------------- output
    def show_message(self, text: str) -> None:
        self.console.print(text, style="green")

    def show_error(self, text: str) -> None:
        self.console.print(f"error: {text}", style="red")

    # ----------------------------------------------------------------- menus
    def show_main_menu(self, has_cards: bool, has_binders: bool, has_decks: bool) -> None:
        binder_label = "Manage binders" if has_binders else "Create a binder"
        deck_label = "Manage decks" if has_decks else "Create a deck"
        items = ["Add a card", binder_label, deck_label]
        if has_cards:
            items += ["View collection", "Adjust card count"]
        items.append("Exit")
        self._menu("CardStash", items)

    def show_collection_options(self) -> None:
        self._menu("Collection", ["View card details", "Back"])

    def show_manage_binder_menu(self) -> None:
        self._menu("Binders", ["Create a binder", "View a binder", "Back"])

    def show_manage_deck_menu(self) -> None:
        self._menu("Decks", ["Create a deck", "View a deck", "Back"])

    def show_binder_menu(self, name: str, has_cards: bool) -> None:
        if has_cards:
            items = ["Add a card", "Remove a card", "Trade a card", "View binder", "Delete binder", "Back"]
        else:
            items = ["Add a card", "Delete binder", "Back"]
        self._menu(f"Binder: {name}", items)

    def show_deck_menu(self, name: str, has_cards: bool) -> None:
        if has_cards:
            items = ["Add a card", "Remove a card", "View deck", "Delete deck", "Back"]
        else:
            items = ["Add a card", "Delete deck", "Back"]
        self._menu(f"Deck: {name}", items)

    def show_rarity_options(self) -> None:
        labels = ", ".join(label for _, label in RARITY_OPTIONS)
        self.console.print(f"Rarities: {labels}")

    def show_variation_options(self) -> None:
        labels = ", ".join(label for _, label in VARIATION_OPTIONS)
        self.console.print(f"Variations: {labels}")

    # ------------------------------------------------------------- snapshots
    def show_collection(self, entries: Sequence[CollectionEntry]) -> None:
        if not entries:
            self.console.print("The collection is empty.", style="yellow")
            return
        table = Table(title="Collection", show_header=True, header_style="bold")
        table.add_column("Name")
        table.add_column("Count", justify="right")
        for entry in entries:
            table.add_row(entry.card.name, str(entry.quantity))
        self.console.print(table)

    def show_card_details(self, card: Card) -> None:
        table = Table(show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Name", card.name)
        table.add_row("Rarity", card.rarity.value)
        table.add_row("Variation", card.variation.value)
        table.add_row("Value", format_value(card))
        self.console.print(table)

    def show_binder_names(self, names: Sequence[str]) -> None:
        self._names("Binders", names)

    def show_deck_names(self, names: Sequence[str]) -> None:
        self._names("Decks", names)

    def show_binder(self, binder: Binder) -> None:
        self._cards(f"Binder: {binder.name}", binder.list_cards(), numbered=False)

    def show_deck(self, deck: Deck) -> None:
        self._cards(f"Deck: {deck.name}", deck.list_cards(), numbered=True)

    # --------------------------------------------------------------- helpers
    def _menu(self, title: str, items: Sequence[str]) -> None:
        options = "  ".join(f"{idx}) {item}" for idx, item in enumerate(items, start=1))
        self.console.print(f"[bold]{title}[/bold]\n{options}")

    def _names(self, title: str, names: Sequence[str]) -> None:
        table = Table(title=title, show_header=False)
        table.add_column("Name")
        for name in names:
            table.add_row(name)
        self.console.print(table)

    def _cards(self, title: str, cards: Sequence[Card], *, numbered: bool) -> None:
        if not cards:
            self.console.print(f"{title} is empty.", style="yellow")
            return
        table = Table(title=title, show_header=True, header_style="bold")
        if numbered:
            table.add_column("#", justify="right")
        table.add_column("Name")
        table.add_column("Rarity")
        table.add_column("Variation")
        table.add_column("Value", justify="right")
        for idx, card in enumerate(cards, start=1):
            row = [card.name, card.rarity.value, card.variation.value, format_value(card)]
            if numbered:
                row.insert(0, str(idx))
            table.add_row(*row)
        self.console.print(table)
