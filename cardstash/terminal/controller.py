"""Menu loop that turns user choices into inventory operations."""

from __future__ import annotations

import logging
from decimal import Decimal

from ..domain.cards import Card, Rarity, Variation, parse_rarity, parse_value, parse_variation
from ..domain.exceptions import CardStashError, InvalidAttributeError
from ..domain.inventory import InventorySystem
from .view import View

logger = logging.getLogger(__name__)

CANCEL = "cancel"


class _Cancelled(Exception):
    """User typed 'cancel' at a prompt."""


class Controller:
    """Drive an :class:`InventorySystem` from an interactive :class:`View`.

    Domain errors are reported through the view and the loop keeps going; the
    inventory itself never prompts.
    """

    def __init__(self, view: View, system: InventorySystem, *, trade_threshold: Decimal) -> None:
        self._view = view
        self._system = system
        self._trade_threshold = trade_threshold

    # ---------------------------------------------------------------- main UI
    def run(self) -> None:
        while True:
            has_cards = not self._system.collection.is_empty()
            has_binders = bool(self._system.get_binder_names())
            has_decks = bool(self._system.get_deck_names())
            self._view.show_main_menu(has_cards, has_binders, has_decks)
            choice = self._choose()
            wants_exit = False
            try:
                if choice == "1":
                    self.handle_add_card()
                elif choice == "2":
                    if has_binders:
                        self.handle_manage_binders()
                    else:
                        self.handle_create_binder()
                elif choice == "3":
                    if has_decks:
                        self.handle_manage_decks()
                    else:
                        self.handle_create_deck()
                elif choice == "4" and has_cards:
                    self.handle_view_collection()
                elif choice == "5" and has_cards:
                    self.handle_adjust_count()
                elif (choice == "4" and not has_cards) or (choice == "6" and has_cards):
                    wants_exit = True
                else:
                    self._invalid()
            except CardStashError as exc:
                logger.debug("Operation rejected: %s", exc)
                self._view.show_error(str(exc))

            if wants_exit and self._view.confirm("are you sure you want to exit?"):
                break
        self._view.show_message("closing program... goodbye!")

    # ------------------------------------------------------------------ cards
    def handle_add_card(self) -> str | None:
        """Add a new card, or bump the count of a known one.

        Returns the card name, or ``None`` when the user aborts.
        """
        try:
            name = self._ask("input card name (or 'cancel' to abort): ")
            if not name.strip():
                self._view.show_error("card name must not be blank")
                return None
            existing = self._system.find_card_by_name_in_collection(name)
            if existing is not None:
                self._view.show_message("card already exists in collection")
                if not self._view.confirm("increment count instead?"):
                    return None
                self._system.increment_card_in_collection(existing.name)
                return existing.name

            rarity = self._ask_rarity()
            variation = self._ask_variation() if rarity.allows_variations else Variation.NORMAL
            value = self._ask_value()
        except _Cancelled:
            return None

        card = Card(name=name, rarity=rarity, variation=variation, base_value=value)
        self._system.add_card_to_collection(card)
        self._view.show_message(f"card added: {card.name}")
        return card.name

    def handle_view_collection(self) -> None:
        while True:
            self._view.show_collection(self._system.collection.sorted_view())
            self._view.show_collection_options()
            choice = self._choose()
            if choice == "1":
                card = self._system.find_card_by_name_in_collection(self._view.read_line("card name: "))
                if card is None:
                    self._invalid()
                else:
                    self._view.show_card_details(card)
            elif choice == "2":
                return
            else:
                self._invalid()

    def handle_adjust_count(self) -> None:
        self._view.show_collection(self._system.collection.sorted_view())
        name = self._view.read_line("card name: ").strip()
        if self._system.find_card_by_name_in_collection(name) is None:
            self._view.show_error(f'card "{name}" not found in collection!')
            return
        operation = self._view.read_line("increase or decrease? : ").strip().lower()
        if operation == "increase":
            self._system.increment_card_in_collection(name)
        elif operation == "decrease":
            self._system.decrement_card_in_collection(name)
        else:
            self._view.show_error("must enter either 'increase' or 'decrease'")
            return
        self._view.show_message("count updated")

    # ---------------------------------------------------------------- binders
    def handle_create_binder(self) -> None:
        binder = self._system.create_binder(self._view.read_line("binder name: "))
        self._view.show_message(f"binder created: {binder.name}")

    def handle_manage_binders(self) -> None:
        while True:
            self._view.show_manage_binder_menu()
            choice = self._choose()
            if choice == "1":
                self.handle_create_binder()
            elif choice == "2":
                if self._system.get_binder_names():
                    self.handle_view_binder()
                else:
                    self._view.show_error("there are no binders found")
            elif choice == "3":
                return
            else:
                self._invalid()

    def handle_view_binder(self) -> None:
        self._view.show_binder_names(self._system.get_binder_names())
        binder = self._system.find_binder_by_name(self._view.read_line("select binder: "))
        if binder is None:
            self._view.show_error("binder not found")
            return
        while True:
            has_cards = not binder.is_empty()
            self._view.show_binder_menu(binder.name, has_cards)
            choice = self._choose()
            actions = (
                {"1": self._add_to_binder, "2": self._remove_from_binder, "3": self._trade_in_binder,
                 "4": self._view.show_binder, "5": self._delete_binder}
                if has_cards
                else {"1": self._add_to_binder, "2": self._delete_binder}
            )
            back, delete = ("6", "5") if has_cards else ("3", "2")
            if choice == back:
                return
            action = actions.get(choice)
            if action is None:
                self._invalid()
                continue
            try:
                action(binder)
            except CardStashError as exc:
                self._view.show_error(str(exc))
                continue
            if choice == delete:
                return

    def _add_to_binder(self, binder) -> None:
        self._system.add_card_to_binder(binder.name, self._view.read_line("card name: "))
        self._view.show_message("added to binder")

    def _remove_from_binder(self, binder) -> None:
        self._system.remove_card_from_binder(binder.name, self._view.read_line("card name: "))
        self._view.show_message("removed from binder")

    def _delete_binder(self, binder) -> None:
        self._system.delete_binder(binder.name)
        self._view.show_message(f"binder deleted: {binder.name}")

    def _trade_in_binder(self, binder) -> None:
        outgoing = self._view.read_line("outgoing name (or 'cancel' to abort): ").strip()
        if not outgoing or outgoing.lower() == CANCEL:
            return
        if not binder.contains(outgoing):
            self._view.show_error(f"card '{outgoing}' not found in binder '{binder.name}'")
            return
        incoming_name = self.handle_add_card()
        if incoming_name is None:
            return
        incoming = self._system.find_card_by_name_in_collection(incoming_name)
        if incoming is None:
            self._view.show_error(f"card '{incoming_name}' not found in collection")
            return

        outcome = self._system.trade_card(binder.name, outgoing, incoming, False)
        if outcome.needs_confirmation:
            approved = self._view.confirm(
                f"value difference ${outcome.delta:,.2f} is at least "
                f"${self._trade_threshold:,.2f}, proceed?"
            )
            if not approved:
                self._view.show_message(
                    f"trade cancelled; {outcome.incoming.name} stays in the collection"
                )
                return
            self._system.trade_card(binder.name, outgoing, incoming, True)
        self._view.show_message("trade completed")

    # ------------------------------------------------------------------ decks
    def handle_create_deck(self) -> None:
        deck = self._system.create_deck(self._view.read_line("deck name: "))
        self._view.show_message(f"deck created: {deck.name}")

    def handle_manage_decks(self) -> None:
        while True:
            self._view.show_manage_deck_menu()
            choice = self._choose()
            if choice == "1":
                self.handle_create_deck()
            elif choice == "2":
                if self._system.get_deck_names():
                    self.handle_view_deck()
                else:
                    self._view.show_error("there are no decks found")
            elif choice == "3":
                return
            else:
                self._invalid()

    def handle_view_deck(self) -> None:
        self._view.show_deck_names(self._system.get_deck_names())
        deck = self._system.find_deck_by_name(self._view.read_line("select deck: "))
        if deck is None:
            self._view.show_error("deck not found")
            return
        while True:
            has_cards = not deck.is_empty()
            self._view.show_deck_menu(deck.name, has_cards)
            choice = self._choose()
            actions = (
                {"1": self._add_to_deck, "2": self._remove_from_deck, "3": self._inspect_deck,
                 "4": self._delete_deck}
                if has_cards
                else {"1": self._add_to_deck, "2": self._delete_deck}
            )
            back, delete = ("5", "4") if has_cards else ("3", "2")
            if choice == back:
                return
            action = actions.get(choice)
            if action is None:
                self._invalid()
                continue
            try:
                action(deck)
            except CardStashError as exc:
                self._view.show_error(str(exc))
                continue
            if choice == delete:
                return

    def _add_to_deck(self, deck) -> None:
        self._system.add_card_to_deck(deck.name, self._view.read_line("card name: "))
        self._view.show_message("added to deck")

    def _remove_from_deck(self, deck) -> None:
        self._system.delete_card_from_deck(deck.name, self._view.read_line("card name: "))
        self._view.show_message("removed from deck")

    def _delete_deck(self, deck) -> None:
        self._system.delete_deck(deck.name)
        self._view.show_message(f"deck deleted: {deck.name}")

    def _inspect_deck(self, deck) -> None:
        self._view.show_deck(deck)
        if not self._view.confirm("do you want to view a specific card?"):
            return
        choice = self._view.read_line("view a card by number or name: ").strip()
        if choice.isdigit():
            card = deck.card_at(int(choice) - 1)
        else:
            card = deck.find_by_name(choice)
        self._view.show_card_details(card)

    # ---------------------------------------------------------------- helpers
    def _choose(self) -> str:
        return self._view.read_line("choose an option: ").strip()

    def _invalid(self) -> None:
        self._view.show_error("invalid option")

    def _ask(self, prompt: str) -> str:
        value = self._view.read_line(prompt)
        if value.strip().lower() == CANCEL:
            raise _Cancelled
        return value

    def _ask_rarity(self) -> Rarity:
        while True:
            self._view.show_rarity_options()
            raw = self._ask("input rarity (or 'cancel' to abort): ")
            try:
                return parse_rarity(raw)
            except InvalidAttributeError as exc:
                self._view.show_error(str(exc))

    def _ask_variation(self) -> Variation:
        while True:
            self._view.show_variation_options()
            raw = self._ask("input variation (or 'cancel' to abort): ")
            try:
                return parse_variation(raw)
            except InvalidAttributeError as exc:
                self._view.show_error(str(exc))

    def _ask_value(self) -> Decimal:
        while True:
            raw = self._ask("input base value (or 'cancel' to abort): ")
            try:
                return parse_value(raw)
            except InvalidAttributeError as exc:
                self._view.show_error(str(exc))
