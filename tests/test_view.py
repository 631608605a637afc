from decimal import Decimal

from rich.console import Console

from cardstash.domain.binder import Binder
from cardstash.domain.cards import Card, Rarity, Variation
from cardstash.domain.collection import CardCollection
from cardstash.terminal.view import RichView


def _view() -> RichView:
    return RichView(Console(record=True, width=120))


def test_show_collection_lists_names_and_counts():
    collection = CardCollection()
    collection.add(Card(name="Goblin"))
    collection.increment("goblin")
    view = _view()
    view.show_collection(collection.sorted_view())
    text = view.console.export_text()
    assert "Goblin" in text
    assert "2" in text


def test_show_card_details_formats_value():
    view = _view()
    view.show_card_details(
        Card(name="Dragon", rarity=Rarity.LEGENDARY, variation=Variation.ALT_ART, base_value=Decimal("1234.5"))
    )
    text = view.console.export_text()
    assert "legendary" in text
    assert "alt_art" in text
    assert "$1,234.50" in text


def test_show_main_menu_adapts_to_state():
    view = _view()
    view.show_main_menu(False, False, False)
    view.show_main_menu(True, True, True)
    text = view.console.export_text()
    assert "Create a binder" in text
    assert "Manage decks" in text
    assert "Adjust card count" in text


def test_show_empty_binder():
    view = _view()
    view.show_binder(Binder("Trades"))
    assert "Binder: Trades is empty." in view.console.export_text()
