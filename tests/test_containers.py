import pytest

from cardstash.domain.binder import Binder
from cardstash.domain.cards import Card
from cardstash.domain.deck import Deck
from cardstash.domain.exceptions import (
    DuplicateInBinderError,
    DuplicateInDeckError,
    IndexOutOfRangeError,
    NotFoundError,
    NotFoundInBinderError,
    NotFoundInDeckError,
)


def test_binder_add_remove():
    binder = Binder("Trades")
    assert binder.is_empty()
    binder.add_card(Card(name="Goblin"))
    assert binder.contains("GOBLIN")
    with pytest.raises(DuplicateInBinderError):
        binder.add_card(Card(name="goblin"))
    removed = binder.remove_card(" goblin ")
    assert removed.name == "Goblin"
    assert binder.is_empty()


def test_binder_remove_missing():
    binder = Binder("Trades")
    with pytest.raises(NotFoundInBinderError) as exc_info:
        binder.remove_card("Goblin")
    assert isinstance(exc_info.value, NotFoundError)
    assert "Trades" in str(exc_info.value)


def test_binder_list_is_snapshot():
    binder = Binder("Trades")
    binder.add_card(Card(name="b"))
    binder.add_card(Card(name="A"))
    snapshot = binder.list_cards()
    binder.remove_card("a")
    assert [card.name for card in snapshot] == ["A", "b"]
    assert len(binder) == 1


def test_deck_keeps_insertion_order_after_removal():
    deck = Deck("Aggro")
    for name in ("A", "B", "C"):
        deck.add_card(Card(name=name))
    deck.remove_card("B")
    assert [card.name for card in deck.list_cards()] == ["A", "C"]
    assert deck.card_at(0).name == "A"
    assert deck.card_at(1).name == "C"


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_deck_card_at_out_of_range(index):
    deck = Deck("Aggro")
    deck.add_card(Card(name="A"))
    deck.add_card(Card(name="B"))
    with pytest.raises(IndexOutOfRangeError):
        deck.card_at(index)


def test_deck_find_by_name():
    deck = Deck("Aggro")
    deck.add_card(Card(name="Goblin King"))
    assert deck.find_by_name("goblin king").name == "Goblin King"
    with pytest.raises(NotFoundInDeckError):
        deck.find_by_name("Orc")
    with pytest.raises(DuplicateInDeckError):
        deck.add_card(Card(name="GOBLIN KING"))
