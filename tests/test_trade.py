from decimal import Decimal

import pytest

from cardstash.config import TradeConfig
from cardstash.domain.cards import Card, Rarity
from cardstash.domain.exceptions import DuplicateInBinderError, NotFoundError, NotFoundInBinderError
from cardstash.domain.inventory import InventorySystem, TradeStatus


def _card(name: str, value: str) -> Card:
    return Card(name=name, rarity=Rarity.RARE, base_value=Decimal(value))


def _state(system: InventorySystem):
    return (
        tuple(system.collection.sorted_view()),
        system.find_binder_by_name("Trades").list_cards(),
    )


@pytest.fixture()
def trading(inventory):
    inventory.add_card_to_collection(_card("Outgoing", "5.00"))
    inventory.create_binder("Trades")
    inventory.add_card_to_binder("Trades", "outgoing")
    return inventory


def test_trade_at_threshold_needs_confirmation(trading):
    incoming = _card("Incoming", "6.00")
    trading.add_card_to_collection(incoming)
    before = _state(trading)

    outcome = trading.trade_card("Trades", "outgoing", incoming, False)

    assert outcome.status is TradeStatus.NEEDS_CONFIRMATION
    assert outcome.needs_confirmation and not outcome.completed
    assert outcome.delta == Decimal("1.00")
    assert _state(trading) == before


def test_trade_confirmed_performs_swap(trading):
    incoming = _card("Incoming", "6.00")
    trading.add_card_to_collection(incoming)

    outcome = trading.trade_card("Trades", "outgoing", incoming, force_approve=True)

    assert outcome.completed
    binder = trading.find_binder_by_name("Trades")
    assert [card.name for card in binder.list_cards()] == ["Incoming"]
    assert trading.collection.quantity("outgoing") == 1
    assert trading.find_card_by_name_in_collection("incoming") is None


def test_trade_below_threshold_completes_immediately(trading):
    incoming = _card("Incoming", "5.50")
    trading.add_card_to_collection(incoming)

    outcome = trading.trade_card("Trades", "Outgoing", incoming)

    assert outcome.status is TradeStatus.COMPLETED
    assert outcome.delta == Decimal("0.50")
    assert trading.find_binder_by_name("Trades").contains("incoming")


def test_trade_threshold_is_symmetric(trading):
    incoming = _card("Cheap", "3.99")
    trading.add_card_to_collection(incoming)
    assert trading.trade_card("Trades", "outgoing", incoming).needs_confirmation


def test_trade_missing_outgoing(trading):
    incoming = _card("Incoming", "5.00")
    trading.add_card_to_collection(incoming)
    with pytest.raises(NotFoundInBinderError):
        trading.trade_card("Trades", "ghost", incoming)
    with pytest.raises(NotFoundError):
        trading.trade_card("Missing", "outgoing", incoming)


def test_trade_incoming_not_in_stock_rolls_back(trading):
    before = _state(trading)
    with pytest.raises(NotFoundError):
        trading.trade_card("Trades", "outgoing", _card("Unknown", "5.00"))
    assert _state(trading) == before
    assert trading.collection.find("outgoing") is None


def test_trade_incoming_already_in_binder_rolls_back(trading):
    other = _card("Other", "5.00")
    trading.add_card_to_collection(other)
    trading.increment_card_in_collection("other")
    trading.add_card_to_binder("Trades", "other")
    before = _state(trading)

    with pytest.raises(DuplicateInBinderError):
        trading.trade_card("Trades", "outgoing", other)

    assert _state(trading) == before
    assert trading.collection.quantity("other") == 1


def test_trade_conserves_circulation(trading):
    incoming = _card("Incoming", "5.25")
    trading.add_card_to_collection(incoming)
    total = trading.circulation("outgoing") + trading.circulation("incoming")
    trading.trade_card("Trades", "outgoing", incoming)
    assert trading.circulation("outgoing") + trading.circulation("incoming") == total
    assert trading.circulation("outgoing") == 1
    assert trading.circulation("incoming") == 1


def test_custom_threshold():
    system = InventorySystem(trade_config=TradeConfig(confirmation_threshold=Decimal("10")))
    system.add_card_to_collection(_card("A", "1"))
    system.add_card_to_collection(_card("B", "9"))
    system.create_binder("Trades")
    system.add_card_to_binder("Trades", "A")
    outcome = system.trade_card("Trades", "A", system.find_card_by_name_in_collection("B"))
    assert outcome.completed


def test_trade_value_comes_from_collection_definition(trading):
    trading.add_card_to_collection(_card("Incoming", "100"))
    before = _state(trading)

    outcome = trading.trade_card("Trades", "outgoing", _card("incoming", "5.50"), False)

    assert outcome.needs_confirmation
    assert outcome.delta == Decimal("95.00")
    assert outcome.incoming.base_value == Decimal("100")
    assert _state(trading) == before


def test_trade_unknown_incoming_rejected_before_any_change(trading):
    before = _state(trading)
    with pytest.raises(NotFoundError):
        trading.trade_card("Trades", "outgoing", _card("Unknown", "50.00"), force_approve=False)
    assert _state(trading) == before
