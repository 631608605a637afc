from cardstash.domain.cards import Card
from cardstash.domain.events import EventBus
from cardstash.domain.inventory import InventorySystem


def test_unsubscribed_listener_is_not_called():
    bus = EventBus()
    calls = []
    listener = calls.append
    bus.subscribe("deck.created", listener)
    system = InventorySystem(event_bus=bus)
    system.create_deck("Aggro")
    bus.unsubscribe("deck.created", listener)
    system.create_deck("Control")
    assert calls == [{"deck": "Aggro"}]
    assert bus.listeners("deck.created") == ()


def test_trade_event_payload():
    bus = EventBus()
    trades = []
    bus.subscribe("binder.trade.completed", trades.append)
    system = InventorySystem(event_bus=bus)
    system.add_card_to_collection(Card(name="A", base_value="2.00"))
    system.add_card_to_collection(Card(name="B", base_value="2.40"))
    system.create_binder("Trades")
    system.add_card_to_binder("Trades", "A")
    system.trade_card("Trades", "A", system.find_card_by_name_in_collection("B"))
    assert trades == [{"binder": "Trades", "outgoing": "A", "incoming": "B", "delta": "0.40"}]


def test_failing_listener_does_not_fail_committed_operation(caplog):
    bus = EventBus()
    calls = []

    def broken(payload):
        raise RuntimeError("listener down")

    bus.subscribe("binder.card.added", broken)
    bus.subscribe("binder.card.added", calls.append)
    system = InventorySystem(event_bus=bus)
    system.add_card_to_collection(Card(name="A"))
    system.create_binder("B")

    card = system.add_card_to_binder("B", "A")

    assert card.name == "A"
    assert system.find_binder_by_name("B").contains("A")
    assert system.collection.quantity("A") == 0
    assert calls == [{"binder": "B", "card": "A"}]
    assert "binder.card.added" in caplog.text
