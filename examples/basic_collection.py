"""Example: build a collection, file cards into a binder and trade one away."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from cardstash import Card, CardStashApp, CardStashConfig, Rarity
from cardstash.loaders import load_seed_from_json


def main() -> None:
    app = CardStashApp(CardStashConfig.from_env())
    app.event_bus.subscribe("binder.trade.completed", lambda payload: print(f"traded: {payload}"))

    load_seed_from_json(app.inventory, Path(__file__).with_name("seed") / "collection.json")

    incoming = Card(name="Storm Giant", rarity=Rarity.RARE, base_value=Decimal("6.50"))
    app.inventory.add_card_to_collection(incoming)

    outcome = app.inventory.trade_card("Trade Binder", "Ember Phoenix", incoming)
    if outcome.needs_confirmation:
        # A real front-end asks the user here.
        print(f"value difference {outcome.delta} needs approval, approving")
        app.inventory.trade_card("Trade Binder", "Ember Phoenix", incoming, force_approve=True)

    print(app.snapshot())


if __name__ == "__main__":
    main()
