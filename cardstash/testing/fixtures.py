"""Pytest fixtures for CardStash."""

from __future__ import annotations

import pytest

from ..app import CardStashApp
from ..config import CardStashConfig
from ..domain.inventory import InventorySystem


@pytest.fixture()
def memory_app() -> CardStashApp:
    return CardStashApp(CardStashConfig())


@pytest.fixture()
def inventory(memory_app: CardStashApp) -> InventorySystem:
    return memory_app.inventory
