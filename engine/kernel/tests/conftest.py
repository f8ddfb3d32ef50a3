"""
Engine kernel test configuration.

Shared fixtures: the seeded state, a store over the sample inventory, and a
command factory with a fixed clock so reducer tests are reproducible.
"""

import pytest

from engine.kernel.commands import make_command
from engine.kernel.mock_data import MOCK_PRODUCTS
from engine.kernel.reducer import empty_state
from engine.kernel.store import ProductStore

TS = "2024-04-01T12:00:00.000Z"


@pytest.fixture
def seeded():
    """Initial state over the twelve sample products."""
    return empty_state(MOCK_PRODUCTS)


@pytest.fixture
def store():
    return ProductStore(MOCK_PRODUCTS)


@pytest.fixture
def cmd():
    """cmd(type, payload) → Command with an increasing sequence and a fixed timestamp."""
    counter = {"seq": 0}

    def build(type, payload=None, timestamp=TS):
        counter["seq"] += 1
        return make_command(counter["seq"], type, payload, timestamp=timestamp)

    return build
