"""Shared fixtures for the Next Card test suite."""

import pytest

from core.deck import InMemoryStore, PreferencesAdapter
from core.schemas import Catalog


@pytest.fixture
def catalog():
    """Three-category catalog with flat display fields, as in cards.json."""
    return Catalog.model_validate({
        "categories": [
            {"id": "starter", "name": "Starter", "color": "#2563eb", "gradient": "g-starter", "prompts": ["A", "B"]},
            {"id": "deep", "name": "Deep", "color": "#7c3aed", "gradient": "g-deep", "prompts": ["C"]},
            {"id": "fun", "name": "Fun", "color": "#ea580c", "gradient": "g-fun", "prompts": ["D", "E", "F"]},
        ]
    })


@pytest.fixture
def scenario_catalog():
    """Two single-prompt categories."""
    return Catalog.model_validate({
        "categories": [
            {"id": "starter", "name": "Starter", "prompts": ["Hi"]},
            {"id": "deep", "name": "Deep", "prompts": ["Why?"]},
        ]
    })


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def preferences(store):
    return PreferencesAdapter(store)


class FixedIndex:
    """Randomness stub that always returns the same index (clamped)."""

    def __init__(self, index=0):
        self.index = index
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return min(self.index, stop - 1)


@pytest.fixture
def fixed_index():
    """Factory for FixedIndex randomness stubs."""
    return FixedIndex
