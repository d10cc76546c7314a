"""
Deck - Conversation Card Engine

Category selection, pool building, random draws and preference persistence
for the Next Card app.

Quick start:
    from core import deck, catalog_repo

    catalog = catalog_repo.load_catalog()
    store = deck.SqlKeyValueStore(deck.get_engine())
    session = deck.DeckSession(catalog, deck.PreferencesAdapter(store))

    session.toggle_category("deep")
    card = session.get_current_card()
"""

# Session API
from core.deck.session import DeckSession

# Engine pieces
from core.deck.pool import Card, build_pool
from core.deck.drawer import RandomSource, draw
from core.deck.selection import SelectionState

# Persistence
from core.deck.persistence import (
    KeyValueStore,
    InMemoryStore,
    SqlKeyValueStore,
    PreferencesAdapter,
    decode_selection,
    encode_selection,
)
from core.deck.database import get_engine, get_database_url, init_db, is_test_mode

# Errors
from core.deck.errors import (
    DeckError,
    EmptyPool,
    PersistenceDecodeError,
    PersistenceReadError,
    PersistenceWriteError,
    CatalogLoadError,
)

# Constants
from core.deck.constants import STARTER_CATEGORY_ID, PREFERENCES_KEY, ROTATION_PERIOD


__all__ = [
    # Session
    "DeckSession",

    # Engine
    "Card",
    "build_pool",
    "RandomSource",
    "draw",
    "SelectionState",

    # Persistence
    "KeyValueStore",
    "InMemoryStore",
    "SqlKeyValueStore",
    "PreferencesAdapter",
    "decode_selection",
    "encode_selection",
    "get_engine",
    "get_database_url",
    "init_db",
    "is_test_mode",

    # Errors
    "DeckError",
    "EmptyPool",
    "PersistenceDecodeError",
    "PersistenceReadError",
    "PersistenceWriteError",
    "CatalogLoadError",

    # Constants
    "STARTER_CATEGORY_ID",
    "PREFERENCES_KEY",
    "ROTATION_PERIOD",
]
