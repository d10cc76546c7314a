"""
Streamlit session state and resource initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core import catalog_repo, deck
from core.schemas import Catalog


@st.cache_resource
def get_catalog() -> Catalog:
    """
    Load the prompt catalog (once per server process).
    """
    return catalog_repo.load_catalog()


@st.cache_resource
def get_preference_store() -> deck.KeyValueStore:
    """
    Open the preference store (once per server process).
    """
    return deck.SqlKeyValueStore(deck.get_engine())


def ensure_session_state() -> None:
    """
    Create the deck session for this browser session if missing.
    """
    if "deck" not in st.session_state:
        st.session_state.deck = deck.DeckSession(
            catalog=get_catalog(),
            preferences=deck.PreferencesAdapter(get_preference_store()),
        )
