"""
Deck Session - Selection State Machine

Owns the active selection, the current pool and the displayed card for one
user session. Each toggle saves the selection, rebuilds the pool and draws a
fresh card, in that order.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.deck.constants import ROTATION_PERIOD, STARTER_CATEGORY_ID
from core.deck.drawer import RandomSource, draw
from core.deck.errors import EmptyPool
from core.deck.persistence import PreferencesAdapter
from core.deck.pool import Card, build_pool
from core.deck.selection import SelectionState
from core.schemas import Catalog

logger = logging.getLogger(__name__)


class DeckSession:
    """
    Card-draw session over a catalog.

    Args:
        catalog: Loaded prompt catalog
        preferences: Adapter for the persisted selection
        rng: Randomness source for draws (defaults to the drawer's own)
    """

    def __init__(
        self,
        catalog: Catalog,
        preferences: PreferencesAdapter,
        rng: Optional[RandomSource] = None,
    ):
        self.catalog = catalog
        self.preferences = preferences
        self.rng = rng

        if STARTER_CATEGORY_ID not in catalog:
            logger.warning("Catalog has no %r category; fallback selection will be empty", STARTER_CATEGORY_ID)

        self.selection = SelectionState(self._known_ids(preferences.load()))
        self.pool: list[Card] = build_pool(catalog, self.selection.as_set())
        self.current_card: Optional[Card] = None
        self.draw_count = 0

        self._draw()

    def _known_ids(self, stored: Optional[list[str]]) -> Optional[list[str]]:
        # Ids of categories no longer in the catalog are dropped
        if stored is None:
            return None
        known = [category_id for category_id in stored if category_id in self.catalog]
        if len(known) < len(stored):
            dropped = [category_id for category_id in stored if category_id not in self.catalog]
            logger.warning("Ignoring saved categories not in catalog: %s", dropped)
        return known

    # ---- Transitions ----

    def toggle_category(self, category_id: str) -> None:
        """
        Toggle a category, then save, rebuild the pool and draw.
        """
        self.selection.toggle(category_id)
        self.preferences.save(self.selection.as_list())
        self.pool = build_pool(self.catalog, self.selection.as_set())
        self._draw()

    def request_draw(self) -> Optional[Card]:
        """
        Draw a new card with the selection unchanged.

        Returns:
            The displayed card (unchanged if the pool is empty)
        """
        self._draw()
        return self.current_card

    def _draw(self) -> None:
        try:
            card = draw(self.pool, rng=self.rng, previous=self.current_card)
        except EmptyPool:
            logger.warning("No cards for selection %s; keeping current card", self.selection.as_list())
            return
        self.current_card = card
        self.draw_count += 1

    # ---- Queries ----

    def get_current_card(self) -> Optional[Card]:
        return self.current_card

    def get_selection(self) -> list[str]:
        return self.selection.as_list()

    def is_selected(self, category_id: str) -> bool:
        return category_id in self.selection

    @property
    def rotation_index(self) -> int:
        """Background rotation slot for the current card."""
        return self.draw_count % ROTATION_PERIOD
