"""
Pool Builder

Derives the drawable cards from the catalog and the active selection.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from core.schemas import Catalog, CategoryDisplay


@dataclass(frozen=True)
class Card:
    """
    One drawable prompt with its category's display metadata.
    """
    text: str
    source_category_id: str
    category_name: str
    display: CategoryDisplay


def build_pool(catalog: Catalog, selection: Collection[str]) -> list[Card]:
    """
    Build the pool of cards for a selection.

    Categories keep catalog order and prompts keep their order within a
    category. Ids not present in the catalog are ignored, so an empty or
    unknown selection yields an empty pool.

    Args:
        catalog: Loaded prompt catalog
        selection: Active category ids

    Returns:
        List of Card values, one per prompt of each selected category
    """
    selected = set(selection)
    return [
        Card(
            text=prompt,
            source_category_id=category.id,
            category_name=category.name,
            display=category.display,
        )
        for category in catalog.categories
        if category.id in selected
        for prompt in category.prompts
    ]
