"""
Selection State - Active Category Set

The set of active category ids. The set is never empty: removing the last
id falls back to the starter category.
"""

from __future__ import annotations

from typing import Iterable, Optional

from core.deck.constants import STARTER_CATEGORY_ID


class SelectionState:
    """
    Non-empty set of active category ids.

    Insertion order is kept for persistence only; membership is what matters.
    """

    def __init__(self, category_ids: Optional[Iterable[str]] = None):
        ids = list(dict.fromkeys(category_ids or ()))
        self._ids: list[str] = ids or [STARTER_CATEGORY_ID]

    def toggle(self, category_id: str) -> None:
        """
        Add the id if inactive, remove it if active.

        Removing the last active id leaves only the starter category.
        """
        if category_id in self._ids:
            self._ids.remove(category_id)
            if not self._ids:
                self._ids = [STARTER_CATEGORY_ID]
        else:
            self._ids.append(category_id)

    def as_list(self) -> list[str]:
        """Ordered ids, as stored."""
        return list(self._ids)

    def as_set(self) -> frozenset[str]:
        return frozenset(self._ids)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self):
        return iter(list(self._ids))

    def __repr__(self) -> str:
        return f"<SelectionState({', '.join(self._ids)})>"
