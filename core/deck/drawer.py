"""
Drawer - Random Card Selection

Picks one card uniformly at random from a pool. The randomness source is
injected so that draws are reproducible under test.
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence

from core.deck.errors import EmptyPool
from core.deck.pool import Card


class RandomSource(Protocol):
    """Anything with random.Random's randrange."""

    def randrange(self, stop: int) -> int: ...


_default_rng = random.Random()


def draw(
    pool: Sequence[Card],
    rng: Optional[RandomSource] = None,
    previous: Optional[Card] = None,
) -> Card:
    """
    Draw one card from the pool.

    When `previous` is given, cards equal to it are skipped as long as the
    pool holds anything else, so the same prompt is not shown twice in a row.

    Args:
        pool: Cards eligible for drawing
        rng: Randomness source (defaults to a module-level random.Random)
        previous: Card currently displayed, if any

    Returns:
        The drawn card

    Raises:
        EmptyPool: If the pool has no cards
    """
    if not pool:
        raise EmptyPool("no cards in the current selection")

    rng = rng or _default_rng

    candidates = pool
    if previous is not None:
        others = [card for card in pool if card != previous]
        if others:
            candidates = others

    return candidates[rng.randrange(len(candidates))]
