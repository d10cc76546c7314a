"""
Error types raised by the deck engine.

Only CatalogLoadError is meant to reach the application. The others are
raised at the boundary where they occur and absorbed there.
"""


class DeckError(Exception):
    """Base class for deck engine errors."""


class EmptyPool(DeckError):
    """The current selection resolves to zero cards."""


class PersistenceDecodeError(DeckError):
    """The stored selection could not be decoded."""


class PersistenceReadError(DeckError):
    """The store could not be read."""


class PersistenceWriteError(DeckError):
    """The selection could not be written to the store."""


class CatalogLoadError(DeckError):
    """The prompt catalog is missing or malformed."""
