"""Domain entities - objects with identity."""

from .card import DefinitionRecord
from .deck import (
    CardNotFoundError,
    Deck,
    DeckError,
    DuplicateCardError,
    DuplicateDefinitionError,
    InvalidEntryError,
)

__all__ = [
    "CardNotFoundError",
    "Deck",
    "DeckError",
    "DefinitionRecord",
    "DuplicateCardError",
    "DuplicateDefinitionError",
    "InvalidEntryError",
]
