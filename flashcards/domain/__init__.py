# Domain layer - Business logic (NO external dependencies)

from .entities import (
    CardNotFoundError,
    Deck,
    DeckError,
    DefinitionRecord,
    DuplicateCardError,
    DuplicateDefinitionError,
    InvalidEntryError,
)
from .value_objects import (
    AnswerKind,
    AnswerOutcome,
    CardRecord,
    HardestCards,
    Transcript,
)

__all__ = [
    "AnswerKind",
    "AnswerOutcome",
    "CardNotFoundError",
    "CardRecord",
    "Deck",
    "DeckError",
    "DefinitionRecord",
    "DuplicateCardError",
    "DuplicateDefinitionError",
    "HardestCards",
    "InvalidEntryError",
    "Transcript",
]
