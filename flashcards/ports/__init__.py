# Ports layer - Abstract interfaces (Protocols)

from .console import ConsolePort
from .deck_repository import (
    DeckFileError,
    DeckFileNotFoundError,
    DeckParseError,
    DeckRepository,
    TranscriptWriter,
)

__all__ = [
    "ConsolePort",
    "DeckFileError",
    "DeckFileNotFoundError",
    "DeckParseError",
    "DeckRepository",
    "TranscriptWriter",
]
