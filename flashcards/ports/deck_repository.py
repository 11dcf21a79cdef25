"""Port interfaces for deck and transcript persistence."""

from os import PathLike
from pathlib import Path
from typing import Protocol, runtime_checkable

from flashcards.domain.value_objects.card_record import CardRecord
from flashcards.domain.value_objects.transcript import Transcript


class DeckFileError(Exception):
    """Deck file could not be read."""

    pass


class DeckFileNotFoundError(DeckFileError):
    """Raised when the deck file does not exist."""

    def __init__(self, path: str | PathLike[str]):
        self.path = Path(path)
        super().__init__(f"File not found: {self.path}")


class DeckParseError(DeckFileError):
    """Raised when deck file contents are malformed.

    Attributes:
        line_number: 1-based line where parsing failed
    """

    def __init__(self, message: str, line_number: int):
        self.line_number = line_number
        super().__init__(f"Line {line_number}: {message}")


@runtime_checkable
class DeckRepository(Protocol):
    """Port for loading and saving decks.

    Abstracts the storage format (line-oriented text files in production).
    """

    def load(self, path: str | PathLike[str]) -> list[CardRecord]:
        """Read every record from a deck file.

        Args:
            path: File to read

        Returns:
            Records in file order

        Raises:
            DeckFileNotFoundError: If the file does not exist
            DeckParseError: If the file is malformed
        """
        ...

    def save(self, path: str | PathLike[str], records: list[CardRecord]) -> None:
        """Write records to a deck file, replacing its contents.

        Args:
            path: File to write
            records: Records in deck order
        """
        ...


@runtime_checkable
class TranscriptWriter(Protocol):
    """Port for saving the console transcript."""

    def save(self, path: str | PathLike[str], transcript: Transcript) -> None:
        """Write the transcript, one entry per line."""
        ...
