"""
Composition Root.

Centralized dependency wiring for the application.
All factory functions that instantiate adapters belong here to maintain
hexagonal architecture (domain NEVER imports from adapters).
"""

import random
from os import PathLike

from flashcards.adapters.terminal_console import TerminalConsole
from flashcards.adapters.text_file_deck import (
    TextFileDeckRepository,
    TextFileTranscriptWriter,
)
from flashcards.app import FlashcardsApp
from flashcards.config import get_file_encoding, get_random_seed
from flashcards.domain.entities.deck import Deck
from flashcards.domain.services.quiz_service import QuizService
from flashcards.domain.value_objects.transcript import Transcript
from flashcards.ports.console import ConsolePort


def create_quiz_service(deck: Deck, seed: int | None = None) -> QuizService:
    """Create QuizService, seeded from configuration unless a seed is given."""
    if seed is None:
        seed = get_random_seed()
    return QuizService(deck, random.Random(seed))


def create_app(
    import_path: str | PathLike[str] | None = None,
    export_path: str | PathLike[str] | None = None,
    console: ConsolePort | None = None,
) -> FlashcardsApp:
    """Create FlashcardsApp with file adapters and a fresh deck.

    Args:
        import_path: Deck file loaded at startup
        export_path: Deck file saved on exit
        console: Console to use (terminal console if omitted)

    Returns:
        FlashcardsApp ready to run
    """
    encoding = get_file_encoding()
    deck = Deck()
    return FlashcardsApp(
        deck=deck,
        console=console or TerminalConsole(Transcript()),
        repository=TextFileDeckRepository(encoding=encoding),
        transcript_writer=TextFileTranscriptWriter(encoding=encoding),
        quiz=create_quiz_service(deck),
        import_path=import_path,
        export_path=export_path,
    )
