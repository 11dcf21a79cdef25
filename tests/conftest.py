import random

import pytest

from flashcards.adapters.terminal_console import TerminalConsole
from flashcards.adapters.text_file_deck import (
    TextFileDeckRepository,
    TextFileTranscriptWriter,
)
from flashcards.app import FlashcardsApp
from flashcards.domain.entities.deck import Deck
from flashcards.domain.services.quiz_service import QuizService
from flashcards.domain.value_objects.card_record import CardRecord


class ScriptedInput:
    """Feeds prepared lines to a console, then signals end of input."""

    def __init__(self, lines):
        self._lines = iter(lines)

    def __call__(self):
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None


class FirstChoice(random.Random):
    """Random source that always picks the first candidate."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def deck():
    return Deck()


@pytest.fixture
def capital_deck():
    deck = Deck()
    deck.import_records([CardRecord("capital", "Paris", 0)])
    return deck


@pytest.fixture
def make_app():
    """Build a FlashcardsApp driven by scripted input.

    Returns (app, outputs, console); outputs collects every printed line.
    """

    def _make(inputs, deck=None, import_path=None, export_path=None, rng=None):
        outputs = []
        console = TerminalConsole(input_fn=ScriptedInput(inputs), output_fn=outputs.append)
        deck = deck if deck is not None else Deck()
        app = FlashcardsApp(
            deck=deck,
            console=console,
            repository=TextFileDeckRepository(),
            transcript_writer=TextFileTranscriptWriter(),
            quiz=QuizService(deck, rng or FirstChoice()),
            import_path=import_path,
            export_path=export_path,
        )
        return app, outputs, console

    return _make
