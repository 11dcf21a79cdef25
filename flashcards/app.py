"""
Flashcards console application.

Interactive command loop over a single deck. Owns every user-facing message;
deck rules live in the domain layer.
"""

import logging
from collections.abc import Callable
from os import PathLike

from flashcards.domain.entities.deck import (
    CardNotFoundError,
    Deck,
    DeckError,
)
from flashcards.domain.services.command_parser import CommandParser, CommandType
from flashcards.domain.services.quiz_service import QuizService
from flashcards.domain.value_objects.answer_outcome import AnswerKind, AnswerOutcome
from flashcards.domain.value_objects.hardest_cards import HardestCards
from flashcards.ports.console import ConsolePort
from flashcards.ports.deck_repository import (
    DeckFileNotFoundError,
    DeckParseError,
    DeckRepository,
    TranscriptWriter,
)

logger = logging.getLogger(__name__)


class EndOfInput(Exception):
    """Raised when the console has no more input."""

    pass


def _describe(error: Exception) -> str:
    """Short reason for a failed file operation."""
    return getattr(error, "strerror", None) or str(error)


def format_answer(outcome: AnswerOutcome) -> str:
    """Build the feedback line for a quiz answer."""
    if outcome.kind == AnswerKind.CORRECT:
        return "Correct answer"
    if outcome.kind == AnswerKind.WRONG_KNOWN_OTHER:
        return (
            f'Wrong answer. The correct one is "{outcome.correct_definition}", '
            f'you\'ve just written the definition of "{outcome.other_card}".'
        )
    return f'Wrong answer. The correct one is "{outcome.correct_definition}".'


def format_hardest_cards(hardest: HardestCards | None) -> str:
    """Build the report line for the hardest card command."""
    if hardest is None:
        return "There are no cards with errors."
    if hardest.is_single:
        prefix, pronoun = "The hardest card is", "it"
    else:
        prefix, pronoun = "The hardest cards are", "them"
    cards = ", ".join(f'"{card}"' for card in hardest.cards)
    return f"{prefix} {cards}. You have {hardest.error_count} errors answering {pronoun}."


class FlashcardsApp:
    """Console command loop for one deck.

    Lifecycle:
    - Startup: load the deck from ``import_path`` if given
    - Loop: prompt for an action and run it until ``exit`` or end of input
    - Shutdown: save the deck to ``export_path`` if given
    """

    def __init__(
        self,
        deck: Deck,
        console: ConsolePort,
        repository: DeckRepository,
        transcript_writer: TranscriptWriter,
        quiz: QuizService | None = None,
        parser: CommandParser | None = None,
        import_path: str | PathLike[str] | None = None,
        export_path: str | PathLike[str] | None = None,
    ) -> None:
        """Initialize application.

        Args:
            deck: Deck to operate on
            console: Line-based user interaction (records the transcript)
            repository: Deck file persistence
            transcript_writer: Saves the transcript for the ``log`` command
            quiz: Random card picker for ``ask`` (built from deck if omitted)
            parser: Action parser (default actions if omitted)
            import_path: Deck file loaded at startup
            export_path: Deck file saved on exit
        """
        self._deck = deck
        self._console = console
        self._repository = repository
        self._transcript_writer = transcript_writer
        self._quiz = quiz or QuizService(deck)
        self._parser = parser or CommandParser()
        self._import_path = import_path
        self._export_path = export_path
        self._handlers: dict[CommandType, Callable[[], None]] = {
            CommandType.ADD: self.add,
            CommandType.REMOVE: self.remove,
            CommandType.IMPORT: self.import_deck,
            CommandType.EXPORT: self.export_deck,
            CommandType.ASK: self.ask,
            CommandType.LOG: self.log,
            CommandType.HARDEST_CARD: self.hardest_card,
            CommandType.RESET_STATS: self.reset_stats,
        }

    def run(self) -> int:
        """Run the command loop.

        Returns:
            Process exit code
        """
        logger.info("Starting flashcards session")
        if self._import_path is not None:
            self._load(self._import_path)

        try:
            while True:
                self._console.write_line(
                    f"Input the action {self._parser.supported_actions}:"
                )
                command = self._parser.parse(self._read())
                if command.command_type == CommandType.EXIT:
                    break
                handler = self._handlers.get(command.command_type)
                if handler is None:
                    # No blank line after the hint
                    self.help(command.raw_text)
                    continue
                handler()
                self._console.write_line()
        except EndOfInput:
            logger.info("End of input, exiting")

        self.exit()
        return 0

    def add(self) -> None:
        self._console.write_line("The card:")
        card = self._read()
        if card in self._deck:
            self._console.write_line(f'The card "{card}" already exists.')
            return

        self._console.write_line("The definition of the card:")
        definition = self._read()
        try:
            self._deck.add(card, definition)
        except DeckError as e:
            self._console.write_line(str(e))
            return
        self._console.write_line(f'The pair ("{card}":"{definition}") has been added.')

    def remove(self) -> None:
        self._console.write_line("The card:")
        card = self._read()
        try:
            self._deck.remove(card)
        except CardNotFoundError:
            self._console.write_line(f'Can\'t remove "{card}": there is no such card.')
            return
        self._console.write_line("The card has been removed.")

    def import_deck(self) -> None:
        self._console.write_line("File name:")
        self._load(self._read())

    def export_deck(self) -> None:
        self._console.write_line("File name:")
        self._save(self._read())

    def ask(self) -> None:
        """Quiz the user on randomly picked cards."""
        self._console.write_line("How many times to ask?")
        answer = self._read().strip()
        try:
            times = int(answer)
        except ValueError:
            times = 0
        if times <= 0:
            self._console.write_line(f'"{answer}" is not a positive number.')
            return
        if len(self._deck) == 0:
            self._console.write_line("There are no cards to ask.")
            return

        for _ in range(times):
            card = self._quiz.next_card()
            if card is None:
                return
            self._console.write_line(f'Print the definition of "{card}":')
            outcome = self._quiz.submit(card, self._read())
            self._console.write_line(format_answer(outcome))

    def log(self) -> None:
        self._console.write_line("File name:")
        filename = self._read()
        try:
            self._transcript_writer.save(filename, self._console.transcript)
        except (OSError, UnicodeError, LookupError) as e:
            logger.warning("Failed to save log to %s: %s", filename, e)
            self._console.write_line(f"Can't save the log: {_describe(e)}")
            return
        self._console.write_line("The log has been saved.")

    def hardest_card(self) -> None:
        self._console.write_line(format_hardest_cards(self._deck.hardest_cards()))

    def reset_stats(self) -> None:
        self._deck.reset_stats()
        self._console.write_line("Card statistics has been reset.")

    def help(self, action: str) -> None:
        self._console.write_line(
            f"Oops! Can't perform: {action}. What about giving one of the "
            f"supported actions {self._parser.supported_actions} a try?"
        )

    def exit(self) -> None:
        """Say goodbye and save the deck if an export path was given."""
        self._console.write_line("Bye bye!")
        if self._export_path is not None:
            self._save(self._export_path)
        logger.info("Flashcards session finished")

    def _read(self) -> str:
        line = self._console.read_line()
        if line is None:
            raise EndOfInput()
        return line

    def _load(self, path: str | PathLike[str]) -> None:
        """Merge a deck file into the deck, reporting failures to the user."""
        try:
            records = self._repository.load(path)
            count = self._deck.import_records(records)
        except DeckFileNotFoundError:
            self._console.write_line("File not found.")
            return
        except (DeckParseError, DeckError, UnicodeDecodeError, LookupError) as e:
            logger.warning("Rejected deck file %s: %s", path, e)
            self._console.write_line(f"Can't load the file: {e}")
            return
        except OSError as e:
            logger.warning("Failed to read deck file %s: %s", path, e)
            self._console.write_line(f"Can't read the file: {_describe(e)}")
            return
        self._console.write_line(f"{count} cards have been loaded.")

    def _save(self, path: str | PathLike[str]) -> None:
        records = self._deck.export_records()
        try:
            self._repository.save(path, records)
        except (OSError, UnicodeError, LookupError) as e:
            logger.warning("Failed to save deck to %s: %s", path, e)
            self._console.write_line(f"Can't save the file: {_describe(e)}")
            return
        self._console.write_line(f"{len(records)} cards have been saved.")
