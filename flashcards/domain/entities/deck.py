"""Deck entity: the card store with its definition index."""

import logging
from collections.abc import Iterable

from flashcards.domain.entities.card import DefinitionRecord
from flashcards.domain.value_objects.answer_outcome import AnswerOutcome
from flashcards.domain.value_objects.card_record import CardRecord
from flashcards.domain.value_objects.hardest_cards import HardestCards

logger = logging.getLogger(__name__)


class DeckError(Exception):
    """Base class for rejected deck operations."""

    pass


class DuplicateCardError(DeckError):
    """Raised when adding a card that is already in the deck."""

    def __init__(self, card: str):
        self.card = card
        super().__init__(f'The card "{card}" already exists.')


class DuplicateDefinitionError(DeckError):
    """Raised when a definition is already used by another card."""

    def __init__(self, definition: str, card: str):
        self.definition = definition
        self.card = card
        super().__init__(f'The definition "{definition}" already exists.')


class CardNotFoundError(DeckError):
    """Raised when a card is not in the deck."""

    def __init__(self, card: str):
        self.card = card
        super().__init__(f'There is no such card: "{card}"')


class InvalidEntryError(DeckError):
    """Raised when card or definition text cannot be stored."""

    pass


def _validate_text(kind: str, text: str) -> None:
    if not text:
        raise InvalidEntryError(f"The {kind} must not be empty.")
    if "\n" in text or "\r" in text:
        raise InvalidEntryError(f"The {kind} must fit on a single line.")


class Deck:
    """In-memory flashcard deck.

    Maps each card to its DefinitionRecord and keeps a reverse index from
    definition text back to the card, so both card and definition stay
    unique across the deck. Neither mapping is exposed; every public method
    leaves the two consistent and a failed call leaves the deck unchanged.

    Iteration follows insertion order. Re-importing an existing card keeps
    its original position.
    """

    def __init__(self) -> None:
        self._cards: dict[str, DefinitionRecord] = {}
        self._definitions: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def cards(self) -> tuple[str, ...]:
        """Get all cards in deck order."""
        return tuple(self._cards)

    def definition_of(self, card: str) -> str:
        """Get the definition of a card.

        Raises:
            CardNotFoundError: If the card is not in the deck
        """
        return self._get_record(card).value

    def card_for_definition(self, definition: str) -> str | None:
        """Get the card that owns a definition, or None."""
        return self._definitions.get(definition)

    def add(self, card: str, definition: str) -> None:
        """Add a new card with a zeroed error counter.

        Args:
            card: Card text (unique in the deck)
            definition: Definition text (unique in the deck)

        Raises:
            InvalidEntryError: If either text is empty or spans several lines
            DuplicateCardError: If the card already exists
            DuplicateDefinitionError: If another card already has this definition
        """
        _validate_text("card", card)
        _validate_text("definition", definition)
        if card in self._cards:
            raise DuplicateCardError(card)
        owner = self._definitions.get(definition)
        if owner is not None:
            raise DuplicateDefinitionError(definition, owner)

        self._cards[card] = DefinitionRecord(definition)
        self._definitions[definition] = card
        logger.debug("Added card %r", card)

    def remove(self, card: str) -> None:
        """Remove a card and its definition.

        Raises:
            CardNotFoundError: If the card is not in the deck
        """
        record = self._cards.pop(card, None)
        if record is None:
            raise CardNotFoundError(card)
        del self._definitions[record.value]
        logger.debug("Removed card %r", card)

    def import_records(self, records: Iterable[CardRecord]) -> int:
        """Merge records into the deck in order.

        A record for an existing card overwrites its definition and error
        count; the card's previous definition is released. When records
        repeat a card, the last one wins.

        The merge is staged and only committed when every definition in the
        resulting deck still belongs to exactly one card.

        Args:
            records: Records to merge, in file order

        Returns:
            Number of records applied

        Raises:
            InvalidEntryError: If a record has empty text or a negative count
            DuplicateDefinitionError: If the merge would leave two cards
                sharing a definition
        """
        staged = dict(self._cards)
        count = 0
        for record in records:
            _validate_text("card", record.card)
            _validate_text("definition", record.definition)
            if record.error_count < 0:
                raise InvalidEntryError(
                    f'Negative error count for card "{record.card}": {record.error_count}'
                )
            staged[record.card] = DefinitionRecord(record.definition, record.error_count)
            count += 1

        definitions: dict[str, str] = {}
        for card, definition in staged.items():
            owner = definitions.get(definition.value)
            if owner is not None:
                raise DuplicateDefinitionError(definition.value, owner)
            definitions[definition.value] = card

        self._cards = staged
        self._definitions = definitions
        logger.debug("Imported %d records, deck now has %d cards", count, len(staged))
        return count

    def export_records(self) -> list[CardRecord]:
        """Get one record per card in deck order."""
        return [
            CardRecord(card, record.value, record.num_errors_answering)
            for card, record in self._cards.items()
        ]

    def record_answer(self, card: str, submitted_definition: str) -> AnswerOutcome:
        """Check a quiz answer and count it if wrong.

        Args:
            card: Card that was asked
            submitted_definition: Definition typed by the user

        Returns:
            AnswerOutcome; a wrong answer names the card it belongs to, if any

        Raises:
            CardNotFoundError: If the card is not in the deck
        """
        record = self._get_record(card)
        if submitted_definition == record.value:
            return AnswerOutcome.correct(record.value)

        record.record_error()
        return AnswerOutcome.wrong(record.value, self._definitions.get(submitted_definition))

    def reset_stats(self) -> None:
        """Set every error counter back to 0."""
        for record in self._cards.values():
            record.reset()

    def hardest_cards(self) -> HardestCards | None:
        """Find the cards with the most errors.

        Returns:
            HardestCards with every card sharing the highest count, or None
            if no card has been answered wrongly
        """
        max_errors = max(
            (record.num_errors_answering for record in self._cards.values()),
            default=0,
        )
        if max_errors == 0:
            return None
        cards = tuple(
            card
            for card, record in self._cards.items()
            if record.num_errors_answering == max_errors
        )
        return HardestCards(error_count=max_errors, cards=cards)

    def _get_record(self, card: str) -> DefinitionRecord:
        record = self._cards.get(card)
        if record is None:
            raise CardNotFoundError(card)
        return record
