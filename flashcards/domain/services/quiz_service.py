"""Quiz service: random card selection and answer checking."""

import logging
import random

from flashcards.domain.entities.deck import Deck
from flashcards.domain.value_objects.answer_outcome import AnswerOutcome

logger = logging.getLogger(__name__)


class QuizService:
    """Asks random cards from a deck and scores the answers.

    Selection is uniform over the deck's current cards. Scoring is left to
    the deck, which counts wrong answers per card.
    """

    def __init__(self, deck: Deck, rng: random.Random | None = None) -> None:
        """Initialize quiz service.

        Args:
            deck: Deck to quiz from
            rng: Random source (pass a seeded instance for reproducible quizzes)
        """
        self._deck = deck
        self._rng = rng or random.Random()

    def next_card(self) -> str | None:
        """Pick a random card, or None if the deck is empty."""
        cards = self._deck.cards()
        if not cards:
            return None
        return self._rng.choice(cards)

    def submit(self, card: str, answer: str) -> AnswerOutcome:
        """Score an answer for a card.

        Raises:
            CardNotFoundError: If the card is not in the deck
        """
        outcome = self._deck.record_answer(card, answer)
        logger.debug("Answer for %r: %s", card, outcome.kind)
        return outcome
