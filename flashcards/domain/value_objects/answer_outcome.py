"""Quiz answer outcome value objects."""

from dataclasses import dataclass
from enum import StrEnum


class AnswerKind(StrEnum):
    """How a submitted definition relates to the asked card.

    States:
        CORRECT: Submitted text is the card's definition
        WRONG_KNOWN_OTHER: Submitted text is the definition of another card
        WRONG_UNKNOWN: Submitted text is not a definition in the deck
    """

    CORRECT = "correct"
    WRONG_KNOWN_OTHER = "wrong_known_other"
    WRONG_UNKNOWN = "wrong_unknown"


@dataclass(frozen=True)
class AnswerOutcome:
    """Result of checking one quiz answer (immutable value object)."""

    kind: AnswerKind
    correct_definition: str
    other_card: str | None = None

    @classmethod
    def correct(cls, definition: str) -> "AnswerOutcome":
        return cls(AnswerKind.CORRECT, definition)

    @classmethod
    def wrong(cls, definition: str, other_card: str | None = None) -> "AnswerOutcome":
        """Build a wrong-answer outcome, naming the card the answer belongs to if any."""
        if other_card is None:
            return cls(AnswerKind.WRONG_UNKNOWN, definition)
        return cls(AnswerKind.WRONG_KNOWN_OTHER, definition, other_card)

    @property
    def is_correct(self) -> bool:
        return self.kind == AnswerKind.CORRECT
