"""Domain value objects - objects without identity (all immutable except the Transcript buffer)."""

from .answer_outcome import AnswerKind, AnswerOutcome
from .card_record import CardRecord
from .hardest_cards import HardestCards
from .transcript import Transcript

__all__ = [
    "AnswerKind",
    "AnswerOutcome",
    "CardRecord",
    "HardestCards",
    "Transcript",
]
