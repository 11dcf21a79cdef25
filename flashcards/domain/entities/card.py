"""Definition record stored against each card in a deck."""

from dataclasses import dataclass


@dataclass
class DefinitionRecord:
    """Definition of a card plus its quiz statistics.

    Attributes:
        value: Definition text (unique across the deck)
        num_errors_answering: Times the card was answered wrongly
    """

    value: str
    num_errors_answering: int = 0

    def record_error(self) -> None:
        """Count one more wrong answer."""
        self.num_errors_answering += 1

    def reset(self) -> None:
        """Clear the error counter."""
        self.num_errors_answering = 0
