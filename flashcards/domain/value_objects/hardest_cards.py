"""Hardest cards value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HardestCards:
    """Cards sharing the highest error count in a deck.

    Attributes:
        error_count: Highest error count in the deck (always > 0)
        cards: Every card with that count, in deck order
    """

    error_count: int
    cards: tuple[str, ...]

    @property
    def is_single(self) -> bool:
        """Whether exactly one card holds the maximum."""
        return len(self.cards) == 1
