"""Serialized card record value object."""

from typing import NamedTuple


class CardRecord(NamedTuple):
    """One deck entry as it is imported from or exported to a file."""

    card: str
    definition: str
    error_count: int = 0
