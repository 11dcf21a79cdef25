"""Terminal flashcards: build a deck, quiz yourself, keep score."""

__version__ = "0.1.0"
