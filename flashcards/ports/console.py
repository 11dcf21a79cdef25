"""Port interface for the interactive console."""

from typing import Protocol, runtime_checkable

from flashcards.domain.value_objects.transcript import Transcript


@runtime_checkable
class ConsolePort(Protocol):
    """Line-based user interaction.

    Implementations record every line they read or write in ``transcript``.
    """

    transcript: Transcript

    def read_line(self) -> str | None:
        """Read one line of user input.

        Returns:
            The line without its terminator, or None at end of input
        """
        ...

    def write_line(self, message: str = "") -> None:
        """Show one line of output."""
        ...
