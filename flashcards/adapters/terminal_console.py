"""Terminal console adapter (stdin/stdout)."""

from collections.abc import Callable

from flashcards.domain.value_objects.transcript import Transcript


class TerminalConsole:
    """ConsolePort implementation reading and writing the terminal.

    Every line shown or read is appended to the transcript, so the ``log``
    command can save the whole session.
    """

    def __init__(
        self,
        transcript: Transcript | None = None,
        input_fn: Callable[[], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize console.

        Args:
            transcript: Transcript to append to (a new one if omitted)
            input_fn: Reads one line, raising EOFError at end of input
                (builtin input if omitted)
            output_fn: Writes one line (builtin print if omitted)
        """
        self.transcript = transcript if transcript is not None else Transcript()
        self._input_fn = input_fn or input
        self._output_fn = output_fn or print

    def read_line(self) -> str | None:
        try:
            line = self._input_fn()
        except EOFError:
            return None
        self.transcript.record(line)
        return line

    def write_line(self, message: str = "") -> None:
        self._output_fn(message)
        self.transcript.record(message)
