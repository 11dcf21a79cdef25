"""Console transcript value object."""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Transcript:
    """Ordered record of everything shown to and typed by the user.

    Owned by the caller of the command loop; the ``log`` command writes it
    out one entry per line.
    """

    entries: list[str] = field(default_factory=list)

    def record(self, line: str) -> None:
        self.entries.append(line)

    def render(self) -> str:
        """Render the transcript as text with a trailing newline per entry."""
        return "".join(f"{entry}\n" for entry in self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
