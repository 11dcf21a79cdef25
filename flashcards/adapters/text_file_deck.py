"""Text file adapter for deck persistence.

File format, one value per line::

    <N>
    <card_1>
    <definition_1>
    <errorCount_1>
    ...

Line 1 holds the card count N, followed by three lines per card. Lines after
the last record are ignored.
"""

import contextlib
import logging
import os
import re
import tempfile
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from flashcards.domain.value_objects.card_record import CardRecord
from flashcards.domain.value_objects.transcript import Transcript
from flashcards.ports.deck_repository import DeckFileNotFoundError, DeckParseError

logger = logging.getLogger(__name__)

LINES_PER_RECORD = 3

_INTEGER = re.compile(r"[0-9]+")


def _parse_count(text: str, line_number: int, what: str) -> int:
    value = text.strip()
    if not _INTEGER.fullmatch(value):
        raise DeckParseError(f"{what} must be a non-negative integer, got {text!r}", line_number)
    return int(value)


def decode_deck(text: str) -> list[CardRecord]:
    """Parse deck file contents.

    Accepts ``\\n`` and ``\\r\\n`` line endings. A leading byte order mark is skipped.

    Args:
        text: Whole file contents

    Returns:
        Records in file order

    Raises:
        DeckParseError: If the count or an error count is not a non-negative
            integer, or the file has fewer lines than the count requires
    """
    text = text.removeprefix("\ufeff")
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if not lines or not lines[0].strip():
        raise DeckParseError("missing card count", 1)

    size = _parse_count(lines[0], 1, "Card count")
    required = 1 + size * LINES_PER_RECORD
    if len(lines) < required:
        raise DeckParseError(
            f"expected {size} cards ({required} lines), file ends early",
            len(lines),
        )

    records = []
    for index in range(size):
        start = 1 + index * LINES_PER_RECORD
        card, definition, errors = lines[start : start + LINES_PER_RECORD]
        error_count = _parse_count(errors, start + 3, "Error count")
        records.append(CardRecord(card, definition, error_count))
    return records


def write_file_atomic(path: Path, data: bytes) -> None:
    """Replace a file with data, leaving the old file intact if writing fails.

    The data goes to a temporary file in the same directory, which is then
    renamed over the target.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        if path.exists():
            os.chmod(tmp_name, path.stat().st_mode & 0o777)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise


def encode_deck(records: Iterable[CardRecord]) -> str:
    """Serialize records to deck file contents (``\\n`` line endings)."""
    records = list(records)
    lines = [str(len(records))]
    for record in records:
        lines.extend((record.card, record.definition, str(record.error_count)))
    return "".join(f"{line}\n" for line in lines)


class TextFileDeckRepository:
    """DeckRepository implementation backed by plain text files."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def load(self, path: str | PathLike[str]) -> list[CardRecord]:
        """Read and parse a deck file.

        Raises:
            DeckFileNotFoundError: If the file does not exist
            DeckParseError: If the file is malformed
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise DeckFileNotFoundError(file_path)
        with open(file_path, encoding=self._encoding) as f:
            records = decode_deck(f.read())
        logger.info("Loaded %d cards from %s", len(records), file_path)
        return records

    def save(self, path: str | PathLike[str], records: list[CardRecord]) -> None:
        """Write a deck file, replacing any existing contents.

        The deck is encoded before the file is touched, so an existing file
        survives encoding and write failures.

        Raises:
            UnicodeEncodeError: If the text cannot be represented in the encoding
            OSError: If the file cannot be written
        """
        file_path = Path(path)
        write_file_atomic(file_path, encode_deck(records).encode(self._encoding))
        logger.info("Saved %d cards to %s", len(records), file_path)


class TextFileTranscriptWriter:
    """TranscriptWriter implementation writing plain text files."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def save(self, path: str | PathLike[str], transcript: Transcript) -> None:
        file_path = Path(path)
        write_file_atomic(file_path, transcript.render().encode(self._encoding))
        logger.info("Saved %d transcript lines to %s", len(transcript), file_path)
