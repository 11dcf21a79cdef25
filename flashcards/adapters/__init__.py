# Adapters layer - Concrete implementations of ports

from .terminal_console import TerminalConsole
from .text_file_deck import (
    TextFileDeckRepository,
    TextFileTranscriptWriter,
    decode_deck,
    encode_deck,
)

__all__ = [
    "TerminalConsole",
    "TextFileDeckRepository",
    "TextFileTranscriptWriter",
    "decode_deck",
    "encode_deck",
]
