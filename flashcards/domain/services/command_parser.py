"""
Console Commands Parser.

Maps a line typed at the action prompt to the command it names.
Matching is case-insensitive and ignores surrounding whitespace.
"""

from dataclasses import dataclass
from enum import StrEnum


class CommandType(StrEnum):
    """Actions offered at the main prompt."""

    ADD = "add"
    REMOVE = "remove"
    IMPORT = "import"
    EXPORT = "export"
    ASK = "ask"
    EXIT = "exit"
    LOG = "log"
    HARDEST_CARD = "hardest card"
    RESET_STATS = "reset stats"

    # Special
    UNKNOWN = "unknown"


# Order shown to the user in the prompt
SUPPORTED_COMMANDS: tuple[CommandType, ...] = (
    CommandType.ADD,
    CommandType.REMOVE,
    CommandType.IMPORT,
    CommandType.EXPORT,
    CommandType.ASK,
    CommandType.EXIT,
    CommandType.LOG,
    CommandType.HARDEST_CARD,
    CommandType.RESET_STATS,
)


@dataclass(frozen=True)
class ParsedCommand:
    """Result of command parsing (immutable value object)."""

    command_type: CommandType
    raw_text: str

    @property
    def is_known(self) -> bool:
        return self.command_type != CommandType.UNKNOWN


class CommandParser:
    """Parses action lines into commands."""

    def __init__(self, commands: tuple[CommandType, ...] = SUPPORTED_COMMANDS) -> None:
        self._commands = {command.value: command for command in commands}

    @property
    def supported_actions(self) -> str:
        """Human-readable list of actions, e.g. ``(add, remove, ...)``."""
        return "(" + ", ".join(self._commands) + ")"

    def parse(self, text: str) -> ParsedCommand:
        """
        Parse an action line.

        Args:
            text: The line typed by the user

        Returns:
            ParsedCommand with the matching command, or UNKNOWN
        """
        normalized = " ".join(text.lower().split())
        command_type = self._commands.get(normalized, CommandType.UNKNOWN)
        return ParsedCommand(command_type=command_type, raw_text=text)
