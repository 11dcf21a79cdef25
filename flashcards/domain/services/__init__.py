"""Domain services - orchestration and business logic."""

from .command_parser import (
    SUPPORTED_COMMANDS,
    CommandParser,
    CommandType,
    ParsedCommand,
)
from .quiz_service import QuizService

__all__ = [
    "SUPPORTED_COMMANDS",
    "CommandParser",
    "CommandType",
    "ParsedCommand",
    "QuizService",
]
