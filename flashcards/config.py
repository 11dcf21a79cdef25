"""Application configuration loaded from environment variables.

Provides type-safe access to configuration with sensible defaults.
A ``.env`` file in the working directory is loaded by the CLI before
these are read.
"""

import codecs
import logging
import os

logger = logging.getLogger(__name__)


def get_log_level() -> int:
    """Get logging level.

    Environment variable: FLASHCARDS_LOG_LEVEL
    Default: WARNING (keeps the interactive console clean)
    """
    name = os.getenv("FLASHCARDS_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_file_encoding() -> str:
    """Get text encoding for deck and log files.

    Environment variable: FLASHCARDS_FILE_ENCODING
    Default: utf-8 (also used when the name is not a known codec)
    """
    name = os.getenv("FLASHCARDS_FILE_ENCODING", "utf-8")
    try:
        codecs.lookup(name)
    except LookupError:
        logger.warning("Unknown FLASHCARDS_FILE_ENCODING %r, using utf-8", name)
        return "utf-8"
    return name


def get_default_import_path() -> str | None:
    """Get deck file loaded at startup when ``-import`` is not given.

    Environment variable: FLASHCARDS_IMPORT_PATH
    """
    return os.getenv("FLASHCARDS_IMPORT_PATH") or None


def get_default_export_path() -> str | None:
    """Get deck file saved on exit when ``-export`` is not given.

    Environment variable: FLASHCARDS_EXPORT_PATH
    """
    return os.getenv("FLASHCARDS_EXPORT_PATH") or None


def get_random_seed() -> int | None:
    """Get seed for quiz card selection.

    Environment variable: FLASHCARDS_RANDOM_SEED
    Default: unseeded
    """
    value = os.getenv("FLASHCARDS_RANDOM_SEED", "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None
