from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from flashcards.composition import create_app
from flashcards.config import (
    get_default_export_path,
    get_default_import_path,
    get_log_level,
)

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: int | None = None, fmt: str | None = None) -> None:
    """Initialize root logger on stderr so console output stays clean."""
    root = logging.getLogger()
    root.setLevel(level if level is not None else get_log_level())

    # Clear existing handlers to avoid duplicate logs on repeated calls
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flashcards", description="Terminal flashcards with self-quizzing"
    )
    parser.add_argument(
        "-import",
        "--import",
        dest="import_path",
        metavar="FILE",
        help="Load the deck from FILE at startup",
    )
    parser.add_argument(
        "-export",
        "--export",
        dest="export_path",
        metavar="FILE",
        help="Save the deck to FILE on exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv(Path.cwd() / ".env")
    args = build_parser().parse_args(argv)
    setup_logging()

    app = create_app(
        import_path=args.import_path or get_default_import_path(),
        export_path=args.export_path or get_default_export_path(),
    )
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
