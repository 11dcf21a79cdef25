import logging

import pytest

from flashcards import config
from flashcards.adapters.terminal_console import TerminalConsole
from flashcards.composition import create_app, create_quiz_service
from flashcards.domain.entities.deck import Deck
from tests.conftest import ScriptedInput


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "FLASHCARDS_LOG_LEVEL",
        "FLASHCARDS_FILE_ENCODING",
        "FLASHCARDS_IMPORT_PATH",
        "FLASHCARDS_EXPORT_PATH",
        "FLASHCARDS_RANDOM_SEED",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert config.get_log_level() == logging.WARNING
    assert config.get_file_encoding() == "utf-8"
    assert config.get_default_import_path() is None
    assert config.get_default_export_path() is None
    assert config.get_random_seed() is None


@pytest.mark.parametrize(
    "value, expected",
    [("debug", logging.DEBUG), ("ERROR", logging.ERROR), ("chatty", logging.WARNING)],
)
def test_log_level(monkeypatch, value, expected):
    monkeypatch.setenv("FLASHCARDS_LOG_LEVEL", value)

    assert config.get_log_level() == expected


def test_paths_and_encoding(monkeypatch):
    monkeypatch.setenv("FLASHCARDS_IMPORT_PATH", "in.txt")
    monkeypatch.setenv("FLASHCARDS_EXPORT_PATH", "")
    monkeypatch.setenv("FLASHCARDS_FILE_ENCODING", "latin-1")

    assert config.get_default_import_path() == "in.txt"
    assert config.get_default_export_path() is None
    assert config.get_file_encoding() == "latin-1"


@pytest.mark.parametrize("value, expected", [("42", 42), (" 7 ", 7), ("seven", None)])
def test_random_seed(monkeypatch, value, expected):
    monkeypatch.setenv("FLASHCARDS_RANDOM_SEED", value)

    assert config.get_random_seed() == expected


def test_seeded_quiz_is_reproducible(monkeypatch):
    monkeypatch.setenv("FLASHCARDS_RANDOM_SEED", "11")
    deck = Deck()
    for card, definition in [("a", "X"), ("b", "Y"), ("c", "Z"), ("d", "W")]:
        deck.add(card, definition)

    first = create_quiz_service(deck)
    second = create_quiz_service(deck)

    assert [first.next_card() for _ in range(8)] == [second.next_card() for _ in range(8)]


def test_create_app_wires_paths(tmp_path):
    target = tmp_path / "out.txt"
    outputs = []
    console = TerminalConsole(input_fn=ScriptedInput(["exit"]), output_fn=outputs.append)

    app = create_app(export_path=target, console=console)

    assert app.run() == 0
    assert target.read_text() == "0\n"
    assert outputs[-1] == "0 cards have been saved."


def test_unknown_encoding_falls_back_to_utf8(monkeypatch, caplog):
    monkeypatch.setenv("FLASHCARDS_FILE_ENCODING", "utf8x")

    with caplog.at_level(logging.WARNING, logger="flashcards.config"):
        assert config.get_file_encoding() == "utf-8"

    assert "utf8x" in caplog.text


def test_encoding_aliases_are_accepted(monkeypatch):
    monkeypatch.setenv("FLASHCARDS_FILE_ENCODING", "utf-8-sig")

    assert config.get_file_encoding() == "utf-8-sig"


def test_unknown_encoding_does_not_empty_export_file(monkeypatch, tmp_path):
    monkeypatch.setenv("FLASHCARDS_FILE_ENCODING", "utf8x")
    target = tmp_path / "deck.txt"
    target.write_text("1\nold\nkept\n0\n")
    outputs = []
    console = TerminalConsole(input_fn=ScriptedInput(["exit"]), output_fn=outputs.append)

    assert create_app(import_path=target, export_path=target, console=console).run() == 0
    assert outputs[0] == "1 cards have been loaded."
    assert outputs[-1] == "1 cards have been saved."
    assert target.read_text() == "1\nold\nkept\n0\n"
