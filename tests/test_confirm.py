"""Tests for the confirmation gate."""

import io
import sys

import pytest
import typer

from issuelabel.nodes.confirm import confirm_labels, format_labels, read_answer


def _reader(*chars):
    queue = list(chars)
    return lambda: queue.pop(0)


class TestConfirmLabels:
    """Tests for confirm_labels function."""

    @pytest.mark.parametrize("answer", ["y", "Y"])
    def test_yes_accepts(self, answer):
        assert confirm_labels(["bug"], getchar=_reader(answer)) is True

    @pytest.mark.parametrize("answer", ["n", "N", "\r", "\n", " ", "q", ""])
    def test_anything_else_declines(self, answer):
        assert confirm_labels(["bug"], getchar=_reader(answer)) is False

    def test_end_of_input_declines(self):
        def closed():
            raise EOFError

        assert confirm_labels(["bug"], getchar=closed) is False

    def test_reads_exactly_one_character(self):
        calls = []

        def getchar():
            calls.append(1)
            return "y"

        confirm_labels(["bug", "ui"], getchar=getchar)

        assert len(calls) == 1

    def test_shows_labels(self, capsys):
        confirm_labels(["bug", "ui"], getchar=_reader("n"))

        out = capsys.readouterr().out
        assert "[bug, ui]" in out
        assert "[y/N]" in out


class TestFormatLabels:
    def test_format(self):
        assert format_labels(["bug", "enhancement"]) == "[bug, enhancement]"

    def test_empty(self):
        assert format_labels([]) == "[]"


class _Stdin(io.StringIO):
    def __init__(self, text, tty=False):
        super().__init__(text)
        self._tty = tty

    def isatty(self):
        return self._tty


class TestDefaultReader:
    """The gate without an injected reader, as used by the run command."""

    def _no_terminal(self):
        raise OSError("No such device or address: '/dev/tty'")

    @pytest.mark.parametrize("text, expected", [("y", True), ("Y\n", True), ("n", False)])
    def test_piped_stdin_is_read(self, monkeypatch, text, expected):
        monkeypatch.setattr(sys, "stdin", _Stdin(text))
        monkeypatch.setattr(typer, "getchar", self._no_terminal)

        assert confirm_labels(["bug"]) is expected

    def test_piped_end_of_input_declines(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", _Stdin(""))
        monkeypatch.setattr(typer, "getchar", self._no_terminal)

        assert confirm_labels(["bug"]) is False

    def test_one_character_per_answer(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", _Stdin("yn"))

        assert [read_answer(), read_answer(), read_answer()] == ["y", "n", ""]

    def test_terminal_uses_single_keypress(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", _Stdin("n", tty=True))
        monkeypatch.setattr(typer, "getchar", lambda: "y")

        assert confirm_labels(["bug"]) is True

    def test_terminal_end_of_input_declines(self, monkeypatch):
        def closed():
            raise EOFError

        monkeypatch.setattr(sys, "stdin", _Stdin("", tty=True))
        monkeypatch.setattr(typer, "getchar", closed)

        assert read_answer() == ""
