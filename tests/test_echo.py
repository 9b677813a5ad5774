import io

import pytest

from hellokit.echo import main, parse_input, render


def test_parse_input():
    assert parse_input("12 abc\n") == (12, "abc")


def test_parse_input_missing_word():
    assert parse_input("7") == (7, "")


def test_parse_input_rejects_non_number():
    with pytest.raises(ValueError):
        parse_input("abc def")


def test_render_splits_word():
    lines = render(3, "abcdef").splitlines()
    assert lines[0] == "3 abcdef"
    assert int(lines[1]) == len("abcdef")
    assert lines[2] + lines[3] == "abcdef"
    assert len(lines[2]) == 2


def test_render_rejects_short_word():
    with pytest.raises(ValueError):
        render(1, "a")


def test_main_echoes(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7 world\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("hello world\nxx\n")
    assert "7 world\n" in out


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7 w\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err