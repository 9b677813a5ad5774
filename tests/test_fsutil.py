import os

import pytest

from hellokit.fsutil import get_abs_path, is_dir, is_exist, lookup_files


def test_get_abs_path_keeps_absolute(tmp_path):
    directory = str(tmp_path)
    assert os.path.isabs(directory)
    assert get_abs_path(directory) == directory


def test_get_abs_path_resolves_relative():
    result = get_abs_path("data.txt")
    assert os.path.isabs(result)
    assert os.path.basename(result) == "data.txt"


def test_lookup_files_finds_go_file(tmp_path, monkeypatch):
    (tmp_path / "xmain.go").write_text("package freader\n")
    (tmp_path / "notes.txt").write_text("x")
    monkeypatch.chdir(tmp_path)
    files = lookup_files(".", "*.go")
    assert "xmain.go" in files
    assert "notes.txt" not in files


def test_lookup_files_recurses_in_order(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "inc_2.gz").write_bytes(b"")
    (tmp_path / "a.gz").write_bytes(b"")
    (tmp_path / "inc_1.gz").write_bytes(b"")
    (tmp_path / "c").mkdir()
    files = lookup_files(str(tmp_path), "inc_*.gz")
    assert files == [
        os.path.join(str(tmp_path), "b", "inc_2.gz"),
        os.path.join(str(tmp_path), "inc_1.gz"),
    ]


def test_lookup_files_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        lookup_files(str(tmp_path / "missing"), "*")


def test_is_dir_and_is_exist(tmp_path):
    file_path = tmp_path / "f.txt"
    file_path.write_text("hi")
    assert is_dir(str(tmp_path)) is True
    assert is_dir(str(file_path)) is False
    assert is_dir(str(tmp_path / "nope")) is False
    assert is_exist(str(file_path)) is True
    assert is_exist(str(tmp_path / "nope")) is False