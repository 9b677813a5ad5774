import os

from hellokit.importscan import env_path_separator, find_go_files, main, search_paths


def test_env_path_separator():
    assert env_path_separator("Windows") == ";"
    assert env_path_separator("Linux") == ":"


def test_search_paths_appends_gopath():
    assert search_paths(["a"], "x:y", ":") == ["a", "x", "y"]


def test_search_paths_empty_gopath():
    assert search_paths([], "", ":") == [""]


def test_find_go_files(tmp_path):
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "b.go").write_text("package pkg\n")
    (tmp_path / "a.go").write_text("package main\n")
    (tmp_path / "readme.md").write_text("x")
    root = str(tmp_path)
    assert find_go_files(root) == [
        os.path.join(root, "a.go"),
        os.path.join(root, "pkg", "b.go"),
    ]


def test_main_help(capsys):
    assert main(["--help"]) == 0
    assert "GOPATH1 GOPATH2" in capsys.readouterr().out


def test_main_lists_paths_and_reports_missing(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("GOPATH", str(tmp_path))
    missing = str(tmp_path / "missing")
    assert main([missing]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "[" + missing + " " + str(tmp_path) + "]"
    assert "failed" in out