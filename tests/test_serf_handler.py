import io
import sys

from hellokit.serf_handler import describe_event, main


def test_describe_event_trims_payload():
    assert describe_event("deploy", "  payload\n") == "name=[deploy] stdin=[payload]"


def test_describe_event_empty():
    assert describe_event("", "") == "name=[] stdin=[]"


def test_main_logs_event(monkeypatch, capsys):
    monkeypatch.setenv("SERF_USER_EVENT", "deploy")
    monkeypatch.setattr(sys, "stdin", io.StringIO("data\n"))
    assert main([]) == 0
    err = capsys.readouterr().err
    assert err.rstrip("\n").endswith(describe_event("deploy", "data"))


def test_main_without_event_name(monkeypatch, capsys):
    monkeypatch.delenv("SERF_USER_EVENT", raising=False)
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 0
    assert "name=[] stdin=[]" in capsys.readouterr().err