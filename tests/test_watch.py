import threading

import pytest
from watchdog.events import DirCreatedEvent, FileCreatedEvent, FileModifiedEvent

from hellokit.watch import EventLogger, main, watch


class FakeObserver:
    def __init__(self):
        self.scheduled = []

    def schedule(self, handler, path, recursive=False):
        self.scheduled.append((handler, path, recursive))


def test_created_directory_is_watched(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    observer = FakeObserver()
    messages = []
    handler = EventLogger(observer, messages.append)
    handler.dispatch(DirCreatedEvent(str(sub)))
    assert observer.scheduled == [(handler, str(sub), False)]
    assert len(messages) == 1
    assert str(sub) in messages[0]


def test_created_file_is_only_logged(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("x")
    observer = FakeObserver()
    messages = []
    EventLogger(observer, messages.append).dispatch(FileCreatedEvent(str(path)))
    assert observer.scheduled == []
    assert messages == [f"event: created name= {path}"]


def test_modified_event_is_logged(tmp_path):
    observer = FakeObserver()
    messages = []
    EventLogger(observer, messages.append).dispatch(FileModifiedEvent(str(tmp_path / "b")))
    assert observer.scheduled == []
    assert messages[0].startswith("event: modified")


def test_watch_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        watch(tmp_path / "missing", threading.Event())


def test_main_missing_path_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert "error:" in capsys.readouterr().err