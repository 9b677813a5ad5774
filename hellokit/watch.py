"""Logs file-system events under a directory, following new subdirectories."""

import argparse
import errno
import logging
import os
import sys
import threading

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from hellokit.fsutil import is_dir, is_exist

logger = logging.getLogger(__name__)


class EventLogger(FileSystemEventHandler):
    """Logs every event and starts watching directories as they are created."""

    def __init__(self, observer, log=None):
        super().__init__()
        self.observer = observer
        self.log = log if log is not None else logger.info

    def on_any_event(self, event):
        path = os.fsdecode(event.src_path)
        self.log(f"event: {event.event_type} name= {path}")
        if event.event_type == "created" and is_dir(path):
            self.observer.schedule(self, path, recursive=False)


def watch(path, stop_event) -> None:
    """Log events under path until stop_event is set."""
    path = os.fspath(path)
    if not is_exist(path):
        raise FileNotFoundError(errno.ENOENT, "cannot watch a missing path", path)
    observer = Observer()
    observer.schedule(EventLogger(observer), path, recursive=False)
    observer.start()
    try:
        stop_event.wait()
    finally:
        observer.stop()
        observer.join()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Log file-system events under a directory.")
    parser.add_argument("path", nargs="?", default="e:/1")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S"
    )
    try:
        watch(args.path, threading.Event())
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())