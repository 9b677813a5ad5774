"""Watches a directory and feeds new and growing files to the readers."""

import errno
import fnmatch
import logging
import os
import threading

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from hellokit.dir_reader import DirReader
from hellokit.file_readers import create_reader
from hellokit.files_handler import FilesHandler
from hellokit.fsutil import is_dir, is_exist
from hellokit.modules import DefaultPcapModule, DefaultTextModule
from hellokit.process_status import ProcessStatus

logger = logging.getLogger(__name__)


class _TextForwarder:
    def __init__(self, dispatcher):
        self._dispatcher = dispatcher

    def on_record(self, line):
        self._dispatcher.text_module.on_record(line)


class _PcapForwarder:
    def __init__(self, dispatcher):
        self._dispatcher = dispatcher

    def on_pcap_packet(self, packet):
        self._dispatcher.pcap_module.on_pcap_packet(packet)


class _EventHandler(FileSystemEventHandler):
    def __init__(self, dispatcher):
        super().__init__()
        self._dispatcher = dispatcher

    def on_any_event(self, event):
        self._dispatcher.handle_event(event.event_type, os.fsdecode(event.src_path))


class Dispatcher:
    """Connects file-system events, the processing status and the readers."""

    def __init__(self, settings):
        logger.info("NewDispatcher")
        self.settings = settings
        self.directory = os.fspath(settings.file_path)
        self.status = ProcessStatus(settings.status)
        self.text_module = DefaultTextModule()
        self.pcap_module = DefaultPcapModule()
        self._text_forwarder = _TextForwarder(self)
        self._pcap_forwarder = _PcapForwarder(self)
        self.handler = FilesHandler(
            self.directory, settings.priority_level, settings.file_pattern, self._make_reader
        )
        self._event_handler = _EventHandler(self)
        self._observer = None
        self._lock = threading.Lock()
        self._running = False
        self._closed = False

    def _make_reader(self, directory):
        reader = create_reader(self.settings.reader_type, self._pcap_forwarder)
        return DirReader(directory, reader, self.status, self._text_forwarder)

    def register_text_module(self, module) -> None:
        self.text_module = module

    def register_pcap_module(self, module) -> None:
        self.pcap_module = module

    def handle_event(self, kind, path) -> None:
        """React to a file-system event of kind created, deleted or modified."""
        path = os.fspath(path)
        logger.info("event: %s name=%s", kind, path)
        if kind == "created":
            if is_dir(path):
                observer = self._observer
                if observer is not None:
                    observer.schedule(self._event_handler, path, recursive=False)
            elif fnmatch.fnmatchcase(os.path.basename(path), self.settings.file_pattern):
                self.handler.on_file_created(path)
            else:
                logger.info(
                    "Create a file <%s> but does not match the file pattern <%s>",
                    path,
                    self.settings.file_pattern,
                )
        elif kind == "deleted":
            self.status.on_file_deleted(path)
        elif kind == "modified":
            self.handler.on_file_modified(path)
        else:
            logger.info("don't care")

    def run(self) -> None:
        """Watch the directory and read files until close() is called."""
        with self._lock:
            self._running = True
        try:
            logger.info("Watching <%s>", self.directory)
            if not is_exist(self.directory):
                raise FileNotFoundError(
                    errno.ENOENT, f"Watch event of {self.directory} FAILED", self.directory
                )
            observer = Observer()
            observer.schedule(self._event_handler, self.directory, recursive=False)
            observer.start()
            self._observer = observer
            self.handler.run(self.status)
        finally:
            with self._lock:
                self._running = False
            self.close()

    def close(self) -> None:
        """Stop reading and watching; the status file is saved once nothing runs."""
        self.handler.stop()
        observer = self._observer
        if observer is not None and observer.is_alive():
            observer.stop()
            observer.join()
        with self._lock:
            if self._running or self._closed:
                return
            self._closed = True
        self.status.close()