"""Reads the files of one directory in arrival order, following the newest one as it grows."""

import logging
import os
import queue
import threading
from collections import deque
from datetime import datetime
from enum import IntEnum

from hellokit.file_readers import PTailFileReader

logger = logging.getLogger(__name__)


class WakeupEvent(IntEnum):
    """Why a waiting reader was woken up."""

    STOP = 0
    MODIFY = 1
    CREATE = 2


class DirReader:
    """Queue of files in one directory, read one after another by start_to_read.

    Text readers hand every complete line to the text module; when the last
    queued file is exhausted the reader waits for it to grow or for a new file.
    """

    def __init__(self, directory, reader, status, text_module):
        self.directory = os.fspath(directory)
        self.reader = reader
        self.status = status
        self.text_module = text_module
        self.current_reading_file = ""
        self._files: deque[str] = deque()
        self._lock = threading.Lock()
        self._wakeup: queue.Queue[WakeupEvent] = queue.Queue()
        self._waiting = False
        self._stopped = False

    @property
    def pending_files(self) -> list[str]:
        """Files queued but not yet opened."""
        with self._lock:
            return list(self._files)

    def _signal_if_waiting(self, event: WakeupEvent) -> bool:
        # Caller holds the lock.
        if not self._waiting:
            return False
        self._waiting = False
        self._wakeup.put(event)
        return True

    def on_file_modified(self, file) -> None:
        """Wake the reader if it is waiting for the file it is reading to grow."""
        file = os.fspath(file)
        with self._lock:
            if self.current_reading_file == file and self._signal_if_waiting(WakeupEvent.MODIFY):
                logger.info("send kModify signal")
                return
        logger.info("do not need to send kModify signal")

    def on_file_created(self, file) -> None:
        """Queue a new file and wake the reader if it was waiting for one."""
        file = os.fspath(file)
        with self._lock:
            self._files.append(file)
            if len(self._files) == 1 and self._signal_if_waiting(WakeupEvent.CREATE):
                logger.info("send kCreate signal")
                return
        logger.info("do not need to send kCreate signal")

    def wait(self, timeout=None) -> WakeupEvent | None:
        """Block until woken; return the event, or None when timeout runs out."""
        with self._lock:
            self._waiting = True
        try:
            return self._wakeup.get(timeout=timeout)
        except queue.Empty:
            return None
        finally:
            with self._lock:
                self._waiting = False

    def stop(self) -> None:
        """Make start_to_read return as soon as possible."""
        with self._lock:
            self._stopped = True
            self._wakeup.put(WakeupEvent.STOP)

    def _await_files(self) -> bool:
        while True:
            with self._lock:
                if self._stopped:
                    return False
                if self._files:
                    return True
            logger.info("No files. Waiting ...")
            if self.wait() is WakeupEvent.STOP:
                return False

    def _next_file(self) -> str:
        with self._lock:
            return self._files.popleft()

    def start_to_read(self) -> None:
        """Read queued files until stop() is called."""
        logger.info("Starting to read files ...")
        is_text = isinstance(self.reader, PTailFileReader)
        start = datetime.now()
        try:
            while self._await_files():
                file = self._next_file()
                try:
                    self.reader.load_file(file, 0)
                except (OSError, ValueError, EOFError) as exc:
                    logger.error("Loading <%s> failed : %s", file, exc)
                    continue
                if self.current_reading_file:
                    logger.info("Finished to process file %s", self.current_reading_file)
                    self.status.on_file_processing_finished(self.current_reading_file, start)
                start = datetime.now()
                self.current_reading_file = file
                logger.info("Begin to process file %s", file)
                if is_text and not self._read_text_file(file):
                    break
        finally:
            self.reader.close()

    def _read_text_file(self, file: str) -> bool:
        """Read lines of file; return False when the reader was stopped."""
        last = b""
        while True:
            try:
                line, complete = self.reader.read_line()
            except (OSError, EOFError) as exc:
                logger.error("Read data from <%s> failed : %s", file, exc)
                return True
            if last:
                line = last + line
            if not complete:
                if line:
                    last = line
                with self._lock:
                    if self._stopped:
                        return False
                    if self._files:
                        return True
                logger.info("no more files, we wait this file <%s> to be updated. Waiting ...", file)
                if self.wait() is WakeupEvent.STOP:
                    return False
                continue
            last = b""
            self.text_module.on_record(line)