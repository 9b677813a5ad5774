"""Routes file events to one directory reader per priority level."""

import logging
import os

from hellokit.fsutil import lookup_files

logger = logging.getLogger(__name__)


class FilesHandler:
    """Owns the directory readers under a root directory.

    With priority_level <= 0 the root itself is read; otherwise its
    subdirectories "0" .. priority_level-1 are read, in that order.
    """

    def __init__(self, directory, priority_level, file_pattern, make_reader):
        self.directory = os.path.normpath(os.fspath(directory))
        self.priority_level = priority_level
        self.file_pattern = file_pattern
        if priority_level <= 0:
            self.paths = [self.directory]
        else:
            self.paths = [os.path.join(self.directory, str(i)) for i in range(priority_level)]
        self.readers = {path: make_reader(path) for path in self.paths}

    def run(self, status) -> None:
        """Queue the existing unprocessed files, then read each directory in priority order."""
        logger.info("Running ...")
        files = lookup_files(self.directory, self.file_pattern)
        logger.info("existing files: %s", files)
        for file in files:
            if status.is_processed(file):
                logger.info("Skip processed file: %s", file)
            else:
                self.on_file_created(file)
        for path in self.paths:
            self.readers[path].start_to_read()

    def _reader_for(self, file):
        reader = self.readers.get(os.path.dirname(os.path.normpath(os.fspath(file))))
        if reader is None:
            logger.error("Append file failed, cannot found reader for this file <%s>", file)
        return reader

    def on_file_modified(self, file) -> bool:
        """Pass a modification to the file's directory reader; False if there is none."""
        reader = self._reader_for(file)
        if reader is None:
            return False
        reader.on_file_modified(os.fspath(file))
        return True

    def on_file_created(self, file) -> bool:
        """Queue a new file with its directory reader; False if there is none."""
        reader = self._reader_for(file)
        if reader is None:
            return False
        reader.on_file_created(os.fspath(file))
        return True

    def stop(self) -> None:
        for reader in self.readers.values():
            reader.stop()