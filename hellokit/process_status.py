"""Persistent record of which files have been processed and when."""

import os
import re
import time
from dataclasses import dataclass
from datetime import datetime

_TIME_RE = re.compile(
    r"([0-9]{4})/([0-9]{2})/([0-9]{2})-([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?"
)


def format_time(t: datetime) -> str:
    """Format t as YYYY/MM/DD-HH:MM:SS with up to four fraction digits, trailing zeros dropped."""
    text = (
        f"{t.year:04d}/{t.month:02d}/{t.day:02d}-"
        f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}"
    )
    fraction = f"{t.microsecond:06d}"[:4].rstrip("0")
    if fraction:
        text += "." + fraction
    return text


def parse_time(text: str) -> datetime:
    """Parse a timestamp written by format_time."""
    match = _TIME_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse time {text!r}")
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction = match.group(7) or ""
    microsecond = int((fraction + "000000")[:6])
    try:
        return datetime(year, month, day, hour, minute, second, microsecond)
    except ValueError as exc:
        raise ValueError(f"cannot parse time {text!r}: {exc}") from exc


@dataclass
class FileProcessingTime:
    """When processing of a file started and ended."""

    start: datetime
    end: datetime


def _status_line(path: str, times: FileProcessingTime) -> str:
    return f"{format_time(times.start)} {format_time(times.end)} {path}\n"


class ProcessStatus:
    """Processed files kept in memory and in a status file, one line per file:
    start time, end time and path separated by spaces."""

    def __init__(self, status_file):
        self.status_file = os.fspath(status_file)
        self.processed_files: dict[str, FileProcessingTime] = {}
        if os.path.exists(self.status_file):
            self._fp = open(self.status_file, "r+", encoding="utf-8", newline="")
            try:
                self._parse()
            except BaseException:
                self._fp.close()
                raise
            self._fp.seek(0, os.SEEK_END)
        else:
            self._fp = open(self.status_file, "w+", encoding="utf-8", newline="")

    def is_processed(self, file: str) -> bool:
        return file in self.processed_files

    def on_file_processing_finished(self, path: str, start: datetime) -> None:
        """Record path as processed from start until now and append it to the status file."""
        times = FileProcessingTime(start=start, end=datetime.now())
        self.processed_files[path] = times
        self._fp.write(_status_line(path, times))
        self._sync()

    def on_file_deleted(self, path: str) -> None:
        self.processed_files.pop(path, None)

    def close(self) -> None:
        """Back up the status file, rewrite it sorted by path, and close it."""
        try:
            self._save_all()
        finally:
            self._fp.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _sync(self) -> None:
        self._fp.flush()
        os.fsync(self._fp.fileno())

    def _parse(self) -> None:
        while True:
            line = self._fp.readline()
            if not line.endswith("\n"):
                break
            line = line.strip()
            fields = line.split() + ["", "", ""]
            start, end, path = fields[:3]
            try:
                times = FileProcessingTime(start=parse_time(start), end=parse_time(end))
            except ValueError as exc:
                raise ValueError(f"ERROR line <{line}> {exc}") from exc
            if not path:
                raise ValueError(f"ERROR line <{line}>, path empty")
            self.processed_files[path] = times

    def _save_all(self) -> None:
        backup_path = f"{self.status_file}.bak.{time.time_ns()}"
        self._fp.seek(0)
        content = self._fp.read()
        with open(backup_path, "w", encoding="utf-8", newline="") as backup:
            backup.write(content)
            backup.flush()
            os.fsync(backup.fileno())
        self._fp.seek(0)
        self._fp.truncate()
        for path in sorted(self.processed_files):
            self._fp.write(_status_line(path, self.processed_files[path]))
        self._sync()