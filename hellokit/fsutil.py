"""Small file-system helpers."""

import fnmatch
import os
import shutil
import stat
import sys
from collections.abc import Iterator


def is_exist(path: str) -> bool:
    """Return True when a file or directory exists at path."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def get_abs_path(p: str) -> str:
    """Return p unchanged if absolute, otherwise resolved against the executable's directory."""
    if os.path.isabs(p):
        return p
    executable = shutil.which(sys.argv[0]) if sys.argv and sys.argv[0] else None
    exe_path = os.path.abspath(executable) if executable else os.getcwd()
    full_path = os.path.abspath(os.path.join(os.path.dirname(exe_path), p))
    return full_path.rstrip("/\\")


def is_dir(path: str) -> bool:
    """Return True if path is a directory; False for files and missing paths."""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


def _walk_dir(directory: str) -> Iterator[str]:
    try:
        names = sorted(os.listdir(directory))
    except OSError:
        return
    for name in names:
        path = os.path.normpath(os.path.join(directory, name))
        mode = os.lstat(path).st_mode
        if stat.S_ISDIR(mode):
            yield from _walk_dir(path)
        else:
            yield path


def _walk_files(root: str) -> Iterator[str]:
    if not stat.S_ISDIR(os.lstat(root).st_mode):
        yield root
        return
    yield from _walk_dir(root)


def lookup_files(directory: str, pattern: str) -> list[str]:
    """Return every file under directory whose base name matches pattern, in lexical walk order."""
    directory = os.fspath(directory)
    return [
        path
        for path in _walk_files(directory)
        if fnmatch.fnmatchcase(os.path.basename(path), pattern)
    ]