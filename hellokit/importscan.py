"""Walks source directories looking for .go files."""

import os
import platform
import stat
import sys
from collections.abc import Iterator

_HELP_FLAGS = ("-h", "--help", "-help")


def env_path_separator(system: str) -> str:
    """Return the separator used in path lists on the named operating system."""
    return ";" if system.lower() == "windows" else ":"


def search_paths(args, gopath: str, separator: str) -> list[str]:
    """Return the given directories followed by the entries of gopath."""
    return list(args) + gopath.split(separator)


def _walk(directory: str) -> Iterator[str]:
    try:
        names = sorted(os.listdir(directory))
    except OSError:
        return
    for name in names:
        path = os.path.normpath(os.path.join(directory, name))
        if stat.S_ISDIR(os.lstat(path).st_mode):
            yield from _walk(path)
        else:
            yield path


def find_go_files(directory: str) -> list[str]:
    """Return every .go file under directory, in lexical walk order."""
    if stat.S_ISDIR(os.lstat(directory).st_mode):
        candidates = list(_walk(directory))
    else:
        candidates = [directory]
    return [path for path in candidates if len(path) > 3 and path.endswith(".go")]


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0] in _HELP_FLAGS:
        program = sys.argv[0] if sys.argv else "importscan"
        print(f"Usage : {program} GOPATH1 GOPATH2 ...")
        return 0
    paths = search_paths(
        args, os.environ.get("GOPATH", ""), env_path_separator(platform.system())
    )
    print("[" + " ".join(paths) + "]")
    for directory in paths:
        try:
            find_go_files(directory)
        except OSError as exc:
            print(f"walking {directory!r} failed: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())