"""Greets, then echoes a number and a word read from standard input."""

import argparse
import re
import sys
from datetime import datetime

_INPUT = re.compile(r"\s*([+-]?[0-9]+)(?:[ \t]+(\S+))?")


def parse_input(line: str) -> tuple[int, str]:
    """Parse a line holding an integer and, optionally, a word."""
    match = _INPUT.match(line)
    if match is None:
        raise ValueError(f"expected an integer and a word, got {line!r}")
    return int(match.group(1)), match.group(2) or ""


def render(n: int, s: str) -> str:
    """Return the echo of n and s, s's byte length, its first two bytes and the rest."""
    data = s.encode("utf-8")
    if len(data) < 2:
        raise ValueError(f"word must be at least 2 bytes long, got {s!r}")
    head = data[:2].decode("utf-8", errors="replace")
    tail = data[2:].decode("utf-8", errors="replace")
    return f"{n} {s}\n{len(data)}\n{head}\n{tail}\n"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Echo a number and a word read from stdin.")
    parser.parse_args(argv)
    print("hello world")
    print("xx")
    print(f"{datetime.now():%Y/%m/%d %H:%M:%S} xxx", file=sys.stderr)
    line = sys.stdin.readline()
    try:
        n, s = parse_input(line)
        output = render(n, s)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())