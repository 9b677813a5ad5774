"""Builds a string of a requested length from digits or filler letters."""

import argparse
import sys

_DIGITS = "0123456789"


def xmalloc(length: int) -> str:
    """Return the first length digits of "0123456789", or length letters "a" when longer."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if length <= len(_DIGITS):
        return _DIGITS[:length]
    return "a" * length


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print a generated string and its length.")
    parser.add_argument("length", nargs="?", type=int, default=10)
    args = parser.parse_args(argv)
    try:
        text = xmalloc(args.length)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"retlen={len(text)}")
    print(text, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())