"""Event handler that logs the name and payload of a user event."""

import argparse
import os
import sys
from datetime import datetime


def describe_event(name: str, payload: str) -> str:
    """Return the log line for an event with the given name and payload."""
    return f"name=[{name}] stdin=[{payload.strip()}]"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Log a user event read from the environment and stdin.")
    parser.parse_args(argv)
    name = os.environ.get("SERF_USER_EVENT", "")
    payload = sys.stdin.read()
    print(f"{datetime.now():%Y/%m/%d %H:%M:%S} {describe_event(name, payload)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())