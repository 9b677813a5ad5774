"""Command that reads a watched directory and prints its records."""

import argparse
import logging
import sys

from hellokit.dispatcher import Dispatcher
from hellokit.modules import describe_packet
from hellokit.settings import Settings

logger = logging.getLogger(__name__)


def format_payload(data: bytes) -> str:
    """Render bytes 32 per line, printable ASCII as is and everything else as a dot."""
    parts = []
    for index, byte in enumerate(data):
        if index % 32 == 0:
            parts.append("\n")
        parts.append(chr(byte) if 32 <= byte <= 126 else ".")
    parts.append("\n\n")
    return "".join(parts)


class PrintingTextModule:
    """Logs every line it receives."""

    def on_record(self, line: bytes) -> None:
        logger.info(
            "DefaultTextModule : Read a new line, len=%d <%s> ",
            len(line),
            line.decode("utf-8", errors="replace"),
        )


class PrintingPcapModule:
    """Logs a packet summary and prints its captured bytes."""

    def on_pcap_packet(self, packet) -> None:
        logger.info("%s", describe_packet(packet))
        sys.stdout.write(format_payload(packet.data[: packet.caplen]))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Read the files of a watched directory.")
    Settings.add_arguments(parser)
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(filename)s:%(lineno)d: %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )
    settings = Settings.from_args(args)
    try:
        dispatcher = Dispatcher(settings)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    dispatcher.register_pcap_module(PrintingPcapModule())
    dispatcher.register_text_module(PrintingTextModule())
    try:
        dispatcher.run()
    except KeyboardInterrupt:
        dispatcher.close()
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())