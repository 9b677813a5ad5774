"""Consumers of records read from text and pcap files."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PcapPacket:
    """One captured packet: timestamp, captured and original length, raw bytes."""

    seconds: int
    nanoseconds: int
    caplen: int
    length: int
    data: bytes


class TextModule(Protocol):
    def on_record(self, line: bytes) -> None: ...


class PcapModule(Protocol):
    def on_pcap_packet(self, packet: PcapPacket) -> None: ...


def describe_packet(packet: PcapPacket) -> str:
    """Return the one-line summary logged for a packet."""
    second = datetime.fromtimestamp(packet.seconds).second
    stamp = datetime.fromtimestamp(second, tz=timezone.utc).astimezone()
    return (
        f"time: {second}.{packet.nanoseconds:06d} "
        f"({stamp:%Y-%m-%d %H:%M:%S %z %Z}) "
        f"caplen: {packet.caplen} len: {packet.length}"
    )


class DefaultTextModule:
    """Logs every line it receives."""

    def on_record(self, line: bytes) -> None:
        logger.info(
            "DefaultTextModule : Read a new line, len=%d <%s> ",
            len(line),
            line.decode("utf-8", errors="replace"),
        )


class DefaultPcapModule:
    """Logs a summary of every packet it receives."""

    def on_pcap_packet(self, packet: PcapPacket) -> None:
        logger.info("%s", describe_packet(packet))