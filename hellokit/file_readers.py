"""Readers for plain text, gzip and pcap files."""

import gzip
import logging
import struct
from collections.abc import Iterator
from enum import Enum
from typing import BinaryIO

from hellokit.modules import DefaultPcapModule, PcapModule, PcapPacket

logger = logging.getLogger(__name__)


class ReaderType(str, Enum):
    PTAIL = "PTailReader"
    GZIP = "GzipReader"
    PCAP = "PcapReader"


class PTailFileReader:
    """Reads lines from a file that may keep growing."""

    def __init__(self):
        self.path: str | None = None
        self._fp: BinaryIO | None = None
        self._stream = None

    def _wrap(self, fp):
        return fp

    def load_file(self, path, pos=0) -> None:
        """Open path (closing any previous file) and position it at byte pos."""
        self.close()
        self.path = str(path)
        fp = open(path, "rb")
        try:
            if pos > 0:
                fp.seek(pos)
            stream = self._wrap(fp)
        except BaseException:
            fp.close()
            raise
        self._fp, self._stream = fp, stream
        logger.info("OpenFile %s OK", self.path)

    def read_line(self) -> tuple[bytes, bool]:
        """Return the next line without trailing CR/LF and whether it was complete.

        A line is incomplete when the end of the file came before a newline;
        its bytes are consumed and returned all the same.
        """
        if self._stream is None:
            raise RuntimeError("no file loaded")
        raw = self._stream.readline()
        return raw.rstrip(b"\r\n"), raw.endswith(b"\n")

    def close(self) -> None:
        if self._stream is not None and self._stream is not self._fp:
            self._stream.close()
        if self._fp is not None:
            self._fp.close()
        self._fp = None
        self._stream = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class GzipFileReader(PTailFileReader):
    """Reads lines from a gzip-compressed file."""

    def _wrap(self, fp):
        stream = gzip.GzipFile(fileobj=fp, mode="rb")
        stream.peek(1)
        return stream

    def load_file(self, path, pos=0) -> None:
        if self._fp is not None:
            logger.info("Finished to process file %s", self.path)
        super().load_file(path, pos)

    def read_line(self) -> tuple[bytes, bool]:
        return super().read_line()

    def close(self) -> None:
        super().close()


_PCAP_MAGIC = {0xA1B2C3D4: 1000, 0xA1B23C4D: 1}


def _read_header(fp: BinaryIO, path) -> tuple[str, int]:
    header = fp.read(24)
    if len(header) < 24:
        raise ValueError(f"{path}: truncated pcap header")
    for order in "<>":
        (magic,) = struct.unpack(order + "I", header[:4])
        if magic in _PCAP_MAGIC:
            return order, _PCAP_MAGIC[magic]
    raise ValueError(f"{path}: not a pcap file")


def _records(fp: BinaryIO, order: str, scale: int) -> Iterator[PcapPacket]:
    record = struct.Struct(order + "IIII")
    with fp:
        while True:
            head = fp.read(record.size)
            if len(head) < record.size:
                return
            seconds, fraction, caplen, length = record.unpack(head)
            data = fp.read(caplen)
            if len(data) < caplen:
                return
            yield PcapPacket(
                seconds=seconds,
                nanoseconds=fraction * scale,
                caplen=caplen,
                length=length,
                data=data,
            )


def read_pcap(path) -> Iterator[PcapPacket]:
    """Open a pcap capture file and iterate over its packets."""
    fp = open(path, "rb")
    try:
        order, scale = _read_header(fp, path)
    except BaseException:
        fp.close()
        raise
    return _records(fp, order, scale)


class PcapFileReader:
    """Feeds every packet of a capture file to a pcap module."""

    def __init__(self, module: PcapModule):
        self.module = module
        self.path: str | None = None

    def load_file(self, path, pos=0) -> None:
        """Read the whole capture at path; pos is accepted for interface parity and ignored."""
        self.path = str(path)
        for packet in read_pcap(path):
            self.module.on_pcap_packet(packet)

    def close(self) -> None:
        self.path = None


def create_reader(reader_type, pcap_module=None):
    """Build the reader named by reader_type."""
    kind = ReaderType(reader_type)
    if kind is ReaderType.PTAIL:
        return PTailFileReader()
    if kind is ReaderType.GZIP:
        return GzipFileReader()
    return PcapFileReader(pcap_module if pcap_module is not None else DefaultPcapModule())