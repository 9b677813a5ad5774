import logging

from hellokit.modules import (
    DefaultPcapModule,
    DefaultTextModule,
    PcapPacket,
    describe_packet,
)


def _packet():
    return PcapPacket(seconds=1_000_000, nanoseconds=0, caplen=60, length=74, data=b"\x00" * 60)


def test_describe_packet_reports_lengths():
    text = describe_packet(_packet())
    assert text.startswith("time: ")
    assert text.endswith("caplen: 60 len: 74")


def test_default_text_module_logs_line(caplog):
    caplog.set_level(logging.INFO, logger="hellokit.modules")
    DefaultTextModule().on_record(b"hello")
    assert "len=5 <hello>" in caplog.text


def test_default_pcap_module_logs_summary(caplog):
    caplog.set_level(logging.INFO, logger="hellokit.modules")
    packet = _packet()
    DefaultPcapModule().on_pcap_packet(packet)
    assert describe_packet(packet) in caplog.text