import logging

from hellokit.cli import PrintingPcapModule, PrintingTextModule, format_payload, main
from hellokit.modules import PcapPacket


def test_format_payload_printable():
    assert format_payload(b"AB") == "\nAB\n\n"


def test_format_payload_replaces_unprintable_bytes():
    assert format_payload(b"\x00a\x7f") == "\n.a.\n\n"


def test_format_payload_breaks_every_32_bytes():
    lines = format_payload(b"A" * 64).split("\n")
    assert lines == ["", "A" * 32, "A" * 32, "", ""]


def test_format_payload_empty():
    assert format_payload(b"") == "\n\n"


def test_pcap_module_prints_captured_bytes_only(capsys):
    packet = PcapPacket(seconds=0, nanoseconds=0, caplen=2, length=3, data=b"hi\x01")
    PrintingPcapModule().on_pcap_packet(packet)
    assert capsys.readouterr().out == format_payload(b"hi")


def test_text_module_logs_line(caplog):
    with caplog.at_level(logging.INFO, logger="hellokit.cli"):
        PrintingTextModule().on_record(b"abc")
    assert "len=3 <abc>" in caplog.text


def test_main_fails_for_missing_directory(tmp_path, capsys):
    code = main([
        "-file_path", str(tmp_path / "missing"),
        "-status", str(tmp_path / "status.txt"),
    ])
    assert code == 1
    assert "error:" in capsys.readouterr().err