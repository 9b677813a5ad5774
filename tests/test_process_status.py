from datetime import datetime

import pytest

from hellokit.process_status import ProcessStatus, format_time, parse_time


def test_parse_and_format_time():
    start = "2015/08/28-20:42:12.1231"
    st = parse_time(start)
    assert st.year == 2015
    assert st.month == 8
    assert st.day == 28
    assert st.hour == 20
    assert st.minute == 42
    assert st.second == 12
    assert format_time(st) == start


def test_format_time_drops_trailing_zeros():
    assert format_time(parse_time("2015/08/28-23:48:39.1000")) == "2015/08/28-23:48:39.1"
    assert format_time(datetime(2015, 8, 28, 23, 48, 39)) == "2015/08/28-23:48:39"


def test_parse_time_rejects_garbage():
    with pytest.raises(ValueError):
        parse_time("not a time")


def test_new_process_status(tmp_path):
    status_file = tmp_path / ".status.1"
    t1 = parse_time("2015/08/28-23:48:34.7161")
    t2 = parse_time("2015/08/28-23:48:36.7161")
    t3 = parse_time("2015/08/28-23:48:38.7161")
    t4 = parse_time("2015/08/28-23:48:39.1000")

    with ProcessStatus(status_file) as ps:
        ps.on_file_processing_finished("1.txt", t1)
        ps.on_file_processing_finished("2.txt", t2)

    with ProcessStatus(status_file) as ps:
        files = ps.processed_files
        assert files["1.txt"].start == t1
        assert files["2.txt"].start == t2

    with ProcessStatus(status_file) as ps:
        ps.on_file_processing_finished("3.txt", t3)
        files = ps.processed_files
        assert files["1.txt"].start == t1
        assert files["2.txt"].start == t2
        assert files["3.txt"].start == t3

    with ProcessStatus(status_file) as ps:
        ps.on_file_processing_finished("4.txt", t4)
        files = ps.processed_files
        assert files["1.txt"].start == t1
        assert files["2.txt"].start == t2
        assert files["3.txt"].start == t3
        assert files["4.txt"].start == t4
        ps.on_file_deleted("1.txt")

    with ProcessStatus(status_file) as ps:
        ps.on_file_processing_finished("4.txt", t4)
        files = ps.processed_files
        assert "1.txt" not in files
        assert files["2.txt"].start == t2
        assert files["3.txt"].start == t3
        assert files["4.txt"].start == t4

    assert list(tmp_path.glob(".status.1.bak.*"))


def test_is_processed(tmp_path):
    with ProcessStatus(tmp_path / "status.txt") as ps:
        assert ps.is_processed("a.log") is False
        ps.on_file_processing_finished("a.log", datetime(2020, 1, 1))
        assert ps.is_processed("a.log") is True


def test_close_rewrites_sorted(tmp_path):
    status_file = tmp_path / "status.txt"
    with ProcessStatus(status_file) as ps:
        ps.on_file_processing_finished("b.log", datetime(2020, 1, 1))
        ps.on_file_processing_finished("a.log", datetime(2020, 1, 2))
    lines = status_file.read_text().splitlines()
    assert [line.split()[2] for line in lines] == ["a.log", "b.log"]


def test_bad_status_line_raises(tmp_path):
    status_file = tmp_path / "status.txt"
    status_file.write_text("garbage here now\n")
    with pytest.raises(ValueError):
        ProcessStatus(status_file)


def test_missing_path_raises(tmp_path):
    status_file = tmp_path / "status.txt"
    status_file.write_text("2015/08/28-20:42:12.1231 2015/08/28-20:43:23.3123\n")
    with pytest.raises(ValueError):
        ProcessStatus(status_file)