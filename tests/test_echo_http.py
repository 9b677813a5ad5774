import threading
import urllib.error
import urllib.request

import pytest

from hellokit.echo_http import make_server


@pytest.fixture
def base_url():
    server = make_server("127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def test_echo_returns_body(base_url):
    with urllib.request.urlopen(base_url + "/echo", data=b"hello echo", timeout=5) as response:
        assert response.status == 200
        assert response.read() == b"hello echo"


def test_echo_get_without_body_is_empty(base_url):
    with urllib.request.urlopen(base_url + "/echo", timeout=5) as response:
        assert response.read() == b""


def test_echo_truncates_large_body(base_url):
    payload = b"x" * (200 * 1024)
    with urllib.request.urlopen(base_url + "/echo", data=payload, timeout=5) as response:
        data = response.read()
    assert len(data) == 128 * 1024
    assert data == payload[: len(data)]


def test_other_path_is_not_found(base_url):
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(base_url + "/other", timeout=5)
    assert info.value.code == 404
    assert info.value.read() == b"404 page not found\n"