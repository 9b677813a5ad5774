"""HTTP server that answers /echo with the request body it received."""

import argparse
import logging
import socket
import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

_LIMIT = 1024 * 128


class EchoHandler(BaseHTTPRequestHandler):
    """Echoes up to 128 KiB of the request body on /echo; other paths get 404."""

    def _read_chunked(self) -> bytes:
        line = self.rfile.readline()
        try:
            size = int(line.split(b";")[0].strip() or b"0", 16)
        except ValueError:
            return b""
        return self.rfile.read(min(size, _LIMIT))

    def _read_body(self) -> bytes:
        if "chunked" in (self.headers.get("Transfer-Encoding") or "").lower():
            return self._read_chunked()
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            length = 0
        if length <= 0:
            return b""
        return self.rfile.read(min(length, _LIMIT))

    def _handle(self) -> None:
        if urlsplit(self.path).path != "/echo":
            body = b"404 page not found\n"
            self.send_response(404)
            self.send_header("Content-Type", "text/plain; charset=utf-8")
            self.send_header("X-Content-Type-Options", "nosniff")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(body)
            return
        data = self._read_body()
        logger.info("[%s]", data.decode("utf-8", errors="replace"))
        self.send_response(200)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(data)

    do_GET = do_POST = do_HEAD = do_PUT = do_DELETE = do_PATCH = _handle

    def log_message(self, format, *args):
        logger.debug(format, *args)


def make_server(host: str, port: int) -> ThreadingHTTPServer:
    """Create (but do not start) the echo server."""
    return ThreadingHTTPServer((host, port), EchoHandler)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Serve /echo over HTTP.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=8091)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s",
                        datefmt="%Y/%m/%d %H:%M:%S")
    try:
        server = make_server(args.host, args.port)
    except OSError as exc:
        logger.error("%s", exc)
        return 1
    logger.info("start http://%s:%d/echo", socket.gethostname(), args.port)
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())