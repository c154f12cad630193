"""A minimal HTTP/1.1 client that fetches one page over a plain TCP socket."""

from __future__ import annotations

import argparse
import socket
import sys
from dataclasses import dataclass, field

from pagefetch.headers import parse_headers

DEFAULT_PORT = 80
DEFAULT_TIMEOUT = 5.0
_RECV_SIZE = 512


class FetchError(Exception):
    """Raised when a page cannot be requested from the server."""


@dataclass
class HttpResponse:
    """Header fields in arrival order, and the response body."""

    headers: list[tuple[str, str]] = field(default_factory=list)
    html_body: str = ""

    def get_all(self, name: str) -> list[str]:
        """Every value of header ``name``, in arrival order."""
        key = name.lower()
        return [value for header, value in self.headers if header == key]

    def get(self, name: str, default: str | None = None) -> str | None:
        """First value of header ``name``, or ``default``."""
        values = self.get_all(name)
        return values[0] if values else default


def split_response(raw: bytes) -> HttpResponse:
    """Split a raw response into headers and body.

    The header block ends at the first blank line (CRLF or bare LF).  When
    there is no blank line, the whole response is taken as the body.
    """
    pos = raw.find(b"\r\n\r\n")
    if pos == -1:
        pos = raw.find(b"\n\n")
    if pos == -1:
        return HttpResponse(html_body=raw.decode("utf-8", errors="replace"))
    skip = 4 if raw[pos:pos + 1] == b"\r" else 2
    header_block = raw[:pos].decode("iso-8859-1")
    body = raw[pos + skip:].decode("utf-8", errors="replace")
    return HttpResponse(headers=parse_headers(header_block), html_body=body)


class HttpClient:
    """Sends one request to a host and collects everything it answers."""

    def __init__(self, address: str, port: int = DEFAULT_PORT, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.address = address
        self.port = port
        self.timeout = timeout
        self._buffer = bytearray()

    @property
    def received(self) -> bytes:
        """The bytes collected from the last request."""
        return bytes(self._buffer)

    def build_request(self, method: str = "GET", path: str = "/index.html") -> bytes:
        """The request line and headers sent for ``method`` and ``path``."""
        text = (
            f"{method} {path} HTTP/1.1\r\n"
            f"Host: {self.address}\r\n"
            "Connection: close\r\n\r\n"
        )
        return text.encode("iso-8859-1")

    def _connect(self) -> socket.socket:
        try:
            candidates = socket.getaddrinfo(
                self.address, self.port, socket.AF_UNSPEC, socket.SOCK_STREAM, socket.IPPROTO_TCP
            )
        except socket.gaierror as exc:
            raise FetchError(f"getaddrinfo failed with error: {exc.errno}") from exc

        for family, socktype, proto, _canon, sockaddr in candidates:
            try:
                sock = socket.socket(family, socktype, proto)
            except OSError:
                continue
            try:
                sock.settimeout(self.timeout)
                sock.connect(sockaddr)
            except OSError:
                sock.close()
                continue
            return sock
        raise FetchError("Unable to connect to server!")

    def send_request(self, method: str = "GET", path: str = "/index.html") -> int:
        """Send a request and read the reply until the server closes.

        Returns the number of bytes received.  A read error or timeout ends
        the reply early and keeps what arrived so far.
        """
        with self._connect() as sock:
            try:
                sock.sendall(self.build_request(method, path))
            except OSError as exc:
                raise FetchError(f"send failed with error: {exc.errno}") from exc
            try:
                sock.shutdown(socket.SHUT_WR)
            except OSError as exc:
                raise FetchError(f"shutdown failed with error: {exc.errno}") from exc

            self._buffer.clear()
            sock.settimeout(self.timeout)
            while True:
                try:
                    chunk = sock.recv(_RECV_SIZE)
                except OSError as exc:
                    print(f"recv failed with error: {exc}", file=sys.stderr)
                    break
                if not chunk:
                    break
                self.feed(chunk)
        return len(self._buffer)

    def feed(self, data: bytes) -> None:
        """Append received bytes to the response buffer."""
        self._buffer.extend(data)

    def parse_response(self) -> HttpResponse:
        """Split the collected bytes into headers and body."""
        return split_response(bytes(self._buffer))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pagefetch", description="Fetch a page over HTTP.")
    parser.add_argument("host")
    parser.add_argument("path", nargs="?", default="/index.html")
    parser.add_argument("--method", default="GET")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    args = parser.parse_args(argv)

    client = HttpClient(args.host, args.port, args.timeout)
    try:
        client.send_request(args.method, args.path)
    except FetchError as exc:
        print(exc, file=sys.stderr)
        return 1

    response = client.parse_response()
    for name, value in response.headers:
        print(f"{name}: {value}")
    print()
    print(response.html_body)
    return 0