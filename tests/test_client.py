import socket
import threading
from unittest import mock

import pytest

from pagefetch.client import FetchError, HttpClient, HttpResponse, main, split_response

REPLY = (
    b"HTTP/1.1 200 OK\r\n"
    b"Content-Type: text/html\r\n"
    b"Set-Cookie: a=1\r\n"
    b"Set-Cookie: b=2\r\n"
    b"\r\n"
    b"<html><body>Hello</body></html>"
)


@pytest.fixture
def server():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    port = listener.getsockname()[1]
    received = []

    def serve():
        conn, _ = listener.accept()
        with conn:
            data = b""
            while True:
                chunk = conn.recv(1024)
                if not chunk:
                    break
                data += chunk
            received.append(data)
            conn.sendall(REPLY)

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    yield port, received
    thread.join(timeout=5)
    listener.close()


def _closed_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_build_request_default():
    client = HttpClient("example.com")
    assert client.build_request() == (
        b"GET /index.html HTTP/1.1\r\nHost: example.com\r\nConnection: close\r\n\r\n"
    )


def test_build_request_method_and_path():
    client = HttpClient("example.com")
    request = client.build_request("HEAD", "/about")
    assert request.startswith(b"HEAD /about HTTP/1.1\r\n")
    assert request.endswith(b"\r\n\r\n")


def test_split_response_crlf():
    response = split_response(REPLY)
    assert response.html_body == "<html><body>Hello</body></html>"
    assert response.headers[0] == ("content-type", "text/html")
    assert response.get_all("Set-Cookie") == ["a=1", "b=2"]
    assert response.get("set-cookie") == "a=1"


def test_split_response_bare_lf():
    response = split_response(b"HTTP/1.1 200 OK\nX-Test: yes\n\nbody\n")
    assert response.headers == [("x-test", "yes")]
    assert response.html_body == "body\n"


def test_split_response_without_headers():
    response = split_response(b"just some text")
    assert response == HttpResponse(headers=[], html_body="just some text")


def test_get_missing_header_returns_default():
    response = split_response(REPLY)
    assert response.get("location") is None
    assert response.get("location", "none") == "none"


def test_feed_then_parse():
    client = HttpClient("example.com")
    client.feed(REPLY[:20])
    client.feed(REPLY[20:])
    assert client.received == REPLY
    assert client.parse_response() == split_response(REPLY)


def test_send_request_round_trip(server):
    port, received = server
    client = HttpClient("127.0.0.1", port, timeout=5.0)
    count = client.send_request("GET", "/page.html")
    assert count == len(REPLY)
    assert received == [client.build_request("GET", "/page.html")]
    response = client.parse_response()
    assert response.html_body == "<html><body>Hello</body></html>"


def test_send_request_connection_refused():
    client = HttpClient("127.0.0.1", _closed_port(), timeout=2.0)
    with pytest.raises(FetchError):
        client.send_request()


def test_send_request_lookup_failure():
    client = HttpClient("example.com")
    with mock.patch("socket.getaddrinfo", side_effect=socket.gaierror(-2, "not known")):
        with pytest.raises(FetchError, match="getaddrinfo failed"):
            client.send_request()


def test_main_prints_page(server, capsys):
    port, _ = server
    assert main(["127.0.0.1", "/", "--port", str(port)]) == 0
    out = capsys.readouterr().out
    assert "content-type: text/html" in out
    assert "<html><body>Hello</body></html>" in out


def test_main_reports_failure(capsys):
    assert main(["127.0.0.1", "--port", str(_closed_port()), "--timeout", "2"]) == 1
    assert "Unable to connect" in capsys.readouterr().err