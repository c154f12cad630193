# pagefetch

`pagefetch` fetches a page over plain HTTP/1.1. It also provides the small
pieces that a browser needs around a fetch: header parsing, URL resolution,
encoding labels and decoding, and plain value types for CSS layout
(borders, selector specificity, table cells, line and flex ordering).

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pagefetch example.com
```

The command resolves the host and connects on port 80. It sends
`GET /index.html` with `Host:` and `Connection: close` headers and reads
until the server closes the connection. It then prints each header as
`name: value`, a blank line, and the body. If the host cannot be resolved
or reached, or the request cannot be sent, it prints the error to stderr
and exits with status 1.

```
pagefetch HOST [PATH] [--method METHOD] [--port PORT] [--timeout SECONDS]
```

| Option | Default |
| --- | --- |
| `PATH` | `/index.html` |
| `--method` | `GET` |
| `--port` | `80` |
| `--timeout` | `5.0` seconds, used for both connect and read |

## Library use

### Fetching

```python
from pagefetch.client import HttpClient, FetchError

client = HttpClient("example.com")          # port=80, timeout=5.0
try:
    client.send_request("GET", "/index.html")   # returns bytes received
except FetchError as exc:
    print(exc)
response = client.parse_response()
print(response.get("content-type"))
print(response.html_body)
```

- `HttpClient.build_request(method, path)` returns the exact request bytes.
- `HttpClient.send_request` raises `FetchError` when the host cannot be
  resolved or connected to, or when sending fails. A read error or timeout
  while receiving ends the reply early and keeps what has arrived.
- `HttpClient.feed(data)` appends bytes to the buffer. `HttpClient.received`
  returns the collected bytes.
- `HttpResponse.headers` is a list of `(name, value)` pairs in arrival
  order, with duplicates kept. `get(name, default)` returns the first value
  and `get_all(name)` returns all of them. Header names are lower-cased.
- `split_response(raw)` splits raw bytes at the first `\r\n\r\n`, or else
  at the first `\n\n`. If there is no blank line, everything is the body.
  The body is decoded as UTF-8, with malformed bytes replaced.

### Headers

```python
from pagefetch.headers import parse_headers, iequals

parse_headers("Content-Type: text/html\r\nX-A:  1 ")
# [("content-type", "text/html"), ("x-a", "1")]
iequals("Host", "HOST")  # True
```

Lines without a colon, such as the status line, are skipped.

### URLs

```python
from pagefetch.url import Url, resolve

str(resolve(Url.parse("http://example.com/a/b"), Url.parse("../c")))
# "http://example.com/c"
```

`Url` is a frozen dataclass with `scheme`, `authority`, `path`, `query` and
`fragment` fields. It also has the `has_*` properties and `is_absolute`.
`resolve` follows RFC 3986 reference resolution, including dot-segment
removal.

### Encodings

```python
from pagefetch.encodings import Encoding, bom_sniff, get_encoding, decode

bom_sniff(b"\xef\xbb\xbfhi")       # Encoding.UTF_8
get_encoding(" Latin1 ")           # Encoding.WINDOWS_1252
decode(b"caf\xe9", Encoding.WINDOWS_1252)  # "café"
```

`get_encoding` knows the WHATWG encoding labels. For an unknown label it
returns `Encoding.NULL`. `decode` raises `ValueError` for `Encoding.NULL`.
`EncodedBytes` pairs raw bytes with an `Encoding` and a `Confidence`.

### Text helpers

`pagefetch.textutil` offers `trim`, `split_string`, which keeps quoted and
parenthesised runs whole, `value_index`, `index_value` and `value_in_list`
for `;`-separated keyword lists, and `find_close_bracket`. For
case-insensitive comparison it has `equal_i`, `match` and `match_i`. It
also has the character tests `is_whitespace`, `is_hex_digit`,
`digit_value` and `is_surrogate`, the numeric helpers `round_half_up` and
`baseline_align`, and the sequence helpers `at` and `remove`.

### Layout value types

| Module | Contents |
| --- | --- |
| `pagefetch.borders` | `Margins`, `BorderStyle`, `Border`, `BorderRadii` (`clamp`, `fix_values`, `grow`, `shrink`), `Borders.is_visible`, `CssSize` |
| `pagefetch.selectors` | `Specificity` (ordered, supports `+`), `SelectorRank`, `AttrSelectType`, `AttrMatcher`, `Combinator`, `AttributeSelector`, `UsedSelector` |
| `pagefetch.table` | `TableRow`, `TableColumn`, `TableCell`, `ColumnField` |
| `pagefetch.layout` | `LineContext`, `ItemExtent`, `LineItemType`, `FlexOrder`, `PositionStack` |

## What it does not do

`pagefetch` does not parse or render HTML, and it has no window or screen.
The layout modules hold only value types, with no layout engine behind
them. The client speaks plain HTTP only, with no TLS. It does not follow
redirects or decode chunked transfer encoding. The body is always decoded
as UTF-8, whatever the headers declare.