# h2mux

Building blocks for an HTTP/2 server. The package needs only the standard
library.

- **`h2mux.serve_mux`**: `ServeMux` routes requests to handlers by path
  pattern, using the same rules as Go's `net/http.ServeMux`:
  - An exact pattern such as `/favicon.ico` matches only that path.
  - A pattern that ends in a slash, such as `/images/`, matches the whole
    subtree below it. Registering it also adds a 301 `Redirect` from
    `/images` to `/images/`, unless `/images` is registered explicitly.
  - When several patterns match, the longest one wins.
  - A pattern may begin with a host name, for example `example.com/`.
    Host-specific patterns are tried before general ones.
  - A path that contains `.` or `..` segments gets a 301 redirect to its
    clean form. `CONNECT` requests are exempt from this.
  - A path that no pattern matches gets a 404 reply.
- **`h2mux.paths`**: `path_join` resolves a relative path and query against
  a base path and query, and removes dot segments.
- **`h2mux.status`**: `get_reason_phrase`, `stringify_status` and the
  `expect_response_body` rule.
- **`h2mux.headers`**: `lookup_token` maps known lower-case header names to
  a `HeaderToken`. `make_nv` builds `NameValue` header fields and can mark a
  field as never indexed (`NvFlag.NO_INDEX`).
- **`h2mux.util`**:
  - percent-encoding (`percent_encode_path`) and percent-decoding
    (`percent_decode`)
  - HTTP date formatting (`http_date`)
  - checks for numeric hosts (`numeric_host`, `ipv6_numeric_addr`) and for
    safe paths (`check_path`)
  - ALPN helpers for `h2` (`select_h2`, `get_default_alpn`,
    `check_h2_is_selected`)
  - strict parsing of unsigned integers (`parse_uint`), plus `utos` and
    `dtos`
- **`h2mux.timegm`**: `timegm` and `timegm_without_yday` convert a
  broken-down UTC time (such as a `time.struct_time`) to a POSIX timestamp.
- **`h2mux.tls`**: `create_server_context()` and
  `configure_tls_context_easy()` build a server `ssl.SSLContext` that
  offers `h2`, `h2-16` and `h2-14` through ALPN and uses
  `DEFAULT_CIPHER_LIST`.
- **`h2mux.textref`**: `fnv1a_hash` (32-bit FNV-1a) and the size helpers
  `kib`, `mib` and `gib`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Routing requests

```python
from h2mux.serve_mux import ServeMux, UriRef

mux = ServeMux()
mux.handle("/", lambda req, res: ...)
mux.handle("/images/", lambda req, res: ...)

cb = mux.handler("GET", UriRef(host="example.com", path="/images/a.png"))
```

`ServeMux.handle` returns `False` when the pattern is empty, when the
handler is `None`, or when the pattern is already registered. It returns
`True` otherwise.

`ServeMux.handler` returns one of:

- the handler registered for the longest matching pattern (this may be a
  `Redirect` added implicitly for a subtree pattern);
- a `Redirect(301, ...)` when the path must be cleaned;
- a `StatusReply(404)` when no pattern matches.

`Redirect` and `StatusReply` are plain data objects that describe the reply;
the caller turns them into a response. `ServeMux.match(path)` returns the
handler of the longest matching pattern, or `None`.

## Joining paths

```python
from h2mux.paths import path_join

path_join("/alpha/bravo/", "", "../charlie", "q=1")   # "/alpha/charlie?q=1"
```

## TLS

```python
from h2mux.tls import create_server_context

ctx = create_server_context()
ctx.load_cert_chain("server.crt", "server.key")
```

## What it does not do

This package holds no server. It does not listen on sockets, speak the
HTTP/2 wire protocol (framing, HPACK, flow control), manage connections or
streams, or run request handlers. It has no client and no command-line
program. It provides the routing, path, status, header and TLS pieces that
such a server would use.