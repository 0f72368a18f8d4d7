"""Character classes, percent-coding, HTTP dates, ALPN and number helpers."""

from __future__ import annotations

import math
import re
import socket
import time

__all__ = [
    "H2",
    "H2_16",
    "H2_14",
    "is_alpha",
    "is_digit",
    "is_hex_digit",
    "in_rfc3986_unreserved_chars",
    "in_rfc3986_sub_delims",
    "hex_to_uint",
    "percent_encode_path",
    "percent_decode",
    "http_date",
    "numeric_host",
    "ipv6_numeric_addr",
    "check_path",
    "check_h2_is_selected",
    "select_h2",
    "get_default_alpn",
    "parse_uint",
    "utos",
    "dtos",
]

H2 = b"h2"
# Draft identifiers still accepted for smooth migration to the final "h2".
H2_16 = b"h2-16"
H2_14 = b"h2-14"

_SUPPORTED_H2 = (H2, H2_16, H2_14)

_INT64_MAX = 2**63 - 1

_UNRESERVED = frozenset("-._~")
_SUB_DELIMS = frozenset("!$&'()*+,;=")

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_PERCENT_ESCAPE = re.compile(rb"%([0-9A-Fa-f]{2})")


def is_alpha(c: str) -> bool:
    """True if *c* is an ASCII letter."""
    return "A" <= c <= "Z" or "a" <= c <= "z"


def is_digit(c: str) -> bool:
    """True if *c* is an ASCII decimal digit."""
    return "0" <= c <= "9"


def is_hex_digit(c: str) -> bool:
    """True if *c* is an ASCII hexadecimal digit."""
    return is_digit(c) or "A" <= c <= "F" or "a" <= c <= "f"


def in_rfc3986_unreserved_chars(c: str) -> bool:
    """True if *c* is an RFC 3986 unreserved character."""
    return is_alpha(c) or is_digit(c) or c in _UNRESERVED


def in_rfc3986_sub_delims(c: str) -> bool:
    """True if *c* is an RFC 3986 sub-delimiter."""
    return c in _SUB_DELIMS


def hex_to_uint(c: str) -> int:
    """Return the value of hexadecimal digit *c*.

    Raises ValueError if *c* is not a hexadecimal digit.
    """
    if len(c) != 1 or not is_hex_digit(c):
        raise ValueError(f"not a hexadecimal digit: {c!r}")
    return int(c, 16)


def _path_byte_allowed(b: int) -> bool:
    c = chr(b)
    return in_rfc3986_unreserved_chars(c) or in_rfc3986_sub_delims(c) or c == "/"


def percent_encode_path(s: str) -> str:
    """Percent-encode the path component *s* (UTF-8, upper-case hex digits)."""
    return "".join(
        chr(b) if _path_byte_allowed(b) else f"%{b:02X}" for b in s.encode("utf-8")
    )


def percent_decode(s: str | bytes) -> str | bytes:
    """Decode %XX escapes in *s*; malformed escapes are kept as they are.

    Bytes give bytes.  A string is handled as UTF-8 and a string is returned.
    """
    if isinstance(s, bytes):
        return _PERCENT_ESCAPE.sub(lambda m: bytes([int(m.group(1), 16)]), s)
    decoded = _PERCENT_ESCAPE.sub(
        lambda m: bytes([int(m.group(1), 16)]), s.encode("utf-8")
    )
    return decoded.decode("utf-8", errors="replace")


def http_date(t: float) -> str:
    """Format POSIX time *t* as an HTTP date, e.g. ``Mon, 10 Oct 2016 10:25:58 GMT``."""
    tm = time.gmtime(t)
    return (
        f"{_WEEKDAYS[tm.tm_wday]}, {tm.tm_mday:02d} {_MONTHS[tm.tm_mon - 1]} "
        f"{tm.tm_year:04d} {tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d} GMT"
    )


def numeric_host(hostname: str, family: int | None = None) -> bool:
    """True if *hostname* is a numeric address.

    With no *family*, both IPv4 and IPv6 are tried.
    """
    if family is None:
        return numeric_host(hostname, socket.AF_INET) or numeric_host(
            hostname, socket.AF_INET6
        )
    try:
        socket.inet_pton(family, hostname)
    except (OSError, ValueError):
        return False
    return True


def ipv6_numeric_addr(host: str) -> bool:
    """True if *host* is a numeric IPv6 address such as ``::1``."""
    return numeric_host(host, socket.AF_INET6)


def check_path(path: str) -> bool:
    """True if the percent-decoded *path* is safe from directory traversal.

    The path must start with "/" and hold no backslash and no "." or ".."
    segments.
    """
    return (
        path.startswith("/")
        and "\\" not in path
        and "/../" not in path
        and "/./" not in path
        and not path.endswith("/..")
        and not path.endswith("/.")
    )


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("ascii") if isinstance(value, str) else bytes(value)


def check_h2_is_selected(proto: str | bytes) -> bool:
    """True if the ALPN identifier *proto* is a supported HTTP/2 identifier."""
    return _as_bytes(proto) in _SUPPORTED_H2


def _alpn_entries(wire: bytes):
    pos = 0
    while pos < len(wire):
        length = wire[pos]
        yield wire[pos + 1:pos + 1 + length]
        pos += length + 1


def select_h2(protocols: bytes) -> bytes | None:
    """Pick a supported HTTP/2 identifier from a wire-format ALPN list.

    Identifiers are preferred in the order h2, h2-16, h2-14, whatever their
    order in *protocols*.  Returns None if none is offered.
    """
    offered = list(_alpn_entries(bytes(protocols)))
    return next((key for key in _SUPPORTED_H2 if key in offered), None)


def get_default_alpn() -> bytes:
    """Return the wire-format ALPN list of supported HTTP/2 identifiers."""
    return b"".join(bytes([len(proto)]) + proto for proto in _SUPPORTED_H2)


def parse_uint(s: str | bytes) -> int:
    """Parse a non-negative decimal integer that fits in a signed 64-bit value.

    Raises ValueError for empty input, any non-digit, or overflow.
    """
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    if not data or not data.isdigit():
        raise ValueError(f"not an unsigned integer: {s!r}")
    n = int(data)
    if n > _INT64_MAX:
        raise ValueError(f"integer too large: {s!r}")
    return n


def utos(n: int) -> str:
    """Return the decimal representation of the non-negative integer *n*."""
    if n < 0:
        raise ValueError(f"negative value: {n}")
    return str(n)


def _round_half_away(x: float) -> int:
    whole = math.floor(x)
    return whole + (1 if x - whole >= 0.5 else 0)


def dtos(n: float) -> str:
    """Return *n* rounded to two fractional digits, e.g. ``"1.50"``."""
    if n < 0:
        raise ValueError(f"negative value: {n}")
    m = _round_half_away(100.0 * n)
    return f"{utos(m // 100)}.{m % 100:02d}"