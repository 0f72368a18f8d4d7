"""HTTP status codes: reason phrases, textual form and body expectations."""

from __future__ import annotations

from .util import utos

__all__ = ["get_reason_phrase", "stringify_status", "expect_response_body"]

_REASON_PHRASES = {
    100: "Continue",
    101: "Switching Protocols",
    103: "Early Hints",
    200: "OK",
    201: "Created",
    202: "Accepted",
    203: "Non-Authoritative Information",
    204: "No Content",
    205: "Reset Content",
    206: "Partial Content",
    300: "Multiple Choices",
    301: "Moved Permanently",
    302: "Found",
    303: "See Other",
    304: "Not Modified",
    305: "Use Proxy",
    307: "Temporary Redirect",
    308: "Permanent Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Requested Range Not Satisfiable",
    417: "Expectation Failed",
    421: "Misdirected Request",
    425: "Too Early",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    451: "Unavailable For Legal Reasons",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    511: "Network Authentication Required",
}


def get_reason_phrase(status_code: int) -> str:
    """Return the reason phrase for *status_code*, or "" if it is not known."""
    return _REASON_PHRASES.get(status_code, "")


def stringify_status(status_code: int) -> str:
    """Return the decimal text of *status_code*, e.g. ``"404"``.

    Raises ValueError for a negative code.
    """
    return utos(status_code)


def expect_response_body(status_code: int, method: str | None = None) -> bool:
    """True if a response with *status_code* carries a body.

    When *method* is given, a HEAD request never gets a body.
    """
    if method == "HEAD":
        return False
    return status_code == 101 or (
        status_code // 100 != 1 and status_code not in (204, 304)
    )