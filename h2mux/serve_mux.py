"""Request routing by path pattern, with the rules of Go's ServeMux."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from .paths import path_join
from .util import percent_encode_path

__all__ = ["UriRef", "Redirect", "StatusReply", "ServeMux"]


@dataclass
class UriRef:
    """A request URI split into components."""

    scheme: str = ""
    host: str = ""
    # percent-decoded path
    path: str = ""
    # path as received, percent-encoded
    raw_path: str = ""
    # query as received, percent-encoded
    raw_query: str = ""
    fragment: str = ""


@dataclass(frozen=True)
class Redirect:
    """Reply with a redirect to *uri*, which goes into "location" as is."""

    status_code: int
    uri: str


@dataclass(frozen=True)
class StatusReply:
    """Reply with *status_code* and a short page about it."""

    status_code: int


RequestHandler = Union[Callable[..., Any], Redirect, StatusReply]


@dataclass
class _Entry:
    user_defined: bool
    cb: RequestHandler
    pattern: str


def _path_match(pattern: str, path: str) -> bool:
    if not pattern.endswith("/"):
        return pattern == path
    return path.startswith(pattern)


class ServeMux:
    """Maps path patterns to request handlers.

    Patterns name fixed paths such as "/favicon.ico" or rooted subtrees such
    as "/images/".  Longer patterns take precedence, and a pattern may begin
    with a host name to match requests for that host only.
    """

    def __init__(self) -> None:
        self._mux: dict[str, _Entry] = {}

    def handle(self, pattern: str, cb: Callable[..., Any]) -> bool:
        """Register *cb* for *pattern*.

        Returns False if the pattern is empty, *cb* is None, or the pattern
        was already registered.  A pattern ending in "/" also registers a
        permanent redirect from the same pattern without the slash, unless
        that one is registered explicitly.
        """
        if not pattern or cb is None:
            return False

        existing = self._mux.get(pattern)
        if existing is not None and existing.user_defined:
            return False

        if len(pattern) >= 2 and pattern.endswith("/"):
            redirect_pattern = pattern[:-1]
            current = self._mux.get(redirect_pattern)
            if current is None or not current.user_defined:
                # Skip the host part of host-specific patterns.
                path = pattern if pattern[0] == "/" else pattern[pattern.find("/"):]
                self._mux[redirect_pattern] = _Entry(
                    False, Redirect(301, path), pattern
                )

        self._mux.setdefault(pattern, _Entry(True, cb, pattern))
        return True

    def handler(self, method: str, uri: UriRef) -> RequestHandler:
        """Return the handler for a request with *method* and *uri*.

        Paths holding "." or ".." segments are redirected to their clean
        form, except for CONNECT.  With no match, a 404 reply is returned.
        """
        path = uri.path
        if method != "CONNECT":
            clean_path = path_join("", "", path, "")
            if clean_path != path:
                new_uri = percent_encode_path(clean_path)
                if uri.raw_query:
                    new_uri += "?" + uri.raw_query
                return Redirect(301, new_uri)

        cb = self.match(uri.host + path)
        if cb is not None:
            return cb
        cb = self.match(path)
        if cb is not None:
            return cb
        return StatusReply(404)

    def match(self, path: str) -> Optional[RequestHandler]:
        """Return the handler of the longest pattern matching *path*, or None."""
        best: Optional[_Entry] = None
        for pattern in sorted(self._mux):
            if not _path_match(pattern, path):
                continue
            if best is None or len(best.pattern) < len(pattern):
                best = self._mux[pattern]
                best = _Entry(best.user_defined, best.cb, pattern)
        return best.cb if best is not None else None