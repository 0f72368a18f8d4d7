"""Joining and normalising request paths."""

from __future__ import annotations

__all__ = ["path_join"]


def _eat_file(buf: str) -> str:
    """Drop the last path segment of *buf*, keeping the trailing slash."""
    if not buf:
        return "/"
    if buf.endswith("/"):
        return buf
    slash = buf.rfind("/")
    if slash == -1:
        # Not expected for normal paths, which start with "/".
        return "/"
    return buf[: slash + 1]


def _eat_dir(buf: str) -> str:
    """Drop the last directory of *buf*, keeping the trailing slash."""
    trimmed = _eat_file(buf)[:-1]
    return _eat_file(trimmed)


def _skip_slashes(s: str, i: int) -> int:
    while i < len(s) and s[i] == "/":
        i += 1
    return i


def path_join(
    base_path: str = "",
    base_query: str = "",
    rel_path: str = "",
    rel_query: str = "",
) -> str:
    """Resolve *rel_path* against *base_path*, removing "." and ".." segments.

    *base_path* must already be normalised: it holds no "." or ".."
    segments and starts with "/" unless it is empty.  The query of the
    result is *rel_query* if given; when *rel_path* is empty as well, the
    base query is kept.
    """
    if not rel_path:
        out = base_path or "/"
        if rel_query:
            return f"{out}?{rel_query}"
        if base_query:
            return f"{out}?{base_query}"
        return out

    n = len(rel_path)
    i = 0
    if rel_path[0] == "/":
        out = "/"
        i = _skip_slashes(rel_path, 1)
    else:
        out = base_path or "/"

    while i < n:
        if rel_path[i] == ".":
            if i + 1 == n:
                break
            if rel_path[i + 1] == "/":
                i += 2
                continue
            if rel_path[i + 1] == ".":
                if i + 2 == n:
                    out = _eat_dir(out)
                    break
                if rel_path[i + 2] == "/":
                    out = _eat_dir(out)
                    i += 3
                    continue
        if not out.endswith("/"):
            out = _eat_file(out)
        slash = rel_path.find("/", i)
        if slash == -1:
            out += rel_path[i:]
            break
        out += rel_path[i : slash + 1]
        i = _skip_slashes(rel_path, slash + 1)

    if rel_query:
        out += "?" + rel_query
    return out