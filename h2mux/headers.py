"""Header name/value pairs and tokens for the header fields of interest."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["NvFlag", "HeaderToken", "NameValue", "make_nv", "lookup_token"]


class NvFlag(enum.IntFlag):
    """Flags attached to a header name/value pair."""

    NONE = 0
    NO_INDEX = 0x01
    NO_COPY_NAME = 0x02
    NO_COPY_VALUE = 0x04


class HeaderToken(enum.IntEnum):
    """Header fields that are tokenized, in index order."""

    PSEUDO_AUTHORITY = 0
    PSEUDO_HOST = enum.auto()
    PSEUDO_METHOD = enum.auto()
    PSEUDO_PATH = enum.auto()
    PSEUDO_PROTOCOL = enum.auto()
    PSEUDO_SCHEME = enum.auto()
    PSEUDO_STATUS = enum.auto()
    ACCEPT_ENCODING = enum.auto()
    ACCEPT_LANGUAGE = enum.auto()
    ALT_SVC = enum.auto()
    CACHE_CONTROL = enum.auto()
    CONNECTION = enum.auto()
    CONTENT_LENGTH = enum.auto()
    CONTENT_TYPE = enum.auto()
    COOKIE = enum.auto()
    DATE = enum.auto()
    EARLY_DATA = enum.auto()
    EXPECT = enum.auto()
    FORWARDED = enum.auto()
    HOST = enum.auto()
    HTTP2_SETTINGS = enum.auto()
    IF_MODIFIED_SINCE = enum.auto()
    KEEP_ALIVE = enum.auto()
    LINK = enum.auto()
    LOCATION = enum.auto()
    PROXY_CONNECTION = enum.auto()
    SEC_WEBSOCKET_ACCEPT = enum.auto()
    SEC_WEBSOCKET_KEY = enum.auto()
    SERVER = enum.auto()
    TE = enum.auto()
    TRAILER = enum.auto()
    TRANSFER_ENCODING = enum.auto()
    UPGRADE = enum.auto()
    USER_AGENT = enum.auto()
    VIA = enum.auto()
    X_FORWARDED_FOR = enum.auto()
    X_FORWARDED_PROTO = enum.auto()

    @property
    def header_name(self) -> str:
        """The lower-case header field name of this token."""
        name = self.name
        if name.startswith("PSEUDO_"):
            return ":" + name[len("PSEUDO_"):].lower()
        return name.lower().replace("_", "-")


_TOKENS = {token.header_name.encode("ascii"): token for token in HeaderToken}


@dataclass(frozen=True)
class NameValue:
    """A header field as name, value and flags."""

    name: bytes
    value: bytes
    flags: NvFlag = NvFlag.NONE


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def make_nv(name: str | bytes, value: str | bytes, no_index: bool = False) -> NameValue:
    """Build a header pair; *no_index* keeps the field out of the HPACK index."""
    flags = NvFlag.NO_INDEX if no_index else NvFlag.NONE
    return NameValue(_as_bytes(name), _as_bytes(value), flags)


def lookup_token(name: str | bytes) -> HeaderToken | None:
    """Return the token for header field *name*, or None if it is not tokenized.

    The match is exact: the name must already be lower-cased.
    """
    return _TOKENS.get(_as_bytes(name))