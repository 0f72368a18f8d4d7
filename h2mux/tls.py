"""TLS context setup for serving HTTP/2."""

from __future__ import annotations

import ssl

from .util import H2, H2_14, H2_16

__all__ = [
    "DEFAULT_CIPHER_LIST",
    "DEFAULT_ALPN_PROTOCOLS",
    "configure_tls_context_easy",
    "create_server_context",
]

# General purpose "Intermediate compatibility" cipher suites for TLSv1.2.
DEFAULT_CIPHER_LIST = (
    "ECDHE-ECDSA-AES128-GCM-SHA256:ECDHE-RSA-AES128-GCM-SHA256:ECDHE-ECDSA-"
    "AES256-GCM-SHA384:ECDHE-RSA-AES256-GCM-SHA384:ECDHE-ECDSA-CHACHA20-"
    "POLY1305:ECDHE-RSA-CHACHA20-POLY1305:DHE-RSA-AES128-GCM-SHA256:DHE-RSA-"
    "AES256-GCM-SHA384"
)

# Supported HTTP/2 ALPN identifiers, most preferred first.
DEFAULT_ALPN_PROTOCOLS = tuple(proto.decode("ascii") for proto in (H2, H2_16, H2_14))

_SERVER_OPTIONS = (
    ssl.OP_NO_SSLv2
    | ssl.OP_NO_SSLv3
    | ssl.OP_NO_COMPRESSION
    | ssl.OP_SINGLE_ECDH_USE
    | ssl.OP_NO_TICKET
    | ssl.OP_CIPHER_SERVER_PREFERENCE
)


def configure_tls_context_easy(context: ssl.SSLContext) -> ssl.SSLContext:
    """Prepare *context* for serving HTTP/2 and return it.

    Disables SSLv2, SSLv3, compression and session tickets, prefers the
    server's cipher order, restricts TLSv1.2 ciphers to
    :data:`DEFAULT_CIPHER_LIST` and advertises the HTTP/2 identifiers via
    ALPN, the server's preference being h2, h2-16, h2-14.

    Raises ssl.SSLError if the cipher list cannot be applied.
    """
    context.options |= _SERVER_OPTIONS
    context.set_ciphers(DEFAULT_CIPHER_LIST)
    context.set_alpn_protocols(list(DEFAULT_ALPN_PROTOCOLS))
    return context


def create_server_context() -> ssl.SSLContext:
    """Return a new server-side context configured for HTTP/2.

    Certificates still have to be loaded by the caller.
    """
    return configure_tls_context_easy(ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER))