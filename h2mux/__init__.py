"""HTTP/2 server helpers: routing, path joining, status codes, header tokens, TLS setup and utilities."""

__version__ = "0.1.0"