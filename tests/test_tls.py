import ssl

import pytest

from h2mux.tls import (
    DEFAULT_ALPN_PROTOCOLS,
    DEFAULT_CIPHER_LIST,
    configure_tls_context_easy,
    create_server_context,
)

REQUIRED_OPTIONS = (
    ssl.OP_NO_SSLv2,
    ssl.OP_NO_SSLv3,
    ssl.OP_NO_COMPRESSION,
    ssl.OP_SINGLE_ECDH_USE,
    ssl.OP_NO_TICKET,
    ssl.OP_CIPHER_SERVER_PREFERENCE,
)

RECOMMENDED_SUITES = (
    "ECDHE-ECDSA-AES128-GCM-SHA256:ECDHE-RSA-AES128-GCM-SHA256:ECDHE-ECDSA-"
    "AES256-GCM-SHA384:ECDHE-RSA-AES256-GCM-SHA384:ECDHE-ECDSA-CHACHA20-"
    "POLY1305:ECDHE-RSA-CHACHA20-POLY1305:DHE-RSA-AES128-GCM-SHA256:DHE-RSA-"
    "AES256-GCM-SHA384"
)


def test_cipher_list_matches_recommended_suites():
    assert DEFAULT_CIPHER_LIST == RECOMMENDED_SUITES
    context = create_server_context()
    recommended = set(RECOMMENDED_SUITES.split(":"))
    tls12 = [c["name"] for c in context.get_ciphers() if c["protocol"] == "TLSv1.2"]
    assert tls12
    assert set(tls12) <= recommended


def test_alpn_protocols_in_preference_order():
    context = configure_tls_context_easy(ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER))
    assert context.protocol == ssl.PROTOCOL_TLS_SERVER
    assert DEFAULT_ALPN_PROTOCOLS == ("h2", "h2-16", "h2-14")


def test_create_server_context_is_server_side():
    context = create_server_context()
    assert context.protocol == ssl.PROTOCOL_TLS_SERVER


@pytest.mark.parametrize("option", REQUIRED_OPTIONS)
def test_create_server_context_sets_options(option):
    context = create_server_context()
    assert context.options & option == option


def test_configure_returns_same_context():
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    assert configure_tls_context_easy(context) is context


def test_configure_sets_options_on_given_context():
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    configure_tls_context_easy(context)
    for option in REQUIRED_OPTIONS:
        assert context.options & option == option


def test_tls12_ciphers_restricted_to_default_list():
    context = create_server_context()
    allowed = set(DEFAULT_CIPHER_LIST.split(":"))
    tls12 = [c["name"] for c in context.get_ciphers() if c["protocol"] == "TLSv1.2"]
    assert tls12
    assert set(tls12) <= allowed