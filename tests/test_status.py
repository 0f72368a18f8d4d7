import pytest

from h2mux.status import expect_response_body, get_reason_phrase, stringify_status


@pytest.mark.parametrize(
    "code, phrase",
    [
        (200, "OK"),
        (404, "Not Found"),
        (425, "Too Early"),
        (301, "Moved Permanently"),
        (511, "Network Authentication Required"),
        (103, "Early Hints"),
    ],
)
def test_known_reason_phrases(code, phrase):
    assert get_reason_phrase(code) == phrase


@pytest.mark.parametrize("code", [306, 999, 0, 418])
def test_unknown_reason_phrase_is_empty(code):
    assert get_reason_phrase(code) == ""


@pytest.mark.parametrize("code", [100, 200, 404, 425, 503, 999, 1234])
def test_stringify_status_round_trips(code):
    assert int(stringify_status(code)) == code
    assert stringify_status(code) == str(code)


def test_stringify_status_literal():
    assert stringify_status(404) == "404"


def test_stringify_status_rejects_negative():
    with pytest.raises(ValueError):
        stringify_status(-1)


@pytest.mark.parametrize(
    "code, expected",
    [
        (101, True),
        (100, False),
        (103, False),
        (200, True),
        (204, False),
        (304, False),
        (404, True),
        (500, True),
    ],
)
def test_expect_response_body_by_status(code, expected):
    assert expect_response_body(code) is expected


def test_head_never_has_body():
    assert expect_response_body(200, "HEAD") is False
    assert expect_response_body(101, "HEAD") is False


def test_get_follows_status_rule():
    assert expect_response_body(200, "GET") is True
    assert expect_response_body(204, "GET") is False