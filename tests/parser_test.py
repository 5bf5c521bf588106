"""Tests for parsing the components of a Link header."""

from __future__ import annotations

import pytest

from linkheader import LinkHeaderParseError, parse_url
from linkheader._parser import parse_params


def test_parse_url() -> None:
    url = parse_url("https://example.com:8443/api/items?cursor=15#top")
    assert url.scheme == "https"
    assert url.hostname == "example.com"
    assert url.port == 8443
    assert url.path == "/api/items"
    assert url.query == "cursor=15"
    assert url.fragment == "top"

    assert parse_url("/api/items?page=2").geturl() == "/api/items?page=2"
    assert parse_url("items").path == "items"
    assert parse_url("mailto:someone@example.com").scheme == "mailto"
    assert parse_url("./a:b").path == "./a:b"
    assert parse_url("https://example.com/%7Euser").path == "/%7Euser"
    assert parse_url("").geturl() == ""


def test_parse_url_invalid() -> None:
    bad_urls = [
        ":/fooboar",
        ":",
        "1http://example.com/",
        "a b:c",
        "https://example.com/\x7f",
        "https://example.com/\x00",
        "https://example.com/%zz",
        "https://example.com/100%",
        "https://[::1/",
        "https://example.com:port/",
        "https://example.com:99999/",
    ]
    for bad_url in bad_urls:
        with pytest.raises(LinkHeaderParseError) as exc_info:
            parse_url(bad_url)
        assert exc_info.value.fragment == bad_url


def test_parse_params() -> None:
    assert parse_params([]) == {}
    assert parse_params([' rel="next"', " title=Next "]) == {
        "rel": "next",
        "title": "Next",
    }
    assert parse_params(['"rel"="first"', "rel=last"]) == {"rel": "last"}
    assert parse_params(["title=a=b", 'empty=""']) == {
        "title": "a=b",
        "empty": "",
    }

    with pytest.raises(LinkHeaderParseError) as exc_info:
        parse_params(["rel=next", " "])
    assert exc_info.value.fragment == ""
