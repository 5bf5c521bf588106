"""Tests for the Link header configuration model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from linkheader import Link, LinkHeader, LinkHeaderConfig

from .support.data import url


def test_to_header() -> None:
    config = LinkHeaderConfig(
        first="https://example.com/items?limit=10",
        next="https://example.com/items?cursor=15&limit=10",
        last=None,
    )
    header = config.to_header()
    assert header == LinkHeader(
        links=[
            Link(
                url=url("https://example.com/items?limit=10"),
                params={"rel": "first"},
            ),
            Link(
                url=url("https://example.com/items?cursor=15&limit=10"),
                params={"rel": "next"},
            ),
        ]
    )
    assert header.format() == (
        '<https://example.com/items?limit=10>; rel="first",'
        ' <https://example.com/items?cursor=15&limit=10>; rel="next"'
    )

    assert LinkHeaderConfig().to_header().links == []


def test_empty_urls() -> None:
    config = LinkHeaderConfig(first="", prev="/items?cursor=p5")
    assert config.first is None
    header = config.to_header()
    assert len(header) == 1
    prev_link = header.prev()
    assert prev_link
    assert prev_link.href == "/items?cursor=p5"


def test_invalid_urls() -> None:
    with pytest.raises(ValidationError):
        LinkHeaderConfig(first=":/fooboar")
    with pytest.raises(ValidationError):
        LinkHeaderConfig(next="https://example.com/%zz")


def test_validate_json() -> None:
    config = LinkHeaderConfig.model_validate(
        {"prev": "https://example.com/1", "last": "https://example.com/9"}
    )
    assert config.to_header().format() == (
        '<https://example.com/1>; rel="prev",'
        ' <https://example.com/9>; rel="last"'
    )
