"""Test fixtures for Link header testing."""

import pytest

from linkheader import LinkHeader

from .support.data import read_test_header


@pytest.fixture
def canonical_header() -> str:
    return read_test_header("canonical")


@pytest.fixture
def parsed_header(canonical_header: str) -> LinkHeader:
    return LinkHeader.from_string(" " + canonical_header)
