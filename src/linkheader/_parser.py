"""Parsers for the components of a ``Link`` header."""

from __future__ import annotations

import re
from collections.abc import Iterable
from urllib.parse import SplitResult, urlsplit

from ._exceptions import LinkHeaderParseError

__all__ = [
    "parse_params",
    "parse_url",
]

_CONTROL_REGEX = re.compile(r"[\x00-\x1f\x7f]")
"""Matches characters that may never appear in a URL reference."""

_ESCAPE_REGEX = re.compile(r"%(?![0-9A-Fa-f]{2})")
"""Matches a percent sign that does not start a valid escape."""

_SCHEME_REGEX = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
"""Matches a valid URL scheme (RFC 3986 section 3.1)."""


def parse_params(parts: Iterable[str]) -> dict[str, str]:
    """Parse the parameters of a single link.

    Parameters
    ----------
    parts
        Parameter strings of the form ``key=value`` or ``key="value"``, as
        split out of a link on ``;``.

    Returns
    -------
    dict of str
        Mapping of parameter names to values with surrounding double quotes
        removed. If a parameter is repeated, the last value wins.

    Raises
    ------
    LinkHeaderParseError
        Raised if a parameter has no ``=`` separator.
    """
    params = {}
    for part in parts:
        param = part.strip()
        key, sep, value = param.partition("=")
        if not sep:
            msg = f"Link parameter {param!r} has no value"
            raise LinkHeaderParseError(msg, param)
        params[key.strip('"')] = value.strip('"')
    return params


def parse_url(reference: str) -> SplitResult:
    """Parse a URL reference from a ``Link`` header.

    Parameters
    ----------
    reference
        URL reference with any angle brackets already removed. May be
        absolute or relative.

    Returns
    -------
    urllib.parse.SplitResult
        The parsed URL.

    Raises
    ------
    LinkHeaderParseError
        Raised if the reference is not valid URL syntax.

    Notes
    -----
    `urllib.parse.urlsplit` accepts nearly anything, so check the syntax
    errors it lets through first: control characters, invalid percent
    escapes, and a colon in the first path segment that doesn't terminate a
    valid scheme (such as ``:/foo``).
    """
    if _CONTROL_REGEX.search(reference):
        msg = f"Invalid control character in URL {reference!r}"
        raise LinkHeaderParseError(msg, reference)
    if _ESCAPE_REGEX.search(reference):
        msg = f"Invalid percent escape in URL {reference!r}"
        raise LinkHeaderParseError(msg, reference)

    # A colon before any path, query, or fragment delimiter must end a
    # scheme.
    segment = re.split(r"[/?#]", reference, maxsplit=1)[0]
    if ":" in segment:
        scheme = segment.split(":", 1)[0]
        if not scheme:
            msg = f"Missing scheme in URL {reference!r}"
            raise LinkHeaderParseError(msg, reference)
        if not _SCHEME_REGEX.match(scheme):
            msg = f"First path segment of URL {reference!r} contains colon"
            raise LinkHeaderParseError(msg, reference)

    # Accessing the port forces validation of the network location.
    try:
        url = urlsplit(reference)
        url.port  # noqa: B018
    except ValueError as e:
        msg = f"Invalid URL {reference!r}: {e!s}"
        raise LinkHeaderParseError(msg, reference) from e
    return url
