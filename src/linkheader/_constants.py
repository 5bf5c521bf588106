"""Constants for Link header parsing and formatting."""

from __future__ import annotations

__all__ = [
    "HEADER_NAME",
    "LINK_SEPARATOR",
    "LOGGER_NAME",
    "PARAM_SEPARATOR",
    "PREV_RELATIONS",
    "REL_PARAM",
]

HEADER_NAME = "Link"
"""Name of the HTTP header holding links."""

LINK_SEPARATOR = ", "
"""Separator between links when formatting a header."""

LOGGER_NAME = "linkheader"
"""Name of the structlog logger used by this package."""

PARAM_SEPARATOR = "; "
"""Separator between the URL and parameters when formatting a link."""

PREV_RELATIONS = ("prev", "previous")
"""Relation names accepted for the link to the previous page.

RFC 8288 registers ``prev`` and ``previous`` as synonyms. The first link in
header order carrying either one wins.
"""

REL_PARAM = "rel"
"""Name of the parameter holding the relation type."""
