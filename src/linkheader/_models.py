"""Representation for an RFC 8288 ``Link`` HTTP header."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from urllib.parse import SplitResult

import structlog
from httpx import Response
from structlog.stdlib import BoundLogger

from ._constants import (
    HEADER_NAME,
    LINK_SEPARATOR,
    LOGGER_NAME,
    PARAM_SEPARATOR,
    PREV_RELATIONS,
    REL_PARAM,
)
from ._parser import parse_params, parse_url

__all__ = ["Link", "LinkHeader"]


@dataclass
class Link:
    """A single link from a ``Link`` header."""

    url: SplitResult
    """Target of the link."""

    params: dict[str, str] = field(default_factory=dict)
    """Link parameters, such as ``rel``, with any quoting removed."""

    @property
    def href(self) -> str:
        """Target of the link as a string."""
        return self.url.geturl()

    @property
    def rel(self) -> str | None:
        """Relation type of the link, or `None` if it has none."""
        return self.params.get(REL_PARAM) or None

    def format(self) -> str:
        """Format the link for use in a ``Link`` header.

        Parameters are sorted by name so that the output is deterministic,
        and parameter values are always quoted.

        Returns
        -------
        str
            Serialized link, such as ``<https://example.com/>; rel="next"``.
        """
        parts = [f"<{self.href}>"]
        for key in sorted(self.params):
            parts.append(f'{key}="{self.params[key]}"')
        return PARAM_SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.format()


@dataclass
class LinkHeader:
    """All of the links in a ``Link`` header, in header order."""

    links: list[Link] = field(default_factory=list)
    """Links in the order in which they appeared."""

    @classmethod
    def from_relations(
        cls, relations: Mapping[str, SplitResult | str | None]
    ) -> LinkHeader:
        """Build a header from a mapping of relation types to URLs.

        Parameters
        ----------
        relations
            Mapping of relation types to link targets. Relations whose target
            is `None` or empty are skipped. The order of the resulting links
            follows the mapping but should not be relied on.

        Returns
        -------
        LinkHeader
            Header with one link per present relation, each with only a
            ``rel`` parameter.

        Raises
        ------
        LinkHeaderParseError
            Raised if a target given as a string is not a valid URL.
        """
        links = []
        for rel, url in relations.items():
            if not url:
                continue
            if isinstance(url, str):
                url = parse_url(url)
            links.append(Link(url=url, params={REL_PARAM: rel}))
        return cls(links=links)

    @classmethod
    def from_response(
        cls, response: Response, *, logger: BoundLogger | None = None
    ) -> LinkHeader:
        """Parse the ``Link`` header of an HTTP response.

        Only the first ``Link`` header of the response is used. A response
        without one results in an empty header.

        Parameters
        ----------
        response
            Response from which to extract the header.
        logger
            Logger to use. If not given, the package logger is used.

        Returns
        -------
        LinkHeader
            Parsed form of the header.

        Raises
        ------
        LinkHeaderParseError
            Raised if the header could not be parsed.
        """
        logger = logger or structlog.get_logger(LOGGER_NAME)
        values = response.headers.get_list(HEADER_NAME)
        header = cls.from_string(values[0] if values else "")
        logger.debug("Parsed Link header", links=len(header))
        return header

    @classmethod
    def from_string(cls, header: str) -> LinkHeader:
        """Parse the contents of a ``Link`` header.

        Each comma-separated element is one link and each semicolon-separated
        part after the URL is one parameter. Newlines are removed first so
        that headers with embedded line breaks parse the same as the
        single-line form. Commas inside quoted parameter values are not
        supported and will split the link.

        Parameters
        ----------
        header
            The contents of a ``Link`` header.

        Returns
        -------
        LinkHeader
            The parsed form of that header.

        Raises
        ------
        LinkHeaderParseError
            Raised if the URL of any link is invalid or a parameter has no
            value. No partial result is returned.
        """
        header = header.replace("\n", "")
        if not header.strip():
            return cls()
        links = []
        for element in header.split(","):
            url, *params = element.split(";")
            links.append(
                Link(
                    url=parse_url(url.strip(" \t<>")),
                    params=parse_params(params),
                )
            )
        return cls(links=links)

    def find(self, *rels: str) -> Link | None:
        """Find the first link with one of the given relation types.

        Parameters
        ----------
        *rels
            Acceptable relation types.

        Returns
        -------
        Link or None
            First matching link in header order, or `None` if there are none.
        """
        for link in self.links:
            if link.rel and link.rel in rels:
                return link
        return None

    def first(self) -> Link | None:
        """Return the link to the first page, if any."""
        return self.find("first")

    def last(self) -> Link | None:
        """Return the link to the last page, if any."""
        return self.find("last")

    def next(self) -> Link | None:
        """Return the link to the next page, if any."""
        return self.find("next")

    def prev(self) -> Link | None:
        """Return the link to the previous page, if any.

        Either ``prev`` or ``previous`` is accepted as the relation type.
        """
        return self.find(*PREV_RELATIONS)

    def format(self) -> str:
        """Format the links as the value of a ``Link`` header.

        Returns
        -------
        str
            Formatted links separated by commas, in order.
        """
        return LINK_SEPARATOR.join(link.format() for link in self.links)

    def __iter__(self) -> Iterator[Link]:
        return iter(self.links)

    def __len__(self) -> int:
        return len(self.links)

    def __str__(self) -> str:
        return self.format()
