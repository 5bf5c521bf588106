"""Configuration model for building pagination ``Link`` headers."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from ._exceptions import LinkHeaderParseError
from ._models import LinkHeader
from ._parser import parse_url

__all__ = ["LinkHeaderConfig"]


class LinkHeaderConfig(BaseModel):
    """Pagination URLs from which to build a ``Link`` header.

    Any relation left unset is omitted from the generated header.
    """

    first: Annotated[
        str | None,
        Field(
            title="First page",
            description="URL of the first page of results",
            examples=["https://example.com/api/items?limit=10"],
        ),
    ] = None

    prev: Annotated[
        str | None,
        Field(
            title="Previous page",
            description="URL of the previous page of results",
            examples=["https://example.com/api/items?cursor=p5&limit=10"],
        ),
    ] = None

    next: Annotated[
        str | None,
        Field(
            title="Next page",
            description="URL of the next page of results",
            examples=["https://example.com/api/items?cursor=15&limit=10"],
        ),
    ] = None

    last: Annotated[
        str | None,
        Field(
            title="Last page",
            description="URL of the last page of results",
            examples=["https://example.com/api/items?cursor=p91&limit=10"],
        ),
    ] = None

    @field_validator("first", "prev", "next", "last")
    @classmethod
    def _validate_url(cls, v: str | None) -> str | None:
        if not v:
            return None
        try:
            parse_url(v)
        except LinkHeaderParseError as e:
            raise ValueError(str(e)) from e
        return v

    def to_header(self) -> LinkHeader:
        """Build the corresponding ``Link`` header.

        Returns
        -------
        LinkHeader
            Header with one link for each configured URL.
        """
        return LinkHeader.from_relations(self.model_dump())
