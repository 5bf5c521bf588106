"""Parse and format RFC 8288 ``Link`` HTTP headers."""

from ._config import LinkHeaderConfig
from ._exceptions import LinkHeaderError, LinkHeaderParseError
from ._models import Link, LinkHeader
from ._parser import parse_url

__all__ = [
    "Link",
    "LinkHeader",
    "LinkHeaderConfig",
    "LinkHeaderError",
    "LinkHeaderParseError",
    "parse_url",
]
