"""Exceptions for Link header handling."""

from __future__ import annotations

from safir.slack.blockkit import SlackCodeBlock, SlackException, SlackMessage

__all__ = [
    "LinkHeaderError",
    "LinkHeaderParseError",
]


class LinkHeaderError(SlackException):
    """Base class for Link header exceptions."""


class LinkHeaderParseError(LinkHeaderError):
    """A ``Link`` header or URL reference could not be parsed.

    Parameters
    ----------
    message
        Human-readable description of the problem.
    fragment
        The portion of the header that could not be parsed.

    Attributes
    ----------
    fragment
        The portion of the header that could not be parsed.
    """

    def __init__(self, message: str, fragment: str) -> None:
        super().__init__(message)
        self.fragment = fragment

    def to_slack(self) -> SlackMessage:
        """Format the exception as a Slack message.

        Adds the unparseable fragment to the generic message.

        Returns
        -------
        SlackMessage
            Slack message suitable for posting with
            `safir.slack.webhook.SlackWebhookClient`.
        """
        message = super().to_slack()
        block = SlackCodeBlock(heading="Fragment", code=self.fragment)
        message.blocks.append(block)
        return message
