"""Immutable XML buffer shared by the feed and OPML views."""

from collections.abc import Iterator

from .errors import ErrorKind, FeedQueryError
from .events import Event, EventType, iter_events


class Document:
    """
    Read-only view over one XML buffer.

    No tree is kept: every query runs a fresh forward scan from
    ``events()``, so two sequences from the same document never share
    state and each can be consumed only once.
    """

    def __init__(self, text: str | bytes, *, check: bool = False):
        """
        Initialize document.

        Args:
            text: Document contents.
            check: Scan the whole buffer once now and fail on malformed XML.

        Raises:
            FeedQueryError: PARSE if ``check`` is set and the XML is malformed.
        """
        self._text = text
        if check:
            self.check()

    @property
    def text(self) -> str | bytes:
        """Underlying buffer."""
        return self._text

    def events(self) -> Iterator[Event]:
        """Start a new forward scan over the buffer."""
        return iter_events(self._text)

    def check(self) -> None:
        """
        Verify that the buffer is well-formed XML.

        Raises:
            FeedQueryError: PARSE with the parser's message.
        """
        for event in self.events():
            if event.type is EventType.ERROR:
                raise FeedQueryError(ErrorKind.PARSE, event.text)
