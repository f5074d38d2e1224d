"""
OPML subscription list.

Streams ``<outline>`` attributes out of an OPML 2.0 document for feed
lookup by position, name or tag.
"""

from collections.abc import Iterator

from .aliases import OUTLINE_KEYS
from .document import Document
from .errors import ErrorKind, FeedQueryError
from .events import Event, EventType
from .matcher import seek


def parse_tags(category: str | None) -> set[str]:
    """Split a comma-separated ``category`` attribute into a tag set."""
    if not category:
        return set()
    return {tag.strip() for tag in category.split(",") if tag.strip()}


class Outline:
    """OPML outline entry."""

    def __init__(
        self,
        text: str | None,
        xml_url: str | None,
        title: str | None = None,
        html_url: str | None = None,
        tags: set[str] | None = None,
    ):
        """
        Initialize OPML outline entry.

        Args:
            text: Outline ``text`` attribute (required by OPML).
            xml_url: Feed XML URL.
            title: Optional ``title`` attribute.
            html_url: Optional feed website URL.
            tags: Tags from the ``category`` attribute.
        """
        self.text = text
        self.xml_url = xml_url
        self.title = title
        self.html_url = html_url
        self.tags = tags if tags is not None else set()

    @classmethod
    def from_event(cls, event: Event) -> "Outline":
        """Build an outline from its element-start event."""
        return cls(
            text=event.attribute("text"),
            xml_url=event.attribute("xmlUrl"),
            title=event.attribute("title"),
            html_url=event.attribute("htmlUrl"),
            tags=parse_tags(event.attribute("category")),
        )

    @property
    def name(self) -> str:
        """Display name: ``title`` when present, else ``text``."""
        return self.title or self.text or ""

    def __repr__(self) -> str:
        return f"Outline(name={self.name!r}, xml_url={self.xml_url!r})"


class Opml(Document):
    """Read-only view of an OPML 2.0 subscription list."""

    def __init__(self, text: str | bytes):
        """
        Initialize OPML view.

        Subscription lists are short and read on every command, so the
        XML is always checked once here.

        Raises:
            FeedQueryError: PARSE if the OPML is malformed.
        """
        super().__init__(text, check=True)

    def _outline_events(self) -> Iterator[Event]:
        for event in self.events():
            if event.type is EventType.START_ELEMENT and event.name in OUTLINE_KEYS:
                yield event

    def attribute_values(self, attribute: str) -> Iterator[str]:
        """
        Values of ``attribute`` for each outline that carries it.

        For common attributes use ``titles``, ``links_xml`` and friends.
        """
        for event in self._outline_events():
            value = event.attribute(attribute)
            if value is not None:
                yield value

    def optional_attribute_values(self, attribute: str) -> Iterator[str | None]:
        """Value of ``attribute`` for every outline, ``None`` where absent."""
        for event in self._outline_events():
            yield event.attribute(attribute)

    def titles(self) -> Iterator[str]:
        """Outline ``text`` attributes."""
        return self.attribute_values("text")

    def names(self) -> Iterator[str]:
        """Display name of every outline (``title``, falling back to ``text``)."""
        for outline in self.outlines():
            yield outline.name

    def links_xml(self) -> Iterator[str]:
        """Feed URLs; ``xmlUrl`` is required by OPML subscription lists."""
        return self.attribute_values("xmlUrl")

    def links_html(self) -> Iterator[str | None]:
        """Homepage URLs; OPML does not require ``htmlUrl``, so these may be ``None``."""
        return self.optional_attribute_values("htmlUrl")

    def tags(self) -> Iterator[set[str]]:
        """Tag set of every outline, empty where ``category`` is absent."""
        for category in self.optional_attribute_values("category"):
            yield parse_tags(category)

    def outlines(self) -> Iterator[Outline]:
        """Every outline as a record, in document order."""
        for event in self._outline_events():
            yield Outline.from_event(event)

    def outline(self, index: int) -> Outline:
        """
        Outline at 0-based ``index``.

        Raises:
            FeedQueryError: ORDINAL_NOT_REACHED if there are fewer outlines.
        """
        return Outline.from_event(seek(self.events(), OUTLINE_KEYS, index + 1))

    def find(self, key: str) -> str:
        """
        Find the first outline whose name contains ``key``.

        Both ``text`` and ``title`` are searched; document order decides.

        Returns:
            Display name of the matching outline.

        Raises:
            FeedQueryError: KEY_NO_MATCH if no outline matches.
        """
        for outline in self.outlines():
            if any(key in value for value in (outline.text, outline.title) if value):
                return outline.name
        raise FeedQueryError(ErrorKind.KEY_NO_MATCH, f"no feed matches {key!r}")

    def homepage(self, title: str) -> str:
        """
        Homepage URL of the outline named exactly ``title``.

        Raises:
            FeedQueryError: KEY_NO_MATCH if no outline has that ``title`` or
                ``text``; ATTRIBUTE_ABSENT if it has no ``htmlUrl``.
        """
        for outline in self.outlines():
            if title in (outline.title, outline.text):
                if outline.html_url is None:
                    raise FeedQueryError(
                        ErrorKind.ATTRIBUTE_ABSENT,
                        f"feed {title!r} has no 'htmlUrl' attribute",
                    )
                return outline.html_url
        raise FeedQueryError(ErrorKind.KEY_NO_MATCH, f"no feed named {title!r}")
