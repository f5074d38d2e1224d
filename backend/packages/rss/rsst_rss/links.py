"""
Entry link and enclosure resolution.

RSS carries the entry link as ``<link>`` text, Atom as ``<link href>``, and
podcasts add an ``<enclosure url>`` for the media file. When an entry has an
enclosure its URL is the link that matters.
"""

from collections.abc import Iterator, Sequence

from .aliases import ENCLOSURE_KEYS, ENTRY_KEYS, LINK_KEYS
from .errors import ErrorKind, FeedQueryError
from .events import Event, EventType


def resolve_link(
    events: Iterator[Event],
    entry_aliases: Sequence[str] = ENTRY_KEYS,
) -> str:
    """
    Resolve the URL of the entry whose start the stream was just advanced past.

    Priority:
    1. ``url`` of the first ``<enclosure>``; scanning stops there.
    2. ``href`` of the first ``<link>``, else that element's text.

    Raises:
        FeedQueryError: FIELD_ABSENT if the entry ends with neither element
            or its link is empty; ATTRIBUTE_ABSENT for an enclosure
            without ``url``; PARSE on malformed XML.
    """
    link: str | None = None
    seen_link = False
    armed = False

    for event in events:
        if event.type is EventType.START_ELEMENT:
            armed = False
            if event.name in ENCLOSURE_KEYS:
                url = event.attribute("url")
                if url is None:
                    raise FeedQueryError(ErrorKind.ATTRIBUTE_ABSENT, "<enclosure> has no 'url' attribute")
                return url
            if event.name in entry_aliases:
                break
            if event.name in LINK_KEYS and not seen_link:
                seen_link = True
                link = event.attribute("href")
                armed = link is None
        elif event.type is EventType.TEXT:
            if armed:
                link = event.text.strip()
                armed = False
        elif event.type is EventType.END_ELEMENT:
            armed = False
        elif event.type is EventType.ERROR:
            raise FeedQueryError(ErrorKind.PARSE, event.text)
        elif event.type is EventType.END_DOCUMENT:
            break

    if link is None:
        raise FeedQueryError(ErrorKind.FIELD_ABSENT, "entry has no <link> or <enclosure>")
    if not link:
        raise FeedQueryError(ErrorKind.FIELD_ABSENT, "entry <link> is empty")
    return link


def entry_links(
    events: Iterator[Event],
    entry_aliases: Sequence[str] = ENTRY_KEYS,
) -> Iterator[str]:
    """
    Yield each entry's first ``<link>``: its ``href``, else its text.

    Enclosures are ignored; entries without a link leave a gap.
    """
    entered = False
    armed = False

    for event in events:
        if event.type is EventType.START_ELEMENT:
            armed = False
            if event.name in entry_aliases:
                entered = True
            elif entered and event.name in LINK_KEYS:
                entered = False
                href = event.attribute("href")
                if href is not None:
                    yield href
                else:
                    armed = True
        elif event.type is EventType.TEXT:
            if armed:
                armed = False
                yield event.text.strip()
        elif event.type is EventType.END_ELEMENT:
            armed = False
        elif event.type is EventType.ERROR:
            raise FeedQueryError(ErrorKind.PARSE, event.text)


def enclosure_links(events: Iterator[Event]) -> Iterator[str]:
    """Yield the ``url`` of every ``<enclosure>`` in document order."""
    for event in events:
        if event.type is EventType.START_ELEMENT and event.name in ENCLOSURE_KEYS:
            url = event.attribute("url")
            if url is not None:
                yield url
        elif event.type is EventType.ERROR:
            raise FeedQueryError(ErrorKind.PARSE, event.text)
