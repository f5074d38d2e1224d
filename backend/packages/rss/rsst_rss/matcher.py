"""
Ordinal tag matcher.

Advances an event stream to the K-th element whose local name belongs to
an alias set. All functions consume the iterator they are given in place,
so they can be chained: seek an entry, then seek a field inside it, then
read its text.

Attribute policy: a requested attribute missing from the matched element
is always an ATTRIBUTE_ABSENT failure. Callers that accept text instead
check ``Event.attribute`` themselves and then call ``read_text``.
"""

from collections.abc import Iterator, Sequence

from .errors import ErrorKind, FeedQueryError
from .events import Event, EventType


def _describe(aliases: Sequence[str]) -> str:
    return "/".join(f"<{name}>" for name in aliases)


def seek(
    events: Iterator[Event],
    aliases: Sequence[str],
    count: int = 1,
    *,
    boundary: Sequence[str] | None = None,
) -> Event:
    """
    Advance to the ``count``-th element-start named in ``aliases``.

    Args:
        events: Event stream, consumed in place.
        aliases: Tag names treated as the same element.
        count: 1-based ordinal of the match to stop at.
        boundary: Optional tag names that end the search scope, e.g. the
            entry aliases when looking for a field inside one entry.

    Returns:
        The matched element-start event. The stream is positioned right
        after it.

    Raises:
        FeedQueryError: PARSE on malformed XML; ORDINAL_NOT_REACHED when the
            document ends first; FIELD_ABSENT when a boundary element or
            the document end closes the scope first.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    seen = 0
    for event in events:
        if event.type is EventType.START_ELEMENT:
            if event.name in aliases:
                seen += 1
                if seen == count:
                    return event
            elif boundary is not None and event.name in boundary:
                raise FeedQueryError(
                    ErrorKind.FIELD_ABSENT,
                    f"{_describe(aliases)} not found before next {_describe(boundary)}",
                )
        elif event.type is EventType.ERROR:
            raise FeedQueryError(ErrorKind.PARSE, event.text)
        elif event.type is EventType.END_DOCUMENT:
            break

    if boundary is not None:
        raise FeedQueryError(
            ErrorKind.FIELD_ABSENT,
            f"{_describe(aliases)} not found before end of document",
        )
    raise FeedQueryError(
        ErrorKind.ORDINAL_NOT_REACHED,
        f"requested {_describe(aliases)} #{count}, document has {seen}",
    )


def seek_attribute(
    events: Iterator[Event],
    aliases: Sequence[str],
    attribute: str,
    count: int = 1,
    *,
    boundary: Sequence[str] | None = None,
) -> str:
    """
    Return an attribute of the ``count``-th element named in ``aliases``.

    Raises:
        FeedQueryError: As ``seek``, plus ATTRIBUTE_ABSENT when the matched
            element does not carry ``attribute``.
    """
    event = seek(events, aliases, count, boundary=boundary)
    value = event.attribute(attribute)
    if value is None:
        raise FeedQueryError(
            ErrorKind.ATTRIBUTE_ABSENT,
            f"<{event.name}> #{count} has no {attribute!r} attribute",
        )
    return value


def read_text(events: Iterator[Event]) -> str:
    """
    Read the payload of the element just matched.

    Consumes exactly one event.

    Raises:
        FeedQueryError: PARSE on malformed XML; FIELD_ABSENT if the next
            event is not text (empty or self-closing element).
    """
    event = next(events, None)
    if event is None or event.type is EventType.END_DOCUMENT:
        raise FeedQueryError(ErrorKind.FIELD_ABSENT, "document ended before element text")
    if event.type is EventType.ERROR:
        raise FeedQueryError(ErrorKind.PARSE, event.text)
    if event.type is not EventType.TEXT:
        raise FeedQueryError(ErrorKind.FIELD_ABSENT, "element has no text")
    return event.text


def seek_text(
    events: Iterator[Event],
    aliases: Sequence[str],
    count: int = 1,
    *,
    boundary: Sequence[str] | None = None,
) -> str:
    """Return the text of the ``count``-th element named in ``aliases``."""
    seek(events, aliases, count, boundary=boundary)
    return read_text(events)
