"""
Entry-scoped field locator.

Walks a feed's event stream once and yields, per entry, the first
occurrence of a logical field (title, date, content). An entry scope
starts at an ``<entry>``/``<item>`` element and lasts until the next one
or the end of the document. Fields that appear before the first entry
(channel or feed metadata) are never reported, and entries that lack
the field leave a gap instead of failing the scan.
"""

from collections.abc import Iterator, Mapping, Sequence

from .aliases import ENTRY_KEYS
from .errors import ErrorKind, FeedQueryError
from .events import Event, EventType
from .matcher import seek, seek_text


def field_values(
    events: Iterator[Event],
    aliases: Sequence[str],
    entry_aliases: Sequence[str] = ENTRY_KEYS,
) -> Iterator[str]:
    """
    Yield the text of each entry's first field named in ``aliases``.

    The returned iterator is lazy and cannot be restarted; scan again
    with a fresh event stream to iterate twice.

    Raises:
        FeedQueryError: PARSE when malformed XML is reached. Values yielded
            before the error stand.
    """
    entered = False
    captured = False
    armed = False

    for event in events:
        if event.type is EventType.START_ELEMENT:
            # Anything opening before the armed field's text means it had none
            armed = False
            if event.name in entry_aliases:
                entered = True
                captured = False
            elif entered and not captured and event.name in aliases:
                armed = True
                captured = True
        elif event.type is EventType.TEXT:
            if armed:
                armed = False
                yield event.text
        elif event.type is EventType.END_ELEMENT:
            armed = False
        elif event.type is EventType.ERROR:
            raise FeedQueryError(ErrorKind.PARSE, event.text)


def entry_records(
    events: Iterator[Event],
    fields: Mapping[str, Sequence[str]],
    entry_aliases: Sequence[str] = ENTRY_KEYS,
) -> Iterator[dict[str, str | None]]:
    """
    Yield one record per entry holding several fields from a single scan.

    Args:
        events: Event stream, consumed in place.
        fields: Record key to alias set, e.g. ``{"title": TITLE_KEYS}``.
        entry_aliases: Tag names that open an entry scope.

    Yields:
        Dicts with every key of ``fields``; missing fields are ``None``.
    """
    record: dict[str, str | None] | None = None
    taken: set[str] = set()
    armed: str | None = None

    for event in events:
        if event.type is EventType.START_ELEMENT:
            armed = None
            if event.name in entry_aliases:
                if record is not None:
                    yield record
                record = dict.fromkeys(fields)
                taken = set()
            elif record is not None:
                for key, aliases in fields.items():
                    if event.name in aliases and key not in taken:
                        armed = key
                        taken.add(key)
                        break
        elif event.type is EventType.TEXT:
            if armed is not None and record is not None:
                record[armed] = event.text
                armed = None
        elif event.type is EventType.END_ELEMENT:
            armed = None
        elif event.type is EventType.ERROR:
            raise FeedQueryError(ErrorKind.PARSE, event.text)

    if record is not None:
        yield record


def entry_field(
    events: Iterator[Event],
    count: int,
    aliases: Sequence[str],
    entry_aliases: Sequence[str] = ENTRY_KEYS,
) -> str:
    """
    Return the text of one entry's first field named in ``aliases``.

    Args:
        events: Event stream, consumed in place.
        count: 1-based ordinal of the entry.
        aliases: Field tag names.
        entry_aliases: Tag names that open an entry scope.

    Raises:
        FeedQueryError: ORDINAL_NOT_REACHED if the feed has fewer entries;
            FIELD_ABSENT if the entry has no such field or it is empty.
    """
    seek(events, entry_aliases, count)
    return seek_text(events, aliases, boundary=entry_aliases)
