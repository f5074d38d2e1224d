"""
XML event source.

Turns a feed or OPML buffer into a forward-only stream of parse events
using lxml's incremental (push) parser with a parser target, so no
element tree is ever built.
"""

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from lxml import etree

# Bytes handed to the push parser per feed() call
CHUNK_SIZE = 16 * 1024


class EventType(str, Enum):
    """Parse event enumeration."""

    START_DOCUMENT = "start_document"
    END_DOCUMENT = "end_document"
    START_ELEMENT = "start_element"
    END_ELEMENT = "end_element"
    TEXT = "text"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Event:
    """
    One parse event.

    ``name`` and ``attributes`` are set for element events, ``text`` for
    text events and ``text`` carries the parser message for error events.
    Names are local names; namespace URIs and prefixes are dropped.
    """

    type: EventType
    name: str = ""
    attributes: tuple[tuple[str, str], ...] = ()
    text: str = ""

    def attribute(self, name: str) -> str | None:
        """Return the first attribute named ``name``, in document order."""
        for key, value in self.attributes:
            if key == name:
                return value
        return None


def local_name(tag: str) -> str:
    """Strip a ``{uri}`` or ``prefix:`` qualifier from a tag or attribute name."""
    return tag.rpartition("}")[2].rpartition(":")[2]


class _EventCollector:
    """lxml parser target that queues events as the push parser produces them."""

    def __init__(self) -> None:
        self.events: deque[Event] = deque()
        self._text: list[str] = []

    def start(self, tag: str, attrib) -> None:
        self._flush_text()
        attributes = tuple((local_name(key), value) for key, value in attrib.items())
        self.events.append(Event(EventType.START_ELEMENT, name=local_name(tag), attributes=attributes))

    def end(self, tag: str) -> None:
        self._flush_text()
        self.events.append(Event(EventType.END_ELEMENT, name=local_name(tag)))

    def data(self, data: str) -> None:
        # lxml may split one run of character data (entities, CDATA, chunk
        # boundaries); join it back into a single text event.
        self._text.append(data)

    def close(self) -> None:
        self._flush_text()

    def _flush_text(self) -> None:
        if not self._text:
            return
        text = "".join(self._text)
        self._text.clear()
        if text.strip():
            self.events.append(Event(EventType.TEXT, text=text))


def _drain(collector: _EventCollector) -> Iterator[Event]:
    while collector.events:
        yield collector.events.popleft()


def iter_events(source: str | bytes, chunk_size: int = CHUNK_SIZE) -> Iterator[Event]:
    """
    Iterate over the parse events of an XML buffer.

    A ``str`` source is parsed as UTF-8 whatever its XML declaration says;
    a ``bytes`` source is decoded as declared. The stream always begins with
    START_DOCUMENT and ends with either END_DOCUMENT or a single ERROR event.

    Args:
        source: Document text.
        chunk_size: Bytes fed to the parser at a time.

    Yields:
        Parse events in document order.
    """
    if isinstance(source, str):
        data = source.lstrip().encode("utf-8")
        encoding = "utf-8"
    else:
        data = source.lstrip()
        encoding = None

    collector = _EventCollector()
    parser = etree.XMLParser(
        target=collector,
        encoding=encoding,
        resolve_entities=False,
        load_dtd=False,
        no_network=True,
        huge_tree=True,
    )

    yield Event(EventType.START_DOCUMENT)
    if not data:
        yield Event(EventType.ERROR, text="document is empty")
        return
    try:
        for offset in range(0, len(data), chunk_size):
            parser.feed(data[offset : offset + chunk_size])
            yield from _drain(collector)
        parser.close()
    except etree.ParseError as e:
        yield from _drain(collector)
        yield Event(EventType.ERROR, text=str(e) or "malformed XML")
        return
    yield from _drain(collector)
    yield Event(EventType.END_DOCUMENT)
