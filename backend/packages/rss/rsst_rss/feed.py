"""
RSS 2.0 / Atom feed view.

Answers entry queries against a cached feed body by streaming over it,
treating both vocabularies through the alias sets in ``aliases``.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from .aliases import CONTENT_KEYS, DATE_KEYS, ENTRY_KEYS, TITLE_KEYS
from .dates import normalize_date
from .document import Document
from .links import enclosure_links, entry_links, resolve_link
from .locator import entry_field, entry_records, field_values
from .matcher import seek


@dataclass(frozen=True, slots=True)
class FeedEntry:
    """Title and date of one entry, read in a single scan."""

    index: int
    title: str | None
    raw_date: str | None

    @property
    def date(self) -> str | None:
        """Normalized ``YYYY-MM-DD`` date, if the entry has one."""
        if self.raw_date is None:
            return None
        return normalize_date(self.raw_date)


class Feed(Document):
    """
    Read-only view of one RSS 2.0 or Atom feed.

    Sequence methods (``titles``, ``dates`` ...) yield one value per entry
    that has the field, in document order. Lookup methods (``entry_title``
    ...) take a 0-based entry index and fail instead of skipping.
    """

    def __init__(self, text: str | bytes, *, check: bool = False):
        """
        Initialize feed view.

        Args:
            text: Feed XML.
            check: Validate the XML once up front. Off by default since a
                full extra scan of a large feed is not free.
        """
        super().__init__(text, check=check)

    # Sequences

    def titles(self) -> Iterator[str]:
        """Entry titles."""
        return field_values(self.events(), TITLE_KEYS)

    def raw_dates(self) -> Iterator[str]:
        """Entry dates as written in the feed."""
        return field_values(self.events(), DATE_KEYS)

    def dates(self) -> Iterator[str]:
        """
        Entry dates as ``YYYY-MM-DD``.

        A date that cannot be normalized raises MALFORMED_DATE and ends the
        sequence; dates of later entries are not yielded. Use ``entries()``
        to read every entry regardless.
        """
        return (normalize_date(date) for date in self.raw_dates())

    def contents(self) -> Iterator[str]:
        """Main content or description of each entry."""
        return field_values(self.events(), CONTENT_KEYS)

    def links(self) -> Iterator[str]:
        """Entry links, ignoring enclosures."""
        return entry_links(self.events())

    def enclosure_links(self) -> Iterator[str]:
        """URLs of all enclosures in the feed."""
        return enclosure_links(self.events())

    def entries(self) -> Iterator[FeedEntry]:
        """Title and date of every entry, one record per entry."""
        records = entry_records(self.events(), {"title": TITLE_KEYS, "date": DATE_KEYS})
        for index, record in enumerate(records):
            yield FeedEntry(index=index, title=record["title"], raw_date=record["date"])

    # Lookups

    def entry_title(self, index: int) -> str:
        """Title of the entry at ``index``."""
        return entry_field(self.events(), index + 1, TITLE_KEYS)

    def entry_date(self, index: int) -> str:
        """Normalized date of the entry at ``index``."""
        return normalize_date(entry_field(self.events(), index + 1, DATE_KEYS))

    def entry_content(self, index: int) -> str:
        """Main content of the entry at ``index``."""
        return entry_field(self.events(), index + 1, CONTENT_KEYS)

    def entry_link(self, index: int) -> str:
        """Link of the entry at ``index``; an enclosure URL takes priority."""
        events = self.events()
        seek(events, ENTRY_KEYS, index + 1)
        return resolve_link(events)

    def latest_date(self) -> str:
        """
        Date of the first entry.

        Feeds list newest entries first, so this is what the feed was
        last updated with.
        """
        return self.entry_date(0)
