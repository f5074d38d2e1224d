"""
Command implementations.

Each command loads what it needs from the subscription list and the feed
cache, queries it through the rsst_rss views and prints tab-separated
results. Commands return a process exit status; query failures on the
requested feed or entry propagate to the caller.
"""

import sys
from typing import TextIO

import httpx

from rsst_core import get_logger
from rsst_rss import ErrorKind, Feed, FeedQueryError, Opml, fetch_feed

from .cache import CacheMissError, FeedCache

logger = get_logger(__name__)

# Printed in the date column when a cached date cannot be normalized
UNKNOWN_DATE = "????-??-??"


class Commands:
    """rsst commands bound to one subscription list and cache."""

    def __init__(
        self,
        opml: Opml,
        cache: FeedCache,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        """
        Initialize commands.

        Args:
            opml: Subscription list.
            cache: Feed cache.
            out: Stream for results (stdout by default).
            err: Stream for per-item errors (stderr by default).
        """
        self.opml = opml
        self.cache = cache
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def _print(self, *values: object) -> None:
        print(*values, sep="\t", file=self.out)

    def _feed(self, feed_index: int) -> tuple[str, Feed]:
        name = self.opml.outline(feed_index).name
        return name, Feed(self.cache.read(name))

    def list_feeds(self, tag: str | None = None) -> int:
        """
        List every subscription with the date its cached feed was last updated.

        Args:
            tag: Only list outlines carrying this tag.
        """
        self._print("Feed", "Updated", "Title")
        for index, outline in enumerate(self.opml.outlines()):
            if tag is not None and tag not in outline.tags:
                continue
            try:
                date = Feed(self.cache.read(outline.name)).latest_date()
            except (ValueError, CacheMissError) as e:
                logger.debug(
                    "Could not list feed",
                    extra={"index": index, "feed": outline.name, "error": str(e)},
                )
                print(f"\tError listing feed ({index}): {e}", file=self.err)
                continue
            self._print(index, date, outline.name)
        return 0

    def list_entries(self, feed_index: int) -> int:
        """List index, date and title of every entry of one feed."""
        name, feed = self._feed(feed_index)
        print(f"({feed_index}) {name}", file=self.out)
        self._print("Entry", "Date", "Title")

        # An entry is listed only once both its title and date are known
        index = 0
        for entry in feed.entries():
            if entry.title is None or entry.raw_date is None:
                continue
            try:
                date = entry.date
            except FeedQueryError as e:
                logger.warning(
                    "Unreadable entry date",
                    extra={"feed": name, "entry": entry.index, "error": str(e)},
                )
                date = UNKNOWN_DATE
            self._print(index, date, entry.title.strip())
            index += 1
        return 0

    def content(self, feed_index: int, entry_index: int) -> int:
        """Print the main content of one entry."""
        _, feed = self._feed(feed_index)
        print(feed.entry_content(entry_index), file=self.out)
        return 0

    def link(self, feed_index: int, entry_index: int | None = None) -> int:
        """Print a feed's homepage, or an entry's link when an entry index is given."""
        if entry_index is None:
            name = self.opml.outline(feed_index).name
            print(self.opml.homepage(name), file=self.out)
            return 0
        _, feed = self._feed(feed_index)
        print(feed.entry_link(entry_index), file=self.out)
        return 0

    def find(self, key: str) -> int:
        """Print index and name of the first feed whose name contains ``key``."""
        name = self.opml.find(key)
        for index, outline in enumerate(self.opml.outlines()):
            if outline.name == name:
                self._print(index, name)
                break
        return 0

    def update(self, client: httpx.Client) -> int:
        """
        Fetch every subscription into the cache.

        Feeds are fetched one after another; a failed feed is reported and
        skipped.

        Returns:
            0 if every feed was updated, 1 otherwise.
        """
        failures = 0
        for index, outline in enumerate(self.opml.outlines()):
            if not outline.xml_url:
                logger.warning(
                    "Outline has no xmlUrl, skipped",
                    extra={"index": index, "feed": outline.name},
                )
                continue
            print(f"Updating ({index}) {outline.name}", file=self.out)
            try:
                body = fetch_feed(outline.xml_url, client)
                self.cache.write(outline.name, body)
            except (ValueError, OSError) as e:
                failures += 1
                logger.debug(
                    "Failed updating feed",
                    extra={"feed": outline.name, "url": outline.xml_url, "error": str(e)},
                )
                print(f"\tFailed updating {outline.name}: {e}", file=self.err)
        return 1 if failures else 0


def describe_error(error: FeedQueryError) -> str:
    """User-facing message for a failed query."""
    if error.kind is ErrorKind.ORDINAL_NOT_REACHED:
        return f"not found: {error}"
    if error.kind is ErrorKind.PARSE:
        return f"malformed XML: {error}"
    return str(error)
