"""
RSS processing package.

Provides streaming RSS/Atom entry queries, OPML subscription lookups,
date normalization and feed fetching.
"""

from .dates import normalize_date
from .document import Document
from .errors import ErrorKind, FeedQueryError
from .feed import Feed, FeedEntry
from .fetcher import FeedFetchError, create_client, fetch_feed
from .opml import Opml, Outline

__all__ = [
    "Feed",
    "FeedEntry",
    "Opml",
    "Outline",
    "Document",
    "normalize_date",
    "ErrorKind",
    "FeedQueryError",
    "fetch_feed",
    "create_client",
    "FeedFetchError",
]
