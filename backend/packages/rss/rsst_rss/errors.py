"""
Query error taxonomy.

Every failure of a feed or OPML query is raised as ``FeedQueryError``
tagged with exactly one ``ErrorKind``.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of query failure kinds."""

    # Malformed XML reported by the event source
    PARSE = "parse"
    # Fewer matching elements than the requested ordinal; also the end marker of "list all" loops
    ORDINAL_NOT_REACHED = "ordinal_not_reached"
    # Matched element lacks the requested attribute
    ATTRIBUTE_ABSENT = "attribute_absent"
    # No text followed the matched element, or the entry has no such field
    FIELD_ABSENT = "field_absent"
    MALFORMED_DATE = "malformed_date"
    # Substring search over outline names found nothing
    KEY_NO_MATCH = "key_no_match"


class FeedQueryError(ValueError):
    """
    A feed or OPML query failed.

    Callers branch on ``kind``; the message is for humans only.
    """

    def __init__(self, kind: ErrorKind, message: str):
        """
        Initialize query error.

        Args:
            kind: Failure kind.
            message: Human-readable description.
        """
        super().__init__(message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"FeedQueryError({self.kind.value!r}, {str(self)!r})"
