"""Tests for the entry-scoped field locator."""

import pytest

from rsst_rss.aliases import CONTENT_KEYS, DATE_KEYS, TITLE_KEYS
from rsst_rss.errors import ErrorKind, FeedQueryError
from rsst_rss.events import iter_events
from rsst_rss.locator import entry_field, entry_records, field_values


def test_channel_level_fields_are_not_emitted(rss_text: str) -> None:
    titles = list(field_values(iter_events(rss_text), TITLE_KEYS))
    assert "Liftoff News" not in titles
    assert titles[0] == "Star City"


def test_atom_dates_in_document_order(atom_text: str) -> None:
    dates = list(field_values(iter_events(atom_text), DATE_KEYS))
    assert dates == ["2003-12-13T18:30:02Z", "2021-08-06T15:32:35-05:00"]


def test_missing_field_leaves_gap(rss_text: str) -> None:
    dates = list(field_values(iter_events(rss_text), DATE_KEYS))
    assert dates == [
        "Tue, 03 Jun 2003 09:39:21 GMT",
        "Sun, 9 May 2002 15:21:36 GMT",
        "2003-05-27T08:37:32Z",
    ]


def test_only_first_field_per_entry_is_captured() -> None:
    doc = "<feed><entry><published>P</published><updated>U</updated></entry></feed>"
    assert list(field_values(iter_events(doc), DATE_KEYS)) == ["P"]


def test_empty_field_does_not_capture_later_text() -> None:
    doc = "<rss><item><title/><link>http://x</link></item><item><title>B</title></item></rss>"
    assert list(field_values(iter_events(doc), TITLE_KEYS)) == ["B"]


def test_cdata_content(rss_text: str) -> None:
    contents = list(field_values(iter_events(rss_text), CONTENT_KEYS))
    assert contents[1] == "<p>Looking <b>up</b>.</p>"
    assert len(contents) == 4


def test_parse_error_after_values_raises() -> None:
    doc = "<rss><item><title>A</title></item><item><title>B</title></item><oops></rss>"
    values = []
    with pytest.raises(FeedQueryError) as exc_info:
        for value in field_values(iter_events(doc), TITLE_KEYS):
            values.append(value)
    assert exc_info.value.kind is ErrorKind.PARSE
    assert values == ["A", "B"]


def test_entry_records_pair_fields_per_entry(rss_text: str) -> None:
    records = list(entry_records(iter_events(rss_text), {"title": TITLE_KEYS, "date": DATE_KEYS}))
    assert len(records) == 4
    assert records[2] == {"title": "Undated note", "date": None}
    assert records[3] == {"title": "The Engine That Does More", "date": "2003-05-27T08:37:32Z"}


def test_entry_records_without_entries_is_empty() -> None:
    assert list(entry_records(iter_events("<rss><channel/></rss>"), {"title": TITLE_KEYS})) == []


def test_entry_field_lookup(rss_text: str) -> None:
    assert entry_field(iter_events(rss_text), 4, TITLE_KEYS) == "The Engine That Does More"


def test_entry_field_missing_in_entry_does_not_read_next_entry(rss_text: str) -> None:
    with pytest.raises(FeedQueryError) as exc_info:
        entry_field(iter_events(rss_text), 3, DATE_KEYS)
    assert exc_info.value.kind is ErrorKind.FIELD_ABSENT


def test_entry_field_past_last_entry(rss_text: str) -> None:
    with pytest.raises(FeedQueryError) as exc_info:
        entry_field(iter_events(rss_text), 5, TITLE_KEYS)
    assert exc_info.value.kind is ErrorKind.ORDINAL_NOT_REACHED
