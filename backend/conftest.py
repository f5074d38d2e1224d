"""Global pytest fixtures for testing."""

import logging
from pathlib import Path

import pytest

from rsst_rss import Feed, Opml

OPML_TEXT = """<?xml version="1.0" encoding="utf-8"?>
<opml version="2.0">
    <head />
    <body>
        <outline
            category="software"
            text="archlinux"
            type="rss"
            htmlUrl="https://archlinux.org"
            xmlUrl="https://archlinux.org/feeds/news/"
        />
        <outline
            category="audio,software"
            text="buildingwithrust"
            type="rss"
            htmlUrl="https://seanchen1991.github.io"
            xmlUrl="https://anchor.fm/s/4928bbdc/podcast/rss"
        />
        <outline
            category="video,leisure,education"
            text="kurzgesagt"
            type="rss"
            htmlUrl="https://www.youtube.com/channel/UCsXVk37bltHxD1rDPwtNM8Q"
            xmlUrl="https://www.youtube.com/feeds/videos.xml?channel_id=UCsXVk37bltHxD1rDPwtNM8Q"
        />
        <outline
            category="software"
            text="neovim"
            type="rss"
            htmlUrl="https://neovim.io"
            xmlUrl="https://neovim.io/news.xml"
        />
        <outline
            category="news"
            text="npr"
            type="rss"
            htmlUrl="https://www.npr.org/"
            xmlUrl="https://feeds.npr.org/1001/rss.xml"
        />
        <outline
            text="nprupfirst"
            type="rss"
            htmlUrl="https://www.npr.org/podcasts/510318/up-first"
            xmlUrl="https://feeds.npr.org/510318/podcast.xml"
        />
        <outline
            category="news"
            text="propublica"
            type="rss"
            htmlUrl="https://www.propublica.org/"
            xmlUrl="http://feeds.propublica.org/propublica/main"
        />
        <outline
            category="news,software"
            text="slashdot"
            type="rss"
            htmlUrl="https://slashdot.org/"
            xmlUrl="http://rss.slashdot.org/Slashdot/slashdotMain"
        />
        <outline
            category="blog"
            text="tykozic.net"
            type="rss"
            xmlUrl="http://tykozic.net/atom.xml"
        />
    </body>
</opml>
"""

OPML_NAMES = [
    "archlinux",
    "buildingwithrust",
    "kurzgesagt",
    "neovim",
    "npr",
    "nprupfirst",
    "propublica",
    "slashdot",
    "tykozic.net",
]

ATOM_TEXT = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">

    <title>Example Feed</title>
    <link href="http://example.org/"/>
    <updated>2003-12-13T18:30:02Z</updated>
    <author>
        <name>John Doe</name>
    </author>
    <id>urn:uuid:60a76c80-d399-11d9-b93C-0003939e0af6</id>

    <entry>
        <title>Atom-Powered Robots Run Amok</title>
        <link href="http://example.org/2003/12/13/atom03"/>
        <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
        <updated>2003-12-13T18:30:02Z</updated>
        <summary>Some text.</summary>
    </entry>

    <entry>
        <title>Ty's homegrown sample entry</title>
        <link href="http://tykozic.net" />
        <id>http://tykozic.net/posts/rss-part-1</id>
        <updated>2021-08-06T15:32:35-05:00</updated>
        <content type="html">yee</content>
    </entry>

</feed>
"""

RSS_TEXT = """<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0" xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Liftoff News</title>
    <link>http://liftoff.msfc.nasa.gov/</link>
    <description>Liftoff to Space Exploration.</description>
    <pubDate>Tue, 10 Jun 2003 04:00:00 GMT</pubDate>
    <item>
      <title>Star City</title>
      <link>http://liftoff.msfc.nasa.gov/news/2003/news-starcity.asp</link>
      <description>How do Americans get ready to work with Russians aboard the International Space Station?</description>
      <pubDate>Tue, 03 Jun 2003 09:39:21 GMT</pubDate>
    </item>
    <item>
      <title>Episode 12: Sky watch</title>
      <link>http://example.com/episodes/12</link>
      <description><![CDATA[<p>Looking <b>up</b>.</p>]]></description>
      <enclosure url="http://example.com/audio/12.mp3" length="1234" type="audio/mpeg"/>
      <pubDate>Sun, 9 May 2002 15:21:36 GMT</pubDate>
    </item>
    <item>
      <title>Undated note</title>
      <description>No date here.</description>
    </item>
    <item>
      <title>The Engine That Does More</title>
      <link>http://liftoff.msfc.nasa.gov/news/2003/news-VASIMR.asp</link>
      <description>Before man travels to Mars, NASA hopes to design new engines.</description>
      <dc:date>2003-05-27T08:37:32Z</dc:date>
    </item>
  </channel>
</rss>
"""


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by init_logging so they do not outlive captured streams."""
    yield
    root = logging.getLogger("rsst")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def opml_text() -> str:
    """Subscription list with nine outlines."""
    return OPML_TEXT


@pytest.fixture
def atom_text() -> str:
    """Atom feed with two entries."""
    return ATOM_TEXT


@pytest.fixture
def rss_text() -> str:
    """RSS 2.0 feed with four items, one undated and one with an enclosure."""
    return RSS_TEXT


@pytest.fixture
def opml() -> Opml:
    return Opml(OPML_TEXT)


@pytest.fixture
def atom_feed() -> Feed:
    return Feed(ATOM_TEXT, check=True)


@pytest.fixture
def rss_feed() -> Feed:
    return Feed(RSS_TEXT, check=True)


@pytest.fixture
def opml_names() -> list[str]:
    return list(OPML_NAMES)


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Feed cache holding the RSS sample as "npr" and the Atom sample as "tykozic.net"."""
    directory = tmp_path / "cache"
    directory.mkdir()
    (directory / "npr").write_text(RSS_TEXT, encoding="utf-8")
    (directory / "tykozic.net").write_text(ATOM_TEXT, encoding="utf-8")
    return directory


@pytest.fixture
def opml_path(tmp_path: Path) -> Path:
    path = tmp_path / "opml.xml"
    path.write_text(OPML_TEXT, encoding="utf-8")
    return path
