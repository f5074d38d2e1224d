"""CLI for querying cached RSS/Atom feeds listed in an OPML file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rsst_core import get_logger, init_logging
from rsst_core.config import Settings, get_settings
from rsst_rss import FeedQueryError, Opml, create_client

from .cache import CacheMissError, FeedCache
from .commands import Commands, describe_error

logger = get_logger(__name__)


def _index(value: str) -> int:
    """Parse a 0-based feed or entry index argument."""
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"index must be an integer, got {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError("index must not be negative")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rsst",
        description="Query cached RSS/Atom feeds listed in an OPML subscription list.",
    )
    parser.add_argument("--opml", type=Path, default=None, help="OPML subscription list (default: from settings).")
    parser.add_argument("--cache-dir", type=Path, default=None, help="Feed cache directory (default: from settings).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    list_parser = subparsers.add_parser("list", help="List feeds, or the entries of one feed.")
    list_parser.add_argument("feed", type=_index, nargs="?", help="Feed index.")
    list_parser.add_argument("--tag", default=None, help="Only list feeds with this tag.")

    content_parser = subparsers.add_parser("content", help="Print the content of an entry.")
    content_parser.add_argument("feed", type=_index, help="Feed index.")
    content_parser.add_argument("entry", type=_index, help="Entry index.")

    link_parser = subparsers.add_parser("link", help="Print a feed homepage or an entry link.")
    link_parser.add_argument("feed", type=_index, help="Feed index.")
    link_parser.add_argument("entry", type=_index, nargs="?", help="Entry index.")

    find_parser = subparsers.add_parser("find", help="Find a feed by part of its name.")
    find_parser.add_argument("key", help="Substring of the feed name.")

    subparsers.add_parser("update", help="Fetch every feed into the cache.")
    return parser


def run(args: argparse.Namespace, settings: Settings) -> int:
    opml_path = args.opml or settings.opml_path
    cache = FeedCache(args.cache_dir or settings.cache_dir)
    opml = Opml(opml_path.read_bytes())
    commands = Commands(opml, cache)

    if args.command == "list":
        if args.feed is None:
            return commands.list_feeds(tag=args.tag)
        return commands.list_entries(args.feed)
    if args.command == "content":
        return commands.content(args.feed, args.entry)
    if args.command == "link":
        return commands.link(args.feed, args.entry)
    if args.command == "find":
        return commands.find(args.key)
    if args.command == "update":
        with create_client(timeout=settings.request_timeout, user_agent=settings.user_agent) as client:
            return commands.update(client)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    init_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        return run(args, settings)
    except FeedQueryError as e:
        logger.debug("Query failed", exc_info=True)
        print(f"Error: {describe_error(e)}", file=sys.stderr)
    except (CacheMissError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
