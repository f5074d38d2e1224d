"""
On-disk feed cache.

One file per subscription, named after the feed's display name, holding
the body fetched by the last ``rsst update``.
"""

from pathlib import Path

from rsst_core import get_logger

logger = get_logger(__name__)


class CacheMissError(FileNotFoundError):
    """The requested feed has never been fetched."""


class FeedCache:
    """Feed bodies stored under a cache directory."""

    def __init__(self, cache_dir: Path):
        """
        Initialize feed cache.

        Args:
            cache_dir: Directory holding cached feeds.
        """
        self.cache_dir = Path(cache_dir)

    def path_for(self, name: str) -> Path:
        """
        Cache file path of a feed.

        Path separators in the name are replaced so that every feed maps
        to a file directly inside the cache directory.

        Raises:
            ValueError: If the name cannot be used as a file name.
        """
        file_name = name.replace("/", "_").replace("\\", "_").strip()
        if file_name in ("", ".", ".."):
            raise ValueError(f"Feed name {name!r} is not usable as a cache file name")
        return self.cache_dir / file_name

    def read(self, name: str) -> bytes:
        """
        Read a cached feed body.

        The body is returned as stored so the XML parser can honour the
        encoding declared by the feed.

        Raises:
            CacheMissError: If the feed has not been fetched yet.
        """
        path = self.path_for(name)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise CacheMissError(f"Feed {name!r} is not cached; run 'rsst update' first") from e

    def write(self, name: str, body: bytes) -> Path:
        """Store a feed body, replacing any previous copy."""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(name)
        path.write_bytes(body)
        logger.info("Cached feed", extra={"feed": name, "path": str(path)})
        return path
