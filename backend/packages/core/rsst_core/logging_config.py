"""
Logging configuration.

All rsst modules obtain their logger through ``get_logger(__name__)`` so
that a single ``init_logging`` call configures the whole process.
"""

import logging
import sys

_ROOT_LOGGER_NAME = "rsst"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRIBUTES = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Formatter that appends fields passed via ``extra`` as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        }
        if not extras:
            return message
        fields = " ".join(f"{key}={value}" for key, value in extras.items())
        # Keep tracebacks last
        head, sep, tail = message.partition("\n")
        return f"{head} [{fields}]{sep}{tail}"


def init_logging(level: str | int = "WARNING") -> logging.Logger:
    """
    Configure process-wide logging.

    Log records go to stderr so that command output on stdout stays
    machine-readable. Calling this again replaces the previous handler.

    Args:
        level: Level name (e.g. "INFO") or numeric logging level.

    Returns:
        The configured package root logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFormatter(_LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger below the package root logger.

    Module names of the rsst packages (``rsst_rss.fetcher``,
    ``rsst_cli.commands``) are mapped under the ``rsst`` root, so they all
    share the handler installed by ``init_logging``.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name == _ROOT_LOGGER_NAME or name.startswith(f"{_ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
