"""
rsst Core Package.

This package contains the shared settings and logging setup used by
the rsst feed packages and the command-line application.
"""

__version__ = "0.1.0"

from .logging_config import init_logging, get_logger

__all__ = ["init_logging", "get_logger"]
