import logging

from . import configure_logging as _configure


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _configure.is_configured():
        _configure.configure_logging()

    return logging.getLogger(f"launchwarden.{name}")
