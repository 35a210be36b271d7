import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_launchwarden_home import get_launchwarden_home

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified LaunchWarden logging.

    Args:
        home: LaunchWarden home directory. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_launchwarden_home()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "launchwarden.log"

    root_logger = logging.getLogger("launchwarden")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def is_configured() -> bool:
    return _CONFIGURED
