"""Debounced watch over descriptor directories."""

from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

from watchdog.observers import Observer

from ...utils.get_logger import get_logger
from ._Debouncer import _Debouncer
from ._EventHandler import _EventHandler


class ChangeWatcher:
    """Watch directories and call `on_change` once per burst of file changes.

    Directories that do not exist when `start()` runs are skipped. Watches are
    not recursive: descriptors live directly in their domain directory.

    Example:
        >>> with ChangeWatcher([Path.home() / "Library/LaunchAgents"], refresh) as watcher:
        ...     wait_for_user()
    """

    def __init__(self, directories: Iterable[Path], on_change: Callable[[], None], debounce_secs: float = 1.0):
        self.directories = [Path(d) for d in directories]
        self._on_change = on_change
        self._debouncer = _Debouncer(debounce_secs, self._fire)
        self._handler = _EventHandler(self._debouncer.trigger)
        self._observer: Observer | None = None
        self.watched: list[Path] = []
        self._stopped = False

    @property
    def last_change(self) -> datetime | None:
        return self._handler.last_change

    @property
    def is_running(self) -> bool:
        return self._observer is not None

    def _fire(self) -> None:
        log = get_logger("watcher")
        paths = self._handler.get_and_clear_paths()
        log.info("Descriptor change detected (%d path(s)); rescanning", len(paths))
        try:
            self._on_change()
        except Exception:
            log.exception("Change callback failed")

    def start(self) -> None:
        log = get_logger("watcher")
        if self._observer is not None or self._stopped:
            return
        observer = Observer()
        self.watched = []
        for directory in self.directories:
            if not directory.is_dir():
                log.info("Watch path missing %s", directory)
                continue
            observer.schedule(self._handler, str(directory), recursive=False)
            self.watched.append(directory)
            log.info("Watching %s", directory)
        observer.daemon = True
        observer.start()
        self._observer = observer

    def stop(self) -> None:
        """Cancel any pending callback and release every watch. A stopped watcher stays stopped."""
        self._stopped = True
        self._debouncer.cancel()
        observer, self._observer = self._observer, None
        if observer is None:
            return
        observer.unschedule_all()
        observer.stop()
        observer.join(timeout=5)
        get_logger("watcher").info("Stopped watching %d directory(ies)", len(self.watched))

    def __enter__(self) -> "ChangeWatcher":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False
