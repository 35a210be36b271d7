"""Filesystem event handler for descriptor directories."""

import threading
from collections.abc import Callable
from datetime import datetime

from watchdog.events import FileSystemEvent, FileSystemEventHandler


class _EventHandler(FileSystemEventHandler):
    """Forwards content-changing events and remembers when the last one arrived.

    Open/close notifications are ignored; they do not change a descriptor.
    """

    def __init__(self, on_change: Callable[[], None]) -> None:
        super().__init__()
        self._on_change = on_change
        self._last_change: datetime | None = None
        self._changed_paths: set[str] = set()
        self._lock = threading.Lock()

    @property
    def last_change(self) -> datetime | None:
        with self._lock:
            return self._last_change

    def get_and_clear_paths(self) -> list[str]:
        with self._lock:
            paths = sorted(self._changed_paths)
            self._changed_paths.clear()
        return paths

    def _record(self, *paths: str) -> None:
        with self._lock:
            self._last_change = datetime.now()
            self._changed_paths.update(paths)
        self._on_change()

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._record(str(event.src_path))

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._record(str(event.src_path))

    def on_deleted(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._record(str(event.src_path))

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._record(str(event.src_path), str(event.dest_path))
