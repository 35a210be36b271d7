"""Watcher module - debounced filesystem watch over descriptor directories."""

from .ChangeWatcher import ChangeWatcher

__all__ = ["ChangeWatcher"]
