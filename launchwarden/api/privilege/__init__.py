"""Privilege module - run launchctl sequences behind one administrator prompt."""

from .ElevatedStep import ElevatedStep
from .PrivilegeEscalator import PrivilegeEscalator
from .build_shell_command import build_shell_command
from .validate_label import validate_label

__all__ = [
    "ElevatedStep",
    "PrivilegeEscalator",
    "build_shell_command",
    "validate_label",
]
