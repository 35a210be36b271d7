"""Launchctl module - subprocess bridge to the launchd control utility."""

from .check_command import check_command
from .CommandOutput import CommandOutput
from .LaunchctlBridge import LaunchctlBridge
from .LaunchctlConfig import LaunchctlConfig
from .ListEntry import ListEntry
from .LiveStatus import ExitedNonZero, LiveStatus, LoadedNoPid, RunningProcess, live_status_from_entry
from .parse_list_output import parse_list_output
from .parse_print_disabled import parse_print_disabled
from .parse_print_services import parse_print_services
from .run_command import run_command

__all__ = [
    "CommandOutput",
    "check_command",
    "ExitedNonZero",
    "LaunchctlBridge",
    "LaunchctlConfig",
    "ListEntry",
    "LiveStatus",
    "LoadedNoPid",
    "RunningProcess",
    "live_status_from_entry",
    "parse_list_output",
    "parse_print_disabled",
    "parse_print_services",
    "run_command",
]
