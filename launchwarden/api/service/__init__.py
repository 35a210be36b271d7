"""Service module - reconciliation of descriptors with live launchd state, and commands."""

from .CommandOutcome import CommandOutcome
from .MonitorConfig import MonitorConfig
from .RefreshStage import RefreshStage
from .ServiceAction import ServiceAction
from .ServiceMonitor import ServiceMonitor
from .ServiceRecord import ServiceRecord
from .ServiceState import Disabled, Failed, Loaded, Running, ServiceState, Stopped, Unknown, Unloaded
from .reconcile import derive_state, guess_domain, reconcile

__all__ = [
    "CommandOutcome",
    "Disabled",
    "Failed",
    "Loaded",
    "MonitorConfig",
    "RefreshStage",
    "Running",
    "ServiceAction",
    "ServiceMonitor",
    "ServiceRecord",
    "ServiceState",
    "Stopped",
    "Unknown",
    "Unloaded",
    "derive_state",
    "guess_domain",
    "reconcile",
]
