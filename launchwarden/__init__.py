"""LaunchWarden - reconcile and control launchd agents and daemons."""

__version__ = "0.3.0"
