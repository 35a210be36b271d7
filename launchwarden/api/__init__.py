"""API module for LaunchWarden.

Functions defined here serve as the single source of truth for the CLI commands
and for any UI collaborator consuming service records.
"""

__all__ = []
