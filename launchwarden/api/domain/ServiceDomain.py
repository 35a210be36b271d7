"""Service domain enum backed by a compiled-in table."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class _DomainEntry:
    display_name: str
    description: str
    directory: str
    """Absolute path, or a path relative to the user's home when prefixed with '~/'."""
    session_target: bool
    """True when launchctl addresses the domain as gui/<uid>, False for 'system'."""
    requires_elevation: bool
    is_read_only: bool
    is_system: bool


class ServiceDomain(str, Enum):
    """Partition of the launchd namespace with its own directory and access rules."""

    USER_AGENTS = "user-agents"
    GLOBAL_AGENTS = "global-agents"
    GLOBAL_DAEMONS = "global-daemons"
    SYSTEM_AGENTS = "system-agents"
    SYSTEM_DAEMONS = "system-daemons"

    @property
    def _entry(self) -> _DomainEntry:
        return _DOMAIN_TABLE[self]

    @property
    def display_name(self) -> str:
        return self._entry.display_name

    @property
    def description(self) -> str:
        return self._entry.description

    @property
    def directory(self) -> Path:
        """Directory holding this domain's descriptor files."""
        raw = self._entry.directory
        if raw.startswith("~/"):
            return Path.home() / raw[2:]
        return Path(raw)

    @property
    def control_target(self) -> str:
        """Domain target passed to launchctl (e.g. 'gui/501' or 'system')."""
        if self._entry.session_target:
            return f"gui/{os.getuid()}"
        return "system"

    @property
    def listed_by_session(self) -> bool:
        """Whether `launchctl list` run as the user reports this domain's services."""
        return self._entry.session_target

    @property
    def requires_elevation(self) -> bool:
        return self._entry.requires_elevation

    @property
    def is_read_only(self) -> bool:
        """True for scopes protected by System Integrity Protection."""
        return self._entry.is_read_only

    @property
    def is_system(self) -> bool:
        return self._entry.is_system

    @property
    def is_editable(self) -> bool:
        return not self.is_read_only


# Registry: the ONLY place domain attributes are enumerated
_DOMAIN_TABLE: dict[ServiceDomain, _DomainEntry] = {
    ServiceDomain.USER_AGENTS: _DomainEntry(
        display_name="User Agents",
        description="Per-user background services",
        directory="~/Library/LaunchAgents",
        session_target=True,
        requires_elevation=False,
        is_read_only=False,
        is_system=False,
    ),
    ServiceDomain.GLOBAL_AGENTS: _DomainEntry(
        display_name="Global Agents",
        description="System-wide user services",
        directory="/Library/LaunchAgents",
        session_target=True,
        requires_elevation=True,
        is_read_only=False,
        is_system=False,
    ),
    ServiceDomain.GLOBAL_DAEMONS: _DomainEntry(
        display_name="Global Daemons",
        description="System-wide background daemons",
        directory="/Library/LaunchDaemons",
        session_target=False,
        requires_elevation=True,
        is_read_only=False,
        is_system=False,
    ),
    ServiceDomain.SYSTEM_AGENTS: _DomainEntry(
        display_name="System Agents",
        description="Apple system agents (read-only)",
        directory="/System/Library/LaunchAgents",
        session_target=True,
        requires_elevation=True,
        is_read_only=True,
        is_system=True,
    ),
    ServiceDomain.SYSTEM_DAEMONS: _DomainEntry(
        display_name="System Daemons",
        description="Apple system daemons (read-only)",
        directory="/System/Library/LaunchDaemons",
        session_target=False,
        requires_elevation=True,
        is_read_only=True,
        is_system=True,
    ),
}
