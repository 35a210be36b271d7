"""One command inside an elevated sequence."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ElevatedStep:
    argv: tuple[str, ...]
    """Executable and arguments; each element is quoted separately."""

    discard_stderr: bool = False
    """Send the step's stderr to /dev/null (bootout of a service that is not loaded)."""
