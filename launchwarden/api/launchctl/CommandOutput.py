"""Captured result of one subprocess invocation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandOutput:
    """Combined stdout/stderr of a finished command."""

    output: str
    """Standard output and standard error, interleaved."""

    returncode: int | None
    """Exit status, or None when the process never ran or was killed on timeout."""

    launched: bool = True
    """False when the executable could not be started at all."""

    @classmethod
    def not_launched(cls) -> "CommandOutput":
        return cls(output="", returncode=None, launched=False)
