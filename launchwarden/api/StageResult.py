"""StageResult dataclass for the 4-stage command pattern (announce, progress, result, output)."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StageResult:
    """What a `cmd_*` function hands back before doing any work.

    The caller announces, drains `progress_callback(result)`, then reads the
    remaining fields, which the callback fills in before it finishes.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    """Generator yielding (fraction_complete, message) tuples."""

    result: str = ""
    """One-line human summary."""

    output: dict[str, Any] = field(default_factory=dict)
    """Structured output, validated against the command's registered schema."""

    success: bool = False

    def finish(self, result: str, output: dict[str, Any], success: bool | None = None) -> None:
        """Set the final fields; success defaults to "no errors in output"."""
        self.result = result
        self.output = output
        self.success = not output.get("errors") if success is None else success
