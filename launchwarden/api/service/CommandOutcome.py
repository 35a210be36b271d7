"""Result of a state-changing command."""

from dataclasses import dataclass
from typing import Any, Literal

OutcomeStatus = Literal["succeeded", "failed", "cancelled"]


@dataclass(frozen=True)
class CommandOutcome:
    status: OutcomeStatus
    message: str = ""

    @classmethod
    def succeeded(cls) -> "CommandOutcome":
        return cls("succeeded")

    @classmethod
    def failed(cls, message: str) -> "CommandOutcome":
        return cls("failed", message)

    @classmethod
    def cancelled(cls) -> "CommandOutcome":
        return cls("cancelled", "Operation cancelled by user")

    @property
    def ok(self) -> bool:
        return self.status == "succeeded"

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status, "message": self.message}
