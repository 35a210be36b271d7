"""Error taxonomy shared by the scanner, control bridge, escalator and monitor."""


class ServiceError(Exception):
    """Base class for all LaunchWarden service errors."""


class DescriptorParseError(ServiceError):
    """A single descriptor file could not be parsed. Recovered per file."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse {path}: {reason}")


class ControlUtilityUnavailable(ServiceError):
    """launchctl could not be launched. Status degrades to Unknown."""


class CommandFailed(ServiceError):
    """A launchctl command (possibly elevated) reported an explicit failure."""

    def __init__(self, message: str):
        self.message = message.strip() or "Unknown error"
        super().__init__(f"Command failed: {self.message}")


class ElevationCancelled(ServiceError):
    """The user declined the administrator prompt. Never shown as an error."""

    def __init__(self) -> None:
        super().__init__("Operation cancelled by user")


class ReadOnlyDomain(ServiceError):
    """Mutation attempted on a domain protected by System Integrity Protection."""

    def __init__(self, label: str, domain):
        self.label = label
        self.domain = domain
        super().__init__(f"{label} lives in {domain.display_name}, which is read-only")


class InvalidLabel(ServiceError, ValueError):
    """Label contains characters outside the allowed set."""


class MissingDescriptor(ServiceError):
    """Operation needs a descriptor file but the record has none."""


class CommandInProgress(ServiceError):
    """Another command is already running against the same service."""


class ServiceNotFound(ServiceError, LookupError):
    """No record matches the requested label."""
