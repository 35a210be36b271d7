"""Output schemas for service commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceListOutput(BaseOutputSchema):
    """Output schema for service list command."""
    domain: str = Field(..., description="Domain filter, empty string for all active domains")
    search: str = Field(..., description="Search text applied to label and display name, empty string if none")
    count: int = Field(..., ge=0, description="Number of services returned")
    services: list[dict[str, Any]] = Field(..., description="Reconciled service records")
    last_refresh: str = Field(..., description="ISO timestamp of the pass, empty string if none completed")


class ServiceShowOutput(BaseOutputSchema):
    """Output schema for service show command."""
    label: str = Field(..., description="Requested label")
    service: dict[str, Any] = Field(..., description="Reconciled record, empty dict if not found")
    descriptor: dict[str, Any] = Field(..., description="Full property list contents, empty dict if unavailable")


class ServiceCommandOutput(BaseOutputSchema):
    """Output schema for start, stop, enable and disable.

    A cancelled elevation prompt is not an error: status is 'cancelled' and
    errors stays empty.
    """
    label: str = Field(..., description="Service label")
    domain: str = Field(..., description="Domain of the service, empty string if not resolved")
    action: str = Field(..., description="Requested action")
    status: str = Field(..., description="'succeeded', 'failed', 'cancelled' or 'rejected'")
    message: str = Field(..., description="Failure or cancellation message, empty string on success")
    service: dict[str, Any] = Field(..., description="Record after the follow-up refresh, empty dict if unavailable")


class ServiceBlameOutput(BaseOutputSchema):
    """Output schema for service blame command."""
    label: str = Field(..., description="Service label")
    domain: str = Field(..., description="Domain of the service, empty string if not resolved")
    reason: str = Field(..., description="launchd's reason for the last start, empty string if unavailable")


class ServiceWatchOutput(BaseOutputSchema):
    """Output schema for service watch command."""
    directories: list[str] = Field(..., description="Directories that were watched")
    changes: int = Field(..., ge=0, description="Number of rescans triggered by file changes")
    count: int = Field(..., ge=0, description="Number of services after the last rescan")
    services: list[dict[str, Any]] = Field(..., description="Records published by the last rescan")


register_output_schema("service", "list", ServiceListOutput)
register_output_schema("service", "show", ServiceShowOutput)
register_output_schema("service", "start", ServiceCommandOutput)
register_output_schema("service", "stop", ServiceCommandOutput)
register_output_schema("service", "enable", ServiceCommandOutput)
register_output_schema("service", "disable", ServiceCommandOutput)
register_output_schema("service", "blame", ServiceBlameOutput)
register_output_schema("service", "watch", ServiceWatchOutput)
