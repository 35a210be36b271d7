"""Look up a published record by label for command-line operations."""

from ..domain.ServiceDomain import ServiceDomain
from ..errors import ServiceNotFound
from .ServiceMonitor import ServiceMonitor
from .ServiceRecord import ServiceRecord


def _parse_domain(name: str | None) -> ServiceDomain | None:
    """Domain for a user-supplied name, None for an empty name.

    Raises:
        ValueError: If the name is not a known domain
    """
    if not name:
        return None
    try:
        return ServiceDomain(name)
    except ValueError:
        supported = ", ".join(d.value for d in ServiceDomain)
        raise ValueError(f"Unknown domain {name!r} (supported: {supported})") from None


def _resolve_record(monitor: ServiceMonitor, label: str, domain: ServiceDomain | None = None) -> ServiceRecord:
    """Raises ServiceNotFound if no published record matches."""
    record = monitor.find(label, domain)
    if record is None:
        where = f" in {domain.value}" if domain else ""
        raise ServiceNotFound(f"No service labelled {label!r}{where}")
    return record
