"""Lookup helpers over the static domain table."""

from pathlib import Path

from .ServiceDomain import ServiceDomain


def all_domains() -> frozenset[ServiceDomain]:
    return frozenset(ServiceDomain)


def directory(domain: ServiceDomain) -> Path:
    return domain.directory


def control_target(domain: ServiceDomain) -> str:
    return domain.control_target


def requires_elevation(domain: ServiceDomain) -> bool:
    return domain.requires_elevation


def is_read_only(domain: ServiceDomain) -> bool:
    return domain.is_read_only


def scan_domains(include_system: bool) -> list[ServiceDomain]:
    """Domains scanned in one reconciliation pass, in table order.

    Args:
        include_system: Also scan the read-only Apple domains

    Returns:
        Ordered list of domains
    """
    return [domain for domain in ServiceDomain if include_system or not domain.is_system]
