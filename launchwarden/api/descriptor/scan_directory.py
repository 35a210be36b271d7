"""Scan a directory of descriptor files."""

from pathlib import Path

from ...utils.get_logger import get_logger
from ..domain.ServiceDomain import ServiceDomain
from ..errors import DescriptorParseError
from .parse_descriptor import DESCRIPTOR_SUFFIX, parse_descriptor
from .ServiceDescriptor import ServiceDescriptor


def scan_directory(directory: Path, domain: ServiceDomain) -> list[ServiceDescriptor]:
    """Parse every descriptor in a directory.

    A missing or unreadable directory yields an empty list. Files that fail to parse
    are logged and skipped; they never abort the scan.

    Args:
        directory: Directory to scan (not recursive)
        domain: Domain assigned to every descriptor found

    Returns:
        Descriptors in filename order
    """
    log = get_logger("descriptor")
    if not directory.is_dir():
        log.debug("Descriptor directory missing: %s", directory)
        return []

    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        log.warning("Cannot list %s: %s", directory, exc)
        return []

    descriptors: list[ServiceDescriptor] = []
    for path in entries:
        if path.name.startswith(".") or path.suffix != DESCRIPTOR_SUFFIX:
            continue
        if not path.is_file():
            continue
        try:
            descriptors.append(parse_descriptor(path, domain))
        except DescriptorParseError as exc:
            log.warning("Skipping descriptor: %s", exc)
    return descriptors
