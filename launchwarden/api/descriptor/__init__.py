"""Descriptor module - launchd property list scanning and write-back."""

from .ServiceDescriptor import ServiceDescriptor
from .parse_descriptor import parse_descriptor
from .read_raw_descriptor import read_raw_descriptor
from .scan_directory import scan_directory
from .write_descriptor import write_descriptor

__all__ = [
    "ServiceDescriptor",
    "parse_descriptor",
    "read_raw_descriptor",
    "scan_directory",
    "write_descriptor",
]
