"""Parse one launchd property list into a ServiceDescriptor."""

import plistlib
from pathlib import Path
from typing import Any

from ..domain.ServiceDomain import ServiceDomain
from ..errors import DescriptorParseError
from ._parse_keep_alive import _parse_keep_alive
from .ServiceDescriptor import ServiceDescriptor

DESCRIPTOR_SUFFIX = ".plist"


def _str_or_none(plist: dict[str, Any], key: str) -> str | None:
    value = plist.get(key)
    return value if isinstance(value, str) else None


def _bool(plist: dict[str, Any], key: str) -> bool:
    value = plist.get(key)
    return value if isinstance(value, bool) else False


def _label_from_filename(path: Path) -> str:
    name = path.name
    if name.endswith(DESCRIPTOR_SUFFIX):
        return name[: -len(DESCRIPTOR_SUFFIX)]
    return path.stem


def parse_descriptor(path: Path, domain: ServiceDomain) -> ServiceDescriptor:
    """Parse a descriptor file.

    Args:
        path: Path to the .plist file (XML or binary)
        domain: Domain the file was found in

    Returns:
        ServiceDescriptor populated from the plist

    Raises:
        DescriptorParseError: If the file cannot be read, is not a property list,
            or does not contain a top-level dictionary
    """
    try:
        with path.open("rb") as fh:
            plist = plistlib.load(fh)
    except OSError as exc:
        raise DescriptorParseError(path, f"unreadable ({exc.strerror or exc})") from exc
    except Exception as exc:
        # plistlib raises AttributeError for a malformed <date>, among others
        raise DescriptorParseError(path, f"invalid property list ({exc})") from exc

    if not isinstance(plist, dict):
        raise DescriptorParseError(path, f"top-level object is {type(plist).__name__}, expected dict")

    label = plist.get("Label")
    if not isinstance(label, str) or not label:
        label = _label_from_filename(path)
    if not label:
        raise DescriptorParseError(path, "no Label and no usable filename")

    arguments = plist.get("ProgramArguments")
    program_arguments = tuple(a for a in arguments if isinstance(a, str)) if isinstance(arguments, list) else ()

    start_interval = plist.get("StartInterval")
    if isinstance(start_interval, bool) or not isinstance(start_interval, int):
        start_interval = None

    environment = plist.get("EnvironmentVariables")
    environment_variables = (
        {k: v for k, v in environment.items() if isinstance(k, str) and isinstance(v, str)}
        if isinstance(environment, dict)
        else {}
    )

    return ServiceDescriptor(
        label=label,
        domain=domain,
        source_path=path,
        program=_str_or_none(plist, "Program"),
        program_arguments=program_arguments,
        run_at_load=_bool(plist, "RunAtLoad"),
        keep_alive=_parse_keep_alive(plist.get("KeepAlive")),
        start_interval=start_interval,
        environment_variables=environment_variables,
        working_directory=_str_or_none(plist, "WorkingDirectory"),
        stdout_path=_str_or_none(plist, "StandardOutPath"),
        stderr_path=_str_or_none(plist, "StandardErrorPath"),
        user=_str_or_none(plist, "UserName"),
        group=_str_or_none(plist, "GroupName"),
        disabled=_bool(plist, "Disabled"),
    )
