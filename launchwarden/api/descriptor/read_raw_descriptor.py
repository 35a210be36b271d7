"""Read a descriptor as a raw dictionary for editing."""

import plistlib
from pathlib import Path
from typing import Any

from ..errors import DescriptorParseError


def read_raw_descriptor(path: Path) -> dict[str, Any]:
    """Read the full property list, unknown keys included.

    Raises:
        DescriptorParseError: If the file is missing or not a dictionary plist
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
    return plist
