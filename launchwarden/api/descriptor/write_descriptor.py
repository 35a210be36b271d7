"""Write a descriptor dictionary back to disk."""

import os
import plistlib
import tempfile
from pathlib import Path
from typing import Any

_BINARY_MAGIC = b"bplist00"


def _detect_format(path: Path) -> plistlib.PlistFormat:
    """Keep the existing file's encoding; new files are written as XML."""
    try:
        with path.open("rb") as fh:
            head = fh.read(len(_BINARY_MAGIC))
    except OSError:
        return plistlib.FMT_XML
    return plistlib.FMT_BINARY if head == _BINARY_MAGIC else plistlib.FMT_XML


def write_descriptor(data: dict[str, Any], path: Path) -> None:
    """Atomically write a property list in the same format as the file it replaces.

    Args:
        data: Plist dictionary (as returned by read_raw_descriptor, possibly edited)
        path: Destination file

    Raises:
        TypeError: If data contains values plistlib cannot encode
        OSError: If the file cannot be written
    """
    fmt = _detect_format(path)
    payload = plistlib.dumps(data, fmt=fmt, sort_keys=False)

    # Write via NamedTemporaryFile in target directory to avoid cross-device issues
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            prefix=f".{path.name}.",
            suffix=".tmp",
        ) as fh:
            tmp_path = Path(fh.name)
            fh.write(payload)
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode & 0o7777)
        os.replace(tmp_path, path)
    except OSError:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise
