"""Allow-list check for labels embedded in privileged commands."""

import re

from ..errors import InvalidLabel

_LABEL = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._@+:\-]*$")


def validate_label(label: str) -> str:
    """Return the label unchanged if it only uses allowed characters.

    Raises:
        InvalidLabel: If the label is empty or contains anything else
    """
    if not _LABEL.fullmatch(label):
        raise InvalidLabel(f"Refusing to use label {label!r} in a privileged command")
    return label
