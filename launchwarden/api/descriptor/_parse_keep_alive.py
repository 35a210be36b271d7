from typing import Any


def _parse_keep_alive(value: Any) -> bool:
    """KeepAlive is either a boolean or a map of restart conditions.

    A non-empty condition map counts as keep-alive; its contents are not modeled.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, dict):
        return len(value) > 0
    return False
