"""Parse the `services = { ... }` block of `launchctl print <target>`."""

import re

from .ListEntry import ListEntry

_BLOCK_START = re.compile(r"^\s*services\s*=\s*\{\s*$")
_PID = re.compile(r"^-?\d+$")


def parse_print_services(output: str) -> dict[str, ListEntry]:
    """Extract the services registered in a domain.

    Rows inside the block are either `<pid> <last exit> <label>` columns or a bare
    label. Parsing stops when the block's closing brace is reached; braces of
    nested blocks are balanced so they do not end the section early.

    Args:
        output: Raw `launchctl print` output

    Returns:
        Mapping of label to ListEntry (pid None when not running)
    """
    services: dict[str, ListEntry] = {}
    depth = 0
    for line in output.splitlines():
        if depth == 0:
            if _BLOCK_START.match(line):
                depth = 1
            continue

        depth += line.count("{") - line.count("}")
        if depth <= 0:
            break
        if depth != 1 or "{" in line or "}" in line:
            continue

        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) >= 3 and _PID.match(tokens[0]):
            pid = int(tokens[0])
            exit_code = int(tokens[1]) if _PID.match(tokens[1]) else None
            services[tokens[2]] = ListEntry(pid=pid if pid > 0 else None, exit_code=exit_code)
        elif not tokens[0].startswith("0x"):
            services[tokens[0]] = ListEntry()
    return services
