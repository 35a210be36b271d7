"""Parse `launchctl print-disabled <target>` output."""

import re

# "com.example.agent" => disabled   (older releases print "=> true")
_DISABLED_LINE = re.compile(r'^\s*"([^"]+)"\s*=>\s*(?:disabled|true)\s*$')


def parse_print_disabled(output: str) -> set[str]:
    """Return the labels launchd's override database marks as disabled."""
    disabled: set[str] = set()
    for line in output.splitlines():
        match = _DISABLED_LINE.match(line)
        if match:
            disabled.add(match.group(1))
    return disabled
