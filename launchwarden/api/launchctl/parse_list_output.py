"""Parse `launchctl list` output."""

from .ListEntry import ListEntry


def _optional_int(field: str) -> int | None:
    if field == "-":
        return None
    try:
        return int(field)
    except ValueError:
        return None


def parse_list_output(output: str) -> dict[str, ListEntry]:
    """Parse the PID / Status / Label table printed by `launchctl list`.

    The first line is a header and is skipped. Rows are tab-delimited; rows with
    fewer than three fields are skipped. A '-' field means the value is absent.

    Args:
        output: Raw command output

    Returns:
        Mapping of label to ListEntry
    """
    services: dict[str, ListEntry] = {}
    for line in output.splitlines()[1:]:
        fields = line.split("\t") if "\t" in line else line.split(None, 2)
        if len(fields) < 3:
            continue
        pid_field, status_field, label = (f.strip() for f in fields[:3])
        if not label:
            continue
        services[label] = ListEntry(pid=_optional_int(pid_field), exit_code=_optional_int(status_field))
    return services
