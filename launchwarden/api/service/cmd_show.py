"""Service show command - one reconciled record plus its full property list."""

from collections.abc import Iterator
from typing import Any

from ..descriptor.read_raw_descriptor import read_raw_descriptor
from ..errors import DescriptorParseError, ServiceNotFound
from ..StageResult import StageResult
from ._resolve_record import _parse_domain, _resolve_record


def _plain(value: Any) -> Any:
    """Property list values made YAML/JSON friendly (bytes and dates become strings)."""
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def cmd_show(label: str, domain: str = "") -> StageResult:
    """Show a service by label."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ._open_monitor import _open_monitor

        output: dict[str, Any] = {"errors": [], "warnings": [], "label": label, "service": {}, "descriptor": {}}

        yield (0.1, "Loading configuration...")
        try:
            domain_filter = _parse_domain(domain)
            monitor = _open_monitor()
        except ValueError as exc:
            output["errors"].append(str(exc))
            yield (1.0, "Complete")
            result_obj.finish(f"Error: {exc}", output)
            return

        with monitor:
            yield (0.4, "Refreshing services...")
            try:
                monitor.refresh().result()
                record = _resolve_record(monitor, label, domain_filter)
            except ServiceNotFound as exc:
                output["errors"].append(str(exc))
                yield (1.0, "Complete")
                result_obj.finish(f"Service '{label}' not found", output)
                return
            except Exception as exc:
                output["errors"].append(f"Refresh failed: {exc}")
                yield (1.0, "Complete")
                result_obj.finish(f"Error: {exc}", output)
                return

        output["service"] = record.to_dict()
        if record.source_path is not None:
            yield (0.8, "Reading descriptor...")
            try:
                output["descriptor"] = _plain(read_raw_descriptor(record.source_path))
            except DescriptorParseError as exc:
                output["warnings"].append(str(exc))

        yield (1.0, "Complete")
        result_obj.finish(f"{record.label}: {record.state.display_text}", output)

    return StageResult(announce=f"Showing service '{label}'...", progress_callback=do_work)
