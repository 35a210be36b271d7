"""Service blame command - why launchd last started a service."""

from collections.abc import Iterator
from typing import Any

from ..errors import InvalidLabel, ServiceNotFound
from ..StageResult import StageResult
from ._resolve_record import _parse_domain, _resolve_record


def cmd_blame(label: str, domain: str = "") -> StageResult:
    """Ask launchd for the reason behind a service's last start."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ._open_monitor import _open_monitor

        output: dict[str, Any] = {"errors": [], "warnings": [], "label": label, "domain": "", "reason": ""}

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
            yield (0.4, "Resolving service...")
            try:
                monitor.refresh().result()
                record = _resolve_record(monitor, label, domain_filter)
                output["domain"] = record.domain.value
                yield (0.7, "Querying launchctl blame...")
                reason = monitor.blame(record)
            except (ServiceNotFound, InvalidLabel) as exc:
                output["errors"].append(str(exc))
                yield (1.0, "Complete")
                result_obj.finish(f"Error: {exc}", output)
                return
            except Exception as exc:
                output["errors"].append(f"launchctl blame failed: {exc}")
                yield (1.0, "Complete")
                result_obj.finish(f"Error: {exc}", output)
                return

        output["reason"] = reason
        if not reason:
            output["warnings"].append("launchctl gave no reason (the service may not be loaded)")
        yield (1.0, "Complete")
        result_obj.finish(f"{label}: {reason or 'no reason reported'}", output)

    return StageResult(announce=f"Asking launchd why '{label}' started...", progress_callback=do_work)
