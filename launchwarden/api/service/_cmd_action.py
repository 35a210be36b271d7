"""Shared body of the start, stop, enable and disable commands."""

from collections.abc import Iterator
from typing import Any

from ..errors import CommandInProgress, InvalidLabel, MissingDescriptor, ReadOnlyDomain, ServiceNotFound
from ..StageResult import StageResult
from ._resolve_record import _parse_domain, _resolve_record
from .ServiceAction import ServiceAction


def _cmd_action(action: ServiceAction, label: str, domain: str) -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ._open_monitor import _open_monitor

        output: dict[str, Any] = {
            "errors": [],
            "warnings": [],
            "label": label,
            "domain": "",
            "action": action.value,
            "status": "rejected",
            "message": "",
            "service": {},
        }

        def reject(message: str) -> None:
            output["errors"].append(message)
            output["message"] = message
            result_obj.finish(f"Error: {message}", output)

        yield (0.1, "Loading configuration...")
        try:
            domain_filter = _parse_domain(domain)
            monitor = _open_monitor()
        except ValueError as exc:
            yield (1.0, "Complete")
            reject(str(exc))
            return

        with monitor:
            yield (0.2, "Resolving service...")
            try:
                monitor.refresh().result()
                record = _resolve_record(monitor, label, domain_filter)
            except ServiceNotFound as exc:
                yield (1.0, "Complete")
                reject(str(exc))
                return
            except Exception as exc:
                yield (1.0, "Complete")
                reject(f"Refresh failed: {exc}")
                return
            output["domain"] = record.domain.value

            verb = action.value.capitalize()
            prompt = " (administrator prompt)" if record.domain.requires_elevation else ""
            yield (0.4, f"{verb} {record.label}{prompt}...")
            try:
                outcome = monitor.submit(action, record).result()
            except (ReadOnlyDomain, MissingDescriptor, InvalidLabel, CommandInProgress) as exc:
                yield (1.0, "Complete")
                reject(str(exc))
                return

            yield (0.9, "Refreshing state...")
            refreshed = monitor.find(record.label, record.domain)

        output["status"] = outcome.status
        output["message"] = outcome.message
        output["service"] = refreshed.to_dict() if refreshed else {}
        yield (1.0, "Complete")

        if outcome.status == "cancelled":
            result_obj.finish(f"{verb} {label} cancelled", output, success=False)
        elif outcome.ok:
            state = refreshed.state.display_text if refreshed else "gone"
            result_obj.finish(f"{verb} {label} succeeded ({state})", output)
        else:
            output["errors"].append(outcome.message)
            result_obj.finish(f"{verb} {label} failed: {outcome.message}", output)

    return StageResult(announce=f"Requesting {action.value} of '{label}'...", progress_callback=do_work)
