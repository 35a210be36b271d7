"""Service list command - reconciled records for the active domains."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ._resolve_record import _parse_domain


def cmd_list(domain: str = "", search: str = "") -> StageResult:
    """List services, optionally filtered by domain and search text.

    Args:
        domain: Domain name (e.g. "user-agents"); empty string for every active domain
        search: Case-insensitive text matched against label and display name
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ._open_monitor import _open_monitor

        def fail(message: str) -> None:
            result_obj.finish(
                f"Error: {message}",
                {
                    "errors": [message],
                    "warnings": [],
                    "domain": domain,
                    "search": search,
                    "count": 0,
                    "services": [],
                    "last_refresh": "",
                },
            )

        yield (0.1, "Loading configuration...")
        try:
            domain_filter = _parse_domain(domain)
            monitor = _open_monitor()
        except ValueError as exc:
            yield (1.0, "Complete")
            fail(str(exc))
            return

        with monitor:
            yield (0.3, "Scanning descriptors and querying launchctl...")
            try:
                monitor.refresh().result()
            except Exception as exc:
                yield (1.0, "Complete")
                fail(f"Refresh failed: {exc}")
                return

            yield (0.8, "Filtering...")
            records = monitor.records(domain_filter, search)
            warnings = []
            if domain_filter is not None and domain_filter not in monitor.active_domains:
                warnings.append(f"{domain_filter.value} is not scanned; enable monitor.show_system_services")
            last_refresh = monitor.last_refresh

        yield (1.0, "Complete")
        result_obj.finish(
            f"Found {len(records)} service(s)",
            {
                "errors": [],
                "warnings": warnings,
                "domain": domain,
                "search": search,
                "count": len(records),
                "services": [r.to_dict() for r in records],
                "last_refresh": last_refresh.isoformat() if last_refresh else "",
            },
        )

    announce = f"Listing services matching '{search}'..." if search else "Listing services..."
    return StageResult(announce=announce, progress_callback=do_work)
