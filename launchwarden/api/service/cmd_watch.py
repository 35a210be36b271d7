"""Service watch command - rescan whenever descriptor directories change."""

import queue
import time
from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult


def cmd_watch(duration_secs: float | None = None) -> StageResult:
    """Watch the active domain directories and report each debounced rescan.

    Args:
        duration_secs: Stop after this many seconds; None watches until interrupted
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ._open_monitor import _open_monitor

        output: dict[str, Any] = {"errors": [], "warnings": [], "directories": [], "changes": 0, "count": 0, "services": []}

        yield (0.05, "Loading configuration...")
        try:
            monitor = _open_monitor()
        except ValueError as exc:
            output["errors"].append(str(exc))
            yield (1.0, "Complete")
            result_obj.finish(f"Error: {exc}", output)
            return

        published: queue.Queue = queue.Queue()
        with monitor:
            try:
                records = monitor.refresh().result()
            except Exception as exc:
                output["errors"].append(f"Refresh failed: {exc}")
                yield (1.0, "Complete")
                result_obj.finish(f"Error: {exc}", output)
                return
            yield (0.1, f"Initial scan: {len(records)} service(s)")

            unsubscribe = monitor.subscribe(published.put)
            watcher = monitor.watch()
            output["directories"] = [str(d) for d in watcher.watched]
            missing = [str(d) for d in watcher.directories if d not in watcher.watched]
            output["warnings"].extend(f"Directory missing, not watched: {d}" for d in missing)
            yield (0.1, f"Watching {len(watcher.watched)} directory(ies)")

            deadline = None if duration_secs is None else time.monotonic() + duration_secs
            try:
                while deadline is None or time.monotonic() < deadline:
                    timeout = 0.5 if deadline is None else max(0.0, min(0.5, deadline - time.monotonic()))
                    try:
                        records = published.get(timeout=timeout)
                    except queue.Empty:
                        continue
                    output["changes"] += 1
                    fraction = 0.5 if deadline is None else 1.0 - (deadline - time.monotonic()) / duration_secs
                    yield (min(max(fraction, 0.1), 0.99), f"Rescanned: {len(records)} service(s)")
            except KeyboardInterrupt:
                output["warnings"].append("Interrupted")
            finally:
                unsubscribe()

        output["count"] = len(records)
        output["services"] = [r.to_dict() for r in records]
        yield (1.0, "Complete")
        result_obj.finish(f"Watched {output['changes']} change(s)", output)

    return StageResult(announce="Watching descriptor directories...", progress_callback=do_work)
