"""Show configuration command."""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from .LaunchWardenConfig import LaunchWardenConfig


def cmd_show(section: str = "") -> StageResult:
    """Show configuration section or list all sections.

    Args:
        section: Section name. Empty string lists all section names, otherwise returns specific section.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(LaunchWardenConfig.get_config_path())
        output: dict[str, Any] = {
            "errors": [],
            "warnings": [],
            "section": section,
            "content": {},
            "config_path": config_path,
        }

        yield (0.3, "Loading configuration...")
        try:
            config = LaunchWardenConfig.load()
        except ValueError as e:
            output["errors"].append(str(e))
            yield (1.0, "Complete")
            result_obj.finish(f"Error: {e}", output)
            return

        if not LaunchWardenConfig.get_config_path().exists():
            output["warnings"].append("No configuration file; showing defaults")

        yield (0.6, "Processing sections...")
        config_dict = config.to_dict()
        available_sections = list(config_dict.keys())

        if section == "":
            output["content"] = {"sections": available_sections}
            yield (1.0, "Complete")
            result_obj.finish(f"Found {len(available_sections)} section(s)", output)
            return

        if section not in available_sections:
            output["errors"].append(f"Unknown section: {section}")
            yield (1.0, "Complete")
            result_obj.finish(f"Section '{section}' not found", output)
            return

        output["content"] = config_dict[section]
        yield (1.0, "Complete")
        result_obj.finish(f"Retrieved configuration for '{section}'", output)

    announce = "Listing configuration sections..." if section == "" else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
