"""Process-wide access to the active display."""

from .CLIDisplay import CLIDisplay
from .Display import Display


class DisplayContext:
    """Hands out one display per mode, created on first use."""

    def __init__(self) -> None:
        self._displays: dict[str, Display] = {}

    def get_display(self, mode: str = "cli") -> Display:
        if mode != "cli":
            raise ValueError(f"Invalid display mode: {mode}. Must be 'cli'")
        if mode not in self._displays:
            self._displays[mode] = CLIDisplay()
        return self._displays[mode]

    def set_display(self, mode: str, display: Display) -> None:
        """Replace the display for a mode (tests capture output this way)."""
        self._displays[mode] = display


display_context = DisplayContext()
