"""Build a ServiceMonitor from the on-disk configuration."""

from ...utils.configure_logging import configure_logging
from ..config.LaunchWardenConfig import LaunchWardenConfig
from .ServiceMonitor import ServiceMonitor


def _open_monitor(config: LaunchWardenConfig | None = None) -> ServiceMonitor:
    """Load configuration (unless given), apply its log level and return a monitor.

    Raises:
        ValueError: If the configuration file is invalid
    """
    if config is None:
        config = LaunchWardenConfig.load()
    configure_logging(level=config.log.level)
    return ServiceMonitor(config)
