"""Runtime primitives shared by the game engines."""

from quickplay.runtime.logging import JsonFormatter, LoggingConfig, configure_logging
from quickplay.runtime.scheduler import Scheduler, TaskCallback, TaskHandle

__all__ = [
    "JsonFormatter",
    "LoggingConfig",
    "Scheduler",
    "TaskCallback",
    "TaskHandle",
    "configure_logging",
]
