"""
Component Logger

Rich-formatted diagnostic logging for launcher components.

This is separate from the user-facing output channel (the ``[Autobounds]``
transcript written by the notifier). Diagnostics go through the stdlib
logging tree with a single :class:`rich.logging.RichHandler` on the root
logger, and are hidden below WARNING unless ``--verbose`` is given.

Usage:
    logger = get_logger("resolver")
    logger.info("Probing local binary")
    logger.debug("Command: ['autobounds', '--version']")
    logger.success("Image pulled")
    logger.warning("State file unreadable")
    logger.error("Pull failed")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Component -> rich colour
COMPONENT_COLORS = {
    "resolver": "cyan",
    "probes": "blue",
    "process": "blue",
    "container": "magenta",
    "state": "green",
    "cli": "white",
}

DEFAULT_LEVEL = logging.WARNING


class ComponentLogger:
    """
    Thin wrapper over :class:`logging.Logger` that prefixes messages with the
    component name and colours them with Rich markup.
    """

    def __init__(self, base_logger: logging.Logger, component_name: str, color: str = "white"):
        self.base_logger = base_logger
        self.component_name = component_name
        self.color = color

    def _format_message(self, message: str, style: str, emoji: str = "") -> str:
        prefix = f"{emoji}{self.component_name.title()}: "
        if style:
            return f"[{style}]{prefix}{message}[/{style}]"
        return f"{prefix}{message}"

    def info(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, self.color))

    def debug(self, message: str) -> None:
        style = f"dim {self.color}" if self.color != "white" else "dim white"
        self.base_logger.debug(self._format_message(message, style, "🔍 "))

    def warning(self, message: str) -> None:
        self.base_logger.warning(self._format_message(message, "bold yellow", "⚠️  "))

    def error(self, message: str, exc_info: bool = False) -> None:
        self.base_logger.error(self._format_message(message, "bold red", "❌ "), exc_info=exc_info)

    def success(self, message: str) -> None:
        self.base_logger.info(self._format_message(message, "bold green", "✅ "))

    @property
    def name(self) -> str:
        return self.base_logger.name


def _setup_rich_logging(level: int = DEFAULT_LEVEL) -> None:
    """Configure Rich logging for the root logger (called once)."""
    root_logger = logging.getLogger()

    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            return

    root_logger.setLevel(level)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=True,
        show_path=False,
        show_time=True,
        show_level=True,
        tracebacks_show_locals=False,
    )
    root_logger.addHandler(handler)


def configure_logging(verbose: bool = False) -> None:
    """Install the Rich handler and set the root level for this run."""
    _setup_rich_logging()
    logging.getLogger().setLevel(logging.DEBUG if verbose else DEFAULT_LEVEL)


def get_logger(component_name: str = None, *, name: str = None, color: str = None) -> ComponentLogger:
    """
    Get a component logger.

    Args:
        component_name: Component name (e.g., 'resolver', 'container')
        name: Direct logger name for custom loggers (keyword-only)
        color: Direct colour for custom loggers (keyword-only)

    Returns:
        ComponentLogger instance

    Examples:
        logger = get_logger("resolver")
        logger = get_logger(name="test_logger", color="blue")
    """
    _setup_rich_logging()

    if name is not None:
        return ComponentLogger(logging.getLogger(name), name, color or "white")

    if component_name is None:
        raise ValueError(
            "Component name is required. Usage: get_logger('component_name') or "
            "get_logger(name='custom_name', color='blue')"
        )

    base_logger = logging.getLogger(f"autobounds.{component_name}")
    return ComponentLogger(base_logger, component_name, COMPONENT_COLORS.get(component_name, "white"))
