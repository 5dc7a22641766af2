"""Configuration and logging utilities.

Modules:
    config: Layered settings (defaults, YAML, environment, CLI)
    logger: Rich component logging
"""

from . import config, logger

__all__ = ["config", "logger"]
