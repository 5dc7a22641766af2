"""Command-line interface for the Autobounds launcher.

Commands:
    - check: Resolve whether Autobounds runs locally or in Docker
    - pull: Pull the Autobounds container image
    - repl: Python REPL inside the container
    - notebook: Jupyter notebook server inside the container
    - reset-prompt: Re-enable the install prompt for the workspace
    - config: Show effective settings

Commands are lazy-loaded for fast startup time.
"""

from .main import cli, main

__all__ = ["cli", "main"]
