"""Subprocess-backed implementations of the process and terminal capabilities.

Output is decoded as UTF-8 with undecodable bytes replaced, so a tool that
prints a stray Latin-1 byte still yields a usable result.
"""

import subprocess
from collections.abc import Callable
from pathlib import Path

from autobounds_launcher.utils.logger import get_logger

logger = get_logger("process")


class SubprocessRunner:
    """:class:`~autobounds_launcher.runtime.interfaces.ProcessRunner` over ``subprocess``."""

    def run(self, command: list[str], timeout: float) -> subprocess.CompletedProcess:
        logger.debug(f"Running {command} (timeout {timeout}s)")
        return subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )

    def stream(self, command: list[str], on_output: Callable[[str], None]) -> int:
        logger.debug(f"Streaming {command}")
        process = subprocess.Popen(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            bufsize=1,
        )
        try:
            for line in process.stdout:
                on_output(line)
        except BaseException:
            process.kill()
            process.wait()
            raise
        finally:
            process.stdout.close()
        return process.wait()


class SubprocessTerminalLauncher:
    """Runs an interactive command in the foreground of the current terminal."""

    def launch(self, command: list[str], cwd: Path | None = None) -> int:
        logger.debug(f"Launching {command} in {cwd or Path.cwd()}")
        result = subprocess.run(command, cwd=cwd)
        return result.returncode
