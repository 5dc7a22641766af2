"""Capability interfaces between the resolver and the outside world.

The resolver never talks to a terminal, a prompt library or ``subprocess``
directly. It is handed objects satisfying these protocols, so the branching
logic can be exercised with fakes.

.. note::
   These are Protocols, not base classes. Implementations do not inherit from
   them; they only need matching methods.
"""

import subprocess
from collections.abc import Callable
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProcessRunner(Protocol):
    """Runs external commands for probing and image pulls."""

    def run(self, command: list[str], timeout: float) -> subprocess.CompletedProcess:
        """Run ``command`` to completion and capture its output as text.

        Raises:
            FileNotFoundError: If the executable does not exist
            OSError: If the process cannot be spawned
            subprocess.TimeoutExpired: If it runs longer than ``timeout``
        """
        ...

    def stream(self, command: list[str], on_output: Callable[[str], None]) -> int:
        """Run ``command``, passing each chunk of stdout/stderr to ``on_output``.

        Returns the exit code. Spawn failures raise ``OSError``.
        """
        ...


@runtime_checkable
class Notifier(Protocol):
    """User-facing output: the transcript plus modal messages."""

    def log(self, message: str) -> None:
        """Append one ``[Autobounds]``-prefixed line to the output channel."""
        ...

    def append(self, text: str) -> None:
        """Append raw text (e.g. streamed process output) to the output channel."""
        ...

    def show_info(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    def show_warning(self, message: str, choices: list[str]) -> str | None:
        """Show ``message`` with ``choices``; return the pick or None if dismissed."""
        ...

    def progress(self, title: str) -> AbstractContextManager[None]:
        """Context manager that shows a progress indicator while open."""
        ...

    def open_external(self, url: str) -> bool: ...


@runtime_checkable
class TerminalLauncher(Protocol):
    """Hands the user's terminal to an interactive command."""

    def launch(self, command: list[str], cwd: Path | None = None) -> int:
        """Run ``command`` attached to the terminal and return its exit code."""
        ...


@runtime_checkable
class StateStore(Protocol):
    """Persistent key-value store scoped to one workspace."""

    def get(self, key: str, default=None): ...

    def update(self, key: str, value) -> None: ...

    def delete(self, key: str) -> bool: ...


__all__ = ["ProcessRunner", "Notifier", "TerminalLauncher", "StateStore"]
