"""Terminal implementation of the notifier capability.

The output channel is the Rich console: every ``log()`` line is printed with
the ``[Autobounds]`` prefix, streamed process output is passed through
unchanged, and the remediation prompt is a questionary select list.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import click
import questionary
from rich.console import Console
from rich.markup import escape

from autobounds_launcher.cli.styles import Messages, Styles, console, custom_style

CHANNEL_PREFIX = "[Autobounds]"


class ConsoleNotifier:
    """:class:`~autobounds_launcher.runtime.interfaces.Notifier` for a terminal.

    Args:
        output: Console to write to (defaults to the shared themed console)
        interactive: When False, prompts are skipped and treated as dismissed
    """

    def __init__(self, output: Console | None = None, interactive: bool = True):
        self.console = output or console
        self.interactive = interactive

    def log(self, message: str) -> None:
        self.console.print(f"{escape(CHANNEL_PREFIX)} {escape(message)}", style=Styles.CHANNEL)

    def append(self, text: str) -> None:
        self.console.out(text, end="", highlight=False)

    def show_info(self, message: str) -> None:
        self.console.print(Messages.success(escape(message)))

    def show_error(self, message: str) -> None:
        self.console.print(Messages.error(escape(message)))

    def show_warning(self, message: str, choices: list[str]) -> str | None:
        self.console.print(Messages.warning(escape(message)))
        if not self.interactive:
            return None
        # .ask() returns None on Ctrl+C, which counts as dismissing the prompt
        return questionary.select(
            "What would you like to do?", choices=choices, style=custom_style
        ).ask()

    @contextmanager
    def progress(self, title: str) -> Iterator[None]:
        with self.console.status(f"[info]{escape(title)}...[/info]", spinner="dots"):
            yield

    def open_external(self, url: str) -> bool:
        self.console.print(f"Opening {Messages.path(escape(url))}")
        # click.launch returns the opener's exit code
        return click.launch(url) == 0
