"""Colour and style management for the Autobounds CLI.

Semantic style names (success, error, warning) map onto a single colour
theme shared by the Rich console and questionary prompts.
"""

import sys
from dataclasses import dataclass

from questionary import Style as QuestionaryStyle
from rich.console import Console
from rich.theme import Theme


@dataclass
class ColorTheme:
    """Colour theme for the CLI.

    Error and warning stay fixed across themes; the rest define the look.
    """

    error: str = "#ff0000"
    warning: str = "#ffaa00"

    primary: str = "#3d8fd1"
    success: str = "#5fb36b"
    accent: str = "#7fd4e8"
    command: str = "#c9a0dc"
    path: str = "#a2ae9d"
    info: str = "#7fa7c9"

    text_primary: str = "#ffffff"
    text_secondary: str = "#888888"
    text_dim: str = "#666666"


AUTOBOUNDS_THEME = ColorTheme()


def _build_rich_theme(theme: ColorTheme) -> Theme:
    return Theme(
        {
            "success": f"bold {theme.success}",
            "error": f"bold {theme.error}",
            "warning": f"bold {theme.warning}",
            "info": f"bold {theme.info}",
            "primary": f"bold {theme.primary}",
            "secondary": theme.text_secondary,
            "dim": theme.text_dim,
            "header": f"bold {theme.primary}",
            "label": "bold",
            "value": theme.success,
            "path": theme.path,
            "command": theme.command,
            "accent": theme.accent,
            "channel": theme.text_secondary,
        }
    )


def _build_questionary_style(theme: ColorTheme) -> QuestionaryStyle:
    return QuestionaryStyle(
        [
            ("qmark", f"fg:{theme.warning} bold"),
            ("question", "bold"),
            ("answer", f"fg:{theme.primary} bold"),
            ("pointer", f"fg:{theme.primary} bold"),
            ("highlighted", f"fg:{theme.primary} bold"),
            ("selected", f"fg:{theme.accent}"),
            ("instruction", f"fg:{theme.text_dim} italic"),
            ("text", f"fg:{theme.text_secondary}"),
        ]
    )


custom_style = _build_questionary_style(AUTOBOUNDS_THEME)
rich_theme = _build_rich_theme(AUTOBOUNDS_THEME)

# On Windows, force UTF-8 capable output for ✓, ✗, ⚠️
if sys.platform == "win32":
    console = Console(theme=rich_theme, force_terminal=True, legacy_windows=False)
else:
    console = Console(theme=rich_theme)


class Styles:
    """Style names defined in the Rich theme, for ``style=`` arguments."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    DIM = "dim"
    PRIMARY = "primary"
    HEADER = "header"
    LABEL = "label"
    VALUE = "value"
    PATH = "path"
    COMMAND = "command"
    ACCENT = "accent"
    CHANNEL = "channel"


class Messages:
    """Pre-formatted message helpers for common patterns."""

    @staticmethod
    def success(text: str) -> str:
        return f"[success]✓ {text}[/success]"

    @staticmethod
    def error(text: str) -> str:
        return f"[error]✗ {text}[/error]"

    @staticmethod
    def warning(text: str) -> str:
        return f"[warning]⚠️  {text}[/warning]"

    @staticmethod
    def info(text: str) -> str:
        return f"[info]ℹ️  {text}[/info]"

    @staticmethod
    def header(text: str) -> str:
        return f"[header]{text}[/header]"

    @staticmethod
    def label_value(label: str, value: str) -> str:
        return f"[label]{label}:[/label] [value]{value}[/value]"

    @staticmethod
    def command(text: str) -> str:
        return f"[command]{text}[/command]"

    @staticmethod
    def path(text: str) -> str:
        return f"[path]{text}[/path]"


__all__ = ["ColorTheme", "AUTOBOUNDS_THEME", "console", "custom_style", "Styles", "Messages"]
