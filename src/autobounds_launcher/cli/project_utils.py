"""Workspace resolution and resolver wiring shared by CLI commands."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from autobounds_launcher.cli.notifier import ConsoleNotifier
from autobounds_launcher.runtime.process import SubprocessRunner, SubprocessTerminalLauncher
from autobounds_launcher.runtime.resolver import AvailabilityResolver
from autobounds_launcher.state import WorkspaceState
from autobounds_launcher.utils.config import AutoboundsSettings, load_settings


@dataclass
class CliContext:
    """Options from the root group, stored on ``ctx.obj``."""

    workspace: str | None = None
    config: str | None = None
    verbose: bool = False


def resolve_workspace(workspace_arg: str | None = None) -> Path:
    """Resolve the workspace directory.

    Resolution priority:
    1. --workspace CLI argument (if provided)
    2. AUTOBOUNDS_WORKSPACE environment variable (if set)
    3. Current working directory (default)

    Examples:
        >>> resolve_workspace("~/analysis")
        Path('/Users/user/analysis')
    """
    if workspace_arg:
        return Path(workspace_arg).expanduser().resolve()

    env_workspace = os.environ.get("AUTOBOUNDS_WORKSPACE")
    if env_workspace:
        return Path(env_workspace).expanduser().resolve()

    return Path.cwd()


def load_cli_settings(
    cli_ctx: CliContext | None, overrides: dict[str, Any] | None = None
) -> tuple[Path, AutoboundsSettings]:
    cli_ctx = cli_ctx or CliContext()
    workspace = resolve_workspace(cli_ctx.workspace)
    settings = load_settings(workspace, cli_ctx.config, overrides)
    return workspace, settings


def build_resolver(
    cli_ctx: CliContext | None,
    overrides: dict[str, Any] | None = None,
    interactive: bool = True,
) -> AvailabilityResolver:
    """Create a resolver wired to the terminal capabilities.

    Raises:
        ConfigurationError: If the settings are invalid
    """
    workspace, settings = load_cli_settings(cli_ctx, overrides)
    return AvailabilityResolver(
        settings=settings,
        runner=SubprocessRunner(),
        notifier=ConsoleNotifier(interactive=interactive),
        state=WorkspaceState(workspace),
        launcher=SubprocessTerminalLauncher(),
        workspace=workspace,
    )
