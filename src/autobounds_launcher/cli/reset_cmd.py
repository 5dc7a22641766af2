"""Re-enable the install prompt for a workspace."""

import click

from autobounds_launcher.cli.project_utils import CliContext, resolve_workspace
from autobounds_launcher.cli.styles import Messages, console
from autobounds_launcher.state import WorkspaceState, clear_prompt_suppression


@click.command(name="reset-prompt")
@click.pass_obj
def reset_prompt(cli_ctx: CliContext):
    """Clear the "Ignore" choice so the install prompt is shown again."""
    workspace = resolve_workspace(cli_ctx.workspace if cli_ctx else None)
    state = WorkspaceState(workspace)

    if clear_prompt_suppression(state):
        console.print(Messages.success(f"Install prompt re-enabled for {workspace}"))
    else:
        console.print(Messages.info(f"Install prompt was not suppressed for {workspace}"))
