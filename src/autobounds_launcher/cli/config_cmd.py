"""Show the effective launcher settings."""

import json

import click
import yaml
from rich.table import Table

from autobounds_launcher.cli.project_utils import CliContext, load_cli_settings
from autobounds_launcher.cli.styles import Styles, console
from autobounds_launcher.errors import ConfigurationError
from autobounds_launcher.state import WorkspaceState, is_prompt_suppressed


@click.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "yaml", "json"]),
    default="table",
    help="Output format (default: table)",
)
@click.pass_obj
def config(cli_ctx: CliContext, output_format: str):
    """Show effective settings after file, environment and defaults.

    Examples:

    \b
      $ autobounds config
      $ autobounds config --format yaml
    """
    try:
        workspace, settings = load_cli_settings(cli_ctx)
    except ConfigurationError as e:
        console.print(f"❌ {e}", style=Styles.ERROR, markup=False)
        raise click.Abort() from None

    data = settings.to_dict()
    data["prompt_suppressed"] = is_prompt_suppressed(WorkspaceState(workspace))

    if output_format == "json":
        click.echo(json.dumps({"autobounds": data}, indent=2))
        return
    if output_format == "yaml":
        click.echo(yaml.safe_dump({"autobounds": data}, sort_keys=False), nl=False)
        return

    table = Table(title=f"Autobounds settings ({workspace})", title_style=Styles.HEADER)
    table.add_column("Setting", style=Styles.LABEL)
    table.add_column("Value", style=Styles.VALUE)
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)
