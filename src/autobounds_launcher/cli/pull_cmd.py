"""Image pull command."""

import sys

import click

from autobounds_launcher.cli.project_utils import CliContext, build_resolver
from autobounds_launcher.cli.styles import Styles, console
from autobounds_launcher.errors import ConfigurationError


@click.command()
@click.option("--image", "-i", help="Image to pull instead of the configured one")
@click.pass_obj
def pull(cli_ctx: CliContext, image: str | None):
    """Pull the Autobounds container image.

    Output from the container runtime is streamed while the pull runs.

    Examples:

    \b
      $ autobounds pull
      $ autobounds pull --image autobounds/autolab:1.4
    """
    try:
        resolver = build_resolver(cli_ctx, overrides={"docker_image": image})
    except ConfigurationError as e:
        console.print(f"❌ {e}", style=Styles.ERROR, markup=False)
        raise click.Abort() from None

    if not resolver.pull_docker_image():
        sys.exit(1)
