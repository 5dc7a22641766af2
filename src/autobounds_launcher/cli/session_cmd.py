"""Interactive container session commands.

``autobounds repl`` and ``autobounds notebook`` hand the terminal to a
container started from the Autobounds image. The command's exit status is
the session's exit status.
"""

import os
import sys
import traceback

import click

from autobounds_launcher.cli.project_utils import CliContext, build_resolver
from autobounds_launcher.cli.styles import Styles, console
from autobounds_launcher.errors import AutoboundsError
from autobounds_launcher.runtime.container import SessionKind


def _run_session(cli_ctx: CliContext, kind: SessionKind, overrides: dict, port: int | None = None):
    try:
        resolver = build_resolver(cli_ctx, overrides=overrides)
        exit_code = resolver.open_session(kind, port=port)
    except AutoboundsError as e:
        console.print(f"❌ {e}", style=Styles.ERROR, markup=False)
        raise click.Abort() from None
    except KeyboardInterrupt:
        console.print("\n⚠️  Session interrupted", style=Styles.WARNING)
        sys.exit(130)
    except OSError as e:
        console.print(f"❌ Failed to start {kind.value} session: {e}", style=Styles.ERROR, markup=False)
        if os.environ.get("DEBUG"):
            console.print(traceback.format_exc(), style=Styles.DIM, markup=False)
        raise click.Abort() from None

    sys.exit(exit_code)


def _mount_override(no_mount: bool) -> bool | None:
    return False if no_mount else None


@click.command()
@click.option("--image", "-i", help="Image to run instead of the configured one")
@click.option("--no-mount", is_flag=True, help="Do not mount the workspace into the container")
@click.pass_obj
def repl(cli_ctx: CliContext, image: str | None, no_mount: bool):
    """Open a Python REPL inside the Autobounds container.

    Examples:

    \b
      $ autobounds repl
      $ autobounds repl --no-mount
    """
    _run_session(
        cli_ctx,
        SessionKind.REPL,
        {"docker_image": image, "mount_workspace": _mount_override(no_mount)},
    )


@click.command()
@click.option("--port", "-p", type=click.IntRange(1, 65535), help="Port to publish the notebook on")
@click.option("--image", "-i", help="Image to run instead of the configured one")
@click.option("--no-mount", is_flag=True, help="Do not mount the workspace into the container")
@click.pass_obj
def notebook(cli_ctx: CliContext, port: int | None, image: str | None, no_mount: bool):
    """Start a Jupyter notebook server inside the Autobounds container.

    The server is published on localhost at the configured notebook port
    (8888 unless overridden).

    Examples:

    \b
      $ autobounds notebook
      $ autobounds notebook --port 9999
    """
    _run_session(
        cli_ctx,
        SessionKind.NOTEBOOK,
        {
            "docker_image": image,
            "mount_workspace": _mount_override(no_mount),
            "notebook_port": port,
        },
        port=port,
    )
