"""Main CLI entry point for the Autobounds launcher.

Provides the ``autobounds`` command group. Subcommands are imported only
when invoked so ``autobounds --help`` stays fast.
"""

import importlib
import sys

import click

from autobounds_launcher import __version__
from autobounds_launcher.cli.project_utils import CliContext
from autobounds_launcher.utils.logger import configure_logging


class LazyGroup(click.Group):
    """Click group that lazily loads subcommands only when invoked."""

    # command name -> (module, attribute)
    COMMANDS = {
        "check": ("autobounds_launcher.cli.check_cmd", "check"),
        "pull": ("autobounds_launcher.cli.pull_cmd", "pull"),
        "repl": ("autobounds_launcher.cli.session_cmd", "repl"),
        "notebook": ("autobounds_launcher.cli.session_cmd", "notebook"),
        "reset-prompt": ("autobounds_launcher.cli.reset_cmd", "reset_prompt"),
        "config": ("autobounds_launcher.cli.config_cmd", "config"),
    }

    def get_command(self, ctx, cmd_name):
        if cmd_name not in self.COMMANDS:
            return None

        module_path, attr = self.COMMANDS[cmd_name]
        mod = importlib.import_module(module_path)
        return getattr(mod, attr)

    def list_commands(self, ctx):
        return list(self.COMMANDS)


@click.group(cls=LazyGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="autobounds")
@click.option(
    "--workspace",
    "-w",
    type=click.Path(exists=True, file_okay=False, dir_okay=True),
    help="Workspace directory (default: current directory or AUTOBOUNDS_WORKSPACE env var)",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False),
    help="Settings file (default: autobounds.yml in the workspace)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show diagnostic logging")
@click.pass_context
def cli(ctx, workspace, config, verbose):
    """Autobounds launcher - find Autobounds locally or in Docker.

    Run without a command to perform the startup availability check.

    Examples:

    \b
      autobounds                      Startup check (prompts if missing)
      autobounds check --no-prompt    Check without prompting
      autobounds check --mode docker  Only consider Docker
      autobounds pull                 Pull the Autobounds image
      autobounds repl                 Python REPL inside the container
      autobounds notebook -p 9999     Notebook server on port 9999
      autobounds reset-prompt         Re-enable the install prompt
      autobounds config               Show effective settings
    """
    configure_logging(verbose)
    ctx.obj = CliContext(workspace=workspace, config=config, verbose=verbose)

    if ctx.invoked_subcommand is None:
        from .check_cmd import run_startup_check

        run_startup_check(ctx.obj)


def main():
    """Entry point for the autobounds CLI.

    Click runs outside standalone mode. Ctrl+C reaches here as an ``Abort``
    caused by ``KeyboardInterrupt`` and exits 130; other aborts exit 1.
    """
    try:
        cli(standalone_mode=False)
    except click.exceptions.Abort as e:
        if isinstance(e.__cause__, KeyboardInterrupt):
            click.echo("\nInterrupted.", err=True)
            sys.exit(130)
        click.echo("Aborted!", err=True)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        click.echo("\nInterrupted.", err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
