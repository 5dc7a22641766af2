"""Availability check command.

``autobounds check`` runs the resolver once and reports where Autobounds
will run. The same check runs when ``autobounds`` is invoked with no
subcommand; in that case failures are logged instead of aborting.
"""

import os
import sys
import traceback

import click
from rich.markup import escape

from autobounds_launcher.cli.project_utils import CliContext, build_resolver
from autobounds_launcher.cli.styles import Messages, Styles, console
from autobounds_launcher.errors import ConfigurationError
from autobounds_launcher.runtime.resolver import Availability, ResolverReport
from autobounds_launcher.utils.config import ExecutionMode
from autobounds_launcher.utils.logger import get_logger

logger = get_logger("cli")


def _print_report(report: ResolverReport) -> None:
    if report.availability is Availability.LOCAL:
        version = escape(report.version or "unknown")
        console.print(Messages.success(f"Autobounds runs locally (version {version})"))
    elif report.availability is Availability.DOCKER:
        console.print(Messages.success(f"Autobounds runs in Docker ({escape(report.image or '')})"))
    else:
        console.print(Messages.error("Autobounds is not available"))


def run_startup_check(cli_ctx: CliContext) -> ResolverReport | None:
    """Run the check the way editor activation did: never raise."""
    try:
        resolver = build_resolver(cli_ctx)
        report = resolver.check_availability(suppress_prompt=False)
    except Exception as e:
        console.print(f"[Autobounds] Failed to run startup check: {e}", style=Styles.ERROR, markup=False)
        logger.debug(traceback.format_exc())
        return None

    _print_report(report)
    return report


@click.command()
@click.option(
    "--mode",
    "-m",
    type=click.Choice([m.value for m in ExecutionMode], case_sensitive=False),
    help="Override the configured execution mode for this check",
)
@click.option(
    "--path",
    "binary_path",
    help="Override the local Autobounds binary path",
)
@click.option(
    "--no-prompt",
    is_flag=True,
    help="Never show the install prompt, even if Autobounds is missing",
)
@click.pass_obj
def check(cli_ctx: CliContext, mode: str | None, binary_path: str | None, no_prompt: bool):
    """Check whether Autobounds is available locally or via Docker.

    Exits with status 1 when neither is usable.

    Examples:

    \b
      $ autobounds check
      $ autobounds check --mode local --path ~/bin/autobounds
      $ autobounds check --no-prompt
    """
    try:
        resolver = build_resolver(
            cli_ctx,
            overrides={"execution_mode": mode, "path": binary_path},
            interactive=not no_prompt,
        )
        report = resolver.check_availability(suppress_prompt=no_prompt)
    except ConfigurationError as e:
        console.print(f"❌ {e}", style=Styles.ERROR, markup=False)
        raise click.Abort() from None
    except KeyboardInterrupt:
        console.print("\n⚠️  Check cancelled by user", style=Styles.WARNING)
        raise
    except Exception as e:
        console.print(f"❌ Availability check failed: {e}", style=Styles.ERROR, markup=False)
        if os.environ.get("DEBUG"):
            console.print(traceback.format_exc(), style=Styles.DIM, markup=False)
        raise click.Abort() from None

    _print_report(report)
    if report.availability is Availability.MISSING:
        sys.exit(1)
