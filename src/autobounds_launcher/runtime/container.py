"""Container image pull and interactive session commands.

Sessions run the configured Autobounds image through the container runtime
CLI with ``--rm -it`` so the user's terminal is attached. When workspace
mounting is enabled the workspace directory is bound to ``/workspace`` and
used as the working directory inside the container.
"""

from enum import Enum
from pathlib import Path

from autobounds_launcher.errors import PullError
from autobounds_launcher.runtime.interfaces import Notifier, ProcessRunner
from autobounds_launcher.utils.config import AutoboundsSettings
from autobounds_launcher.utils.logger import get_logger

logger = get_logger("container")

CONTAINER_WORKDIR = "/workspace"


class SessionKind(str, Enum):
    REPL = "repl"
    NOTEBOOK = "notebook"


def pull_image(image: str, runner: ProcessRunner, notifier: Notifier, runtime: str = "docker") -> None:
    """Run ``<runtime> pull <image>``, streaming its output to the notifier.

    Raises:
        PullError: If the process cannot be started or exits non-zero
    """
    command = [runtime, "pull", image]
    logger.info(f"Pulling {image} with {runtime}")
    try:
        returncode = runner.stream(command, notifier.append)
    except OSError as e:
        raise PullError(str(e) or e.__class__.__name__) from e

    if returncode != 0:
        raise PullError(f"{runtime} pull exited with code {returncode}")


def _mount_args(settings: AutoboundsSettings, workspace: Path) -> list[str]:
    if not settings.mount_workspace:
        return []
    return ["-v", f"{Path(workspace).resolve()}:{CONTAINER_WORKDIR}", "-w", CONTAINER_WORKDIR]


def build_repl_command(settings: AutoboundsSettings, workspace: Path) -> list[str]:
    """Command for a plain Python REPL inside the image."""
    return [
        settings.container_runtime,
        "run",
        "--rm",
        "-it",
        *_mount_args(settings, workspace),
        settings.docker_image,
        "python",
    ]


def build_notebook_command(
    settings: AutoboundsSettings, workspace: Path, port: int | None = None
) -> list[str]:
    """Command for a Jupyter notebook server published on ``port``.

    Args:
        settings: Effective settings (image, runtime, mount toggle, default port)
        workspace: Host directory to mount
        port: Overrides ``settings.notebook_port``
    """
    port = port or settings.notebook_port
    command = [
        settings.container_runtime,
        "run",
        "--rm",
        "-it",
        "-p",
        f"{port}:{port}",
        *_mount_args(settings, workspace),
        settings.docker_image,
        "jupyter",
        "notebook",
        "--ip=0.0.0.0",
        f"--port={port}",
        "--no-browser",
        "--allow-root",
    ]
    if settings.mount_workspace:
        command.append(f"--NotebookApp.notebook_dir={CONTAINER_WORKDIR}")
    return command


def build_session_command(
    kind: SessionKind, settings: AutoboundsSettings, workspace: Path, port: int | None = None
) -> list[str]:
    if kind is SessionKind.NOTEBOOK:
        return build_notebook_command(settings, workspace, port)
    return build_repl_command(settings, workspace)
