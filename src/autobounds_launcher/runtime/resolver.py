"""Availability resolution for Autobounds.

Decides whether Autobounds should run from a local binary or from its
container image, according to the configured execution mode:

- ``local``: the local probe must succeed, otherwise missing
- ``docker``: the container runtime probe must succeed, otherwise missing
- ``auto``: local first, then the container runtime, otherwise missing

When nothing is usable the reason is written to the output channel and,
unless prompts are suppressed, the user is offered to pull the image, open
the install docs, or stop being asked for this workspace.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from autobounds_launcher import state as workspace_state
from autobounds_launcher.errors import PullError, SessionError
from autobounds_launcher.runtime.container import SessionKind, build_session_command, pull_image
from autobounds_launcher.runtime.interfaces import (
    Notifier,
    ProcessRunner,
    StateStore,
    TerminalLauncher,
)
from autobounds_launcher.runtime.probes import (
    describe_error,
    probe_container_runtime,
    probe_local,
)
from autobounds_launcher.utils.config import AutoboundsSettings, ExecutionMode
from autobounds_launcher.utils.logger import get_logger

logger = get_logger("resolver")

INSTALL_DOCS_URL = "https://github.com/autobounds/autobounds#installation"

CHOICE_INSTALL = "Install via Docker"
CHOICE_DOCS = "Open Install Docs"
CHOICE_IGNORE = "Ignore"
INSTALL_CHOICES = [CHOICE_INSTALL, CHOICE_DOCS, CHOICE_IGNORE]

INSTALL_PROMPT = "Autobounds is not available locally. You can install it or run via Docker."


class Availability(str, Enum):
    LOCAL = "local"
    DOCKER = "docker"
    MISSING = "missing"


@dataclass
class ResolverReport:
    """What :meth:`AvailabilityResolver.check_availability` found."""

    availability: Availability
    version: str | None = None
    image: str | None = None


class AvailabilityResolver:
    """Probes for Autobounds and handles the remediation prompt.

    Args:
        settings: Effective launcher settings
        runner: Runs probe and pull commands
        notifier: Output channel and modal prompts
        state: Workspace state holding the suppress flag
        launcher: Terminal launcher for interactive sessions
        workspace: Workspace directory mounted into sessions
    """

    def __init__(
        self,
        settings: AutoboundsSettings,
        runner: ProcessRunner,
        notifier: Notifier,
        state: StateStore,
        launcher: TerminalLauncher | None = None,
        workspace: Path | None = None,
    ):
        self.settings = settings
        self.runner = runner
        self.notifier = notifier
        self.state = state
        self.launcher = launcher
        self.workspace = Path(workspace) if workspace else Path.cwd()

    def check_availability(
        self, suppress_prompt: bool = False, mode: ExecutionMode | str | None = None
    ) -> ResolverReport:
        """Resolve where Autobounds can run.

        Args:
            suppress_prompt: Never show the remediation prompt for this call
            mode: Overrides the configured execution mode for this call

        Returns:
            ResolverReport whose ``availability`` is local, docker or missing
        """
        mode = ExecutionMode.parse(mode) if mode is not None else self.settings.execution_mode
        binary = self.settings.binary
        image = self.settings.docker_image
        prompt_allowed = not suppress_prompt and not self.is_prompt_suppressed()

        logger.debug(f"Resolving availability (mode={mode.value}, binary={binary})")

        if mode is ExecutionMode.LOCAL:
            local = probe_local(binary, self.runner, self.settings.probe_timeout)
            if local.available:
                self._log_local_success(local.version)
                return ResolverReport(Availability.LOCAL, version=local.version)

            self._report_missing(
                "Autobounds binary not found in local mode.", local.error, prompt_allowed
            )
            return ResolverReport(Availability.MISSING)

        if mode is ExecutionMode.DOCKER:
            runtime = self._probe_runtime()
            if runtime.available:
                self._log_docker_ready(image)
                return ResolverReport(Availability.DOCKER, image=image)

            self._report_missing(
                "Docker does not appear to be available.", runtime.error, prompt_allowed
            )
            return ResolverReport(Availability.MISSING)

        local = probe_local(binary, self.runner, self.settings.probe_timeout)
        if local.available:
            self._log_local_success(local.version)
            return ResolverReport(Availability.LOCAL, version=local.version)

        runtime = self._probe_runtime()
        if runtime.available:
            self.notifier.log("Falling back to Docker mode.")
            self._log_docker_ready(image)
            return ResolverReport(Availability.DOCKER, image=image)

        self._report_missing(
            "Neither a local Autobounds binary nor Docker are available.",
            local.error,
            prompt_allowed,
        )
        return ResolverReport(Availability.MISSING)

    def pull_docker_image(self) -> bool:
        """Pull the configured image. Failures are reported, never raised."""
        image = self.settings.docker_image
        try:
            with self.notifier.progress(f"Pulling {image}"):
                pull_image(image, self.runner, self.notifier, self.settings.container_runtime)
        except PullError as e:
            self.notifier.log(f"Failed to pull Docker image: {e}")
            self.notifier.show_error(f"Autobounds Docker pull failed: {e}")
            logger.error(f"Pull of {image} failed: {e}")
            return False

        logger.success(f"Pulled {image}")
        self.notifier.log(f"Docker image {image} pulled successfully.")
        self.notifier.show_info(f"Autobounds Docker image {image} pulled successfully.")
        return True

    def prompt_for_install(self) -> str | None:
        selection = self.notifier.show_warning(INSTALL_PROMPT, list(INSTALL_CHOICES))

        if selection == CHOICE_INSTALL:
            self.pull_docker_image()
        elif selection == CHOICE_DOCS:
            self.notifier.open_external(INSTALL_DOCS_URL)
        elif selection == CHOICE_IGNORE:
            workspace_state.suppress_prompt(self.state)
            logger.info(f"Install prompt suppressed for {self.workspace}")

        return selection

    def open_session(self, kind: SessionKind | str, port: int | None = None) -> int:
        """Open an interactive session inside the Autobounds container.

        Returns:
            Exit code of the session process

        Raises:
            SessionError: If no terminal launcher is configured or the
                container runtime does not respond
        """
        if self.launcher is None:
            raise SessionError("No terminal launcher available")

        kind = SessionKind(kind)
        runtime = self._probe_runtime()
        if not runtime.available:
            detail = f" ({describe_error(runtime.error)})" if runtime.error else ""
            raise SessionError(
                f"{self.settings.container_runtime.capitalize()} is required for "
                f"{kind.value} sessions but is not available{detail}"
            )

        command = build_session_command(kind, self.settings, self.workspace, port)
        self.notifier.log(f"Starting {kind.value} session in {self.settings.docker_image}.")
        if kind is SessionKind.NOTEBOOK:
            self.notifier.log(
                f"Notebook will be served at http://localhost:{port or self.settings.notebook_port}"
            )
        logger.debug(f"Session command: {command}")
        return self.launcher.launch(command, cwd=self.workspace)

    def is_prompt_suppressed(self) -> bool:
        return workspace_state.is_prompt_suppressed(self.state)

    def _probe_runtime(self):
        return probe_container_runtime(
            self.runner, self.settings.container_runtime, self.settings.probe_timeout
        )

    def _report_missing(self, reason: str, detail: Exception | None, prompt_allowed: bool) -> None:
        self.notifier.log(reason)
        if detail is not None:
            self.notifier.log(f"Details: {describe_error(detail)}")
        if prompt_allowed:
            self.prompt_for_install()

    def _log_local_success(self, version: str | None) -> None:
        self.notifier.log(f"Local binary detected (version: {version or 'unknown'}).")

    def _log_docker_ready(self, image: str) -> None:
        self.notifier.log(f"Docker is available. Using image {image}.")
