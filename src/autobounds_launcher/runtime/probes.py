"""Version probes for the local binary and the container runtime.

A probe is a single ``<command> --version`` invocation bounded by a short
timeout. A zero exit status is taken as proof that the command is usable;
the output is only kept for display.

Examples:
    Basic usage::

        from autobounds_launcher.runtime.probes import probe_local
        from autobounds_launcher.runtime.process import SubprocessRunner

        result = probe_local("autobounds", SubprocessRunner())
        if result.available:
            print(result.version)
"""

import subprocess
from dataclasses import dataclass

from autobounds_launcher.errors import ProbeError
from autobounds_launcher.runtime.interfaces import ProcessRunner
from autobounds_launcher.utils.config import DEFAULT_PROBE_TIMEOUT
from autobounds_launcher.utils.logger import get_logger

logger = get_logger("probes")

VERSION_FLAG = "--version"


@dataclass
class ProbeResult:
    """Outcome of one probe.

    ``error`` keeps the originating exception (spawn failure, timeout, or a
    :class:`ProbeError` for a non-zero exit) for diagnostic logging only.
    """

    available: bool
    version: str | None = None
    error: Exception | None = None


def _probe(command: list[str], runner: ProcessRunner, timeout: float) -> ProbeResult:
    try:
        result = runner.run(command, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        logger.debug(f"{command[0]} timed out after {timeout}s")
        return ProbeResult(available=False, error=e)
    except OSError as e:
        # FileNotFoundError for a missing executable, PermissionError etc.
        logger.debug(f"{command[0]} could not be started: {e}")
        return ProbeResult(available=False, error=e)

    stdout = (result.stdout or "").strip()
    stderr = (result.stderr or "").strip()

    if result.returncode != 0:
        logger.debug(f"{command[0]} exited with code {result.returncode}")
        return ProbeResult(
            available=False, error=ProbeError(list(command), result.returncode, stderr)
        )

    return ProbeResult(available=True, version=stdout or stderr)


def probe_local(
    binary: str, runner: ProcessRunner, timeout: float = DEFAULT_PROBE_TIMEOUT
) -> ProbeResult:
    """Check that ``binary --version`` succeeds.

    Args:
        binary: Executable name (resolved on PATH) or explicit path
        runner: Process runner
        timeout: Seconds before the probe is abandoned

    Returns:
        ProbeResult with the trimmed version text (stdout, or stderr when
        stdout is empty)
    """
    return _probe([binary, VERSION_FLAG], runner, timeout)


def probe_container_runtime(
    runner: ProcessRunner, runtime: str = "docker", timeout: float = DEFAULT_PROBE_TIMEOUT
) -> ProbeResult:
    """Check that the container runtime CLI answers ``--version``.

    Args:
        runner: Process runner
        runtime: 'docker' or 'podman'
        timeout: Seconds before the probe is abandoned
    """
    return _probe([runtime, VERSION_FLAG], runner, timeout)


def describe_error(error: BaseException) -> str:
    """One-line description of a probe error for the output channel."""
    if isinstance(error, FileNotFoundError):
        name = error.filename or "command"
        return f"{name}: command not found"
    message = str(error)
    return message if message else error.__class__.__name__
