"""Exception hierarchy for the Autobounds launcher.

Probe failures are never raised to callers of the resolver; they are
captured on :class:`~autobounds_launcher.runtime.probes.ProbeResult` and only
logged. The remaining exceptions surface at the CLI boundary.
"""


class AutoboundsError(Exception):
    """Base exception for all launcher errors."""

    pass


class ConfigurationError(AutoboundsError):
    """Raised when a configuration value is missing or invalid.

    The offending key is kept on ``key`` so the CLI can point at it.
    """

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"Invalid configuration for '{key}': {message}")


class ProbeError(AutoboundsError):
    """A version probe ran but exited with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(f"'{' '.join(command)}' exited with code {returncode}{detail}")


class PullError(AutoboundsError):
    """Raised when pulling the container image fails."""

    pass


class SessionError(AutoboundsError):
    """Raised when an interactive container session cannot be started."""

    pass
