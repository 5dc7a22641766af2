"""Availability detection and container sessions for Autobounds.

This module provides the resolver that picks between a local binary and the
container image, plus the subprocess-backed capabilities it runs on.
"""

from .container import SessionKind, pull_image
from .probes import ProbeResult, probe_container_runtime, probe_local
from .process import SubprocessRunner, SubprocessTerminalLauncher
from .resolver import Availability, AvailabilityResolver, ResolverReport

__all__ = [
    "Availability",
    "AvailabilityResolver",
    "ResolverReport",
    "ProbeResult",
    "probe_local",
    "probe_container_runtime",
    "pull_image",
    "SessionKind",
    "SubprocessRunner",
    "SubprocessTerminalLauncher",
]
