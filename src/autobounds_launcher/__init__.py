"""Autobounds Launcher.

Command-line shim that locates an Autobounds installation (local binary or
container image), offers remediation when neither is usable, and opens
interactive sessions inside the Autobounds container.

This package contains:
- Availability resolution (local probe, container runtime probe)
- Container image pull and session launching
- Per-workspace state and configuration
- The ``autobounds`` CLI
"""

# Version information
__version__ = "0.3.1"

__all__ = ["__version__"]
