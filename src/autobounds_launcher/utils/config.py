"""
Configuration System

Settings for the launcher are layered, lowest precedence first:

- Built-in defaults
- The ``autobounds:`` section of ``autobounds.yml`` in the workspace
  (or an explicit ``--config`` / ``AUTOBOUNDS_CONFIG`` file)
- ``AUTOBOUNDS_*`` environment variables
- CLI option overrides

YAML values may reference the environment with ``${VAR}``,
``${VAR:-default}`` or ``$VAR``. A ``.env`` file in the workspace is loaded
first without overriding variables that are already set.
"""

import logging
import os
import re
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from autobounds_launcher.errors import ConfigurationError

# Use standard logging (not get_logger) to avoid circular imports with logger.py
logger = logging.getLogger("CONFIG")

CONFIG_FILENAME = "autobounds.yml"
CONFIG_SECTION = "autobounds"

DEFAULT_BINARY = "autobounds"
DEFAULT_DOCKER_IMAGE = "autobounds/autolab:latest"
DEFAULT_NOTEBOOK_PORT = 8888
DEFAULT_PROBE_TIMEOUT = 5.0

SUPPORTED_RUNTIMES = ("docker", "podman")

# Environment variable -> settings field
ENV_OVERRIDES = {
    "AUTOBOUNDS_EXECUTION_MODE": "execution_mode",
    "AUTOBOUNDS_PATH": "path",
    "AUTOBOUNDS_DOCKER_IMAGE": "docker_image",
    "AUTOBOUNDS_MOUNT_WORKSPACE": "mount_workspace",
    "AUTOBOUNDS_NOTEBOOK_PORT": "notebook_port",
    "AUTOBOUNDS_CONTAINER_RUNTIME": "container_runtime",
    "AUTOBOUNDS_PROBE_TIMEOUT": "probe_timeout",
}


class ExecutionMode(str, Enum):
    """Where the user prefers Autobounds to run."""

    AUTO = "auto"
    LOCAL = "local"
    DOCKER = "docker"

    @classmethod
    def parse(cls, value: "str | ExecutionMode") -> "ExecutionMode":
        if isinstance(value, ExecutionMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ConfigurationError(
                "execution_mode", f"'{value}' is not one of: {choices}"
            ) from None


@dataclass(frozen=True)
class AutoboundsSettings:
    """Effective launcher settings after all layers are applied."""

    execution_mode: ExecutionMode = ExecutionMode.AUTO
    path: str = ""
    docker_image: str = DEFAULT_DOCKER_IMAGE
    mount_workspace: bool = True
    notebook_port: int = DEFAULT_NOTEBOOK_PORT
    container_runtime: str = "docker"
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT

    @property
    def binary(self) -> str:
        """Command used for the local probe."""
        return self.path or DEFAULT_BINARY

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["execution_mode"] = self.execution_mode.value
        return data


class ConfigBuilder:
    """
    Loads ``autobounds.yml`` and exposes dot-path access to its contents.

    A missing file is not an error: every setting has a default, so the
    builder simply holds an empty mapping.
    """

    def __init__(self, config_path: str | Path | None = None, workspace: Path | None = None):
        self.workspace = Path(workspace) if workspace else Path.cwd()

        dotenv_path = self.workspace / ".env"
        if dotenv_path.exists():
            load_dotenv(dotenv_path, override=False)  # Don't override existing env vars
            logger.debug(f"Loaded .env file from {dotenv_path}")

        if config_path is None:
            config_path = os.environ.get("AUTOBOUNDS_CONFIG") or self.workspace / CONFIG_FILENAME
            self._explicit = False
        else:
            self._explicit = True

        self.config_path = Path(config_path)
        self.raw_config = self._load_config()

    def _load_yaml_file(self, file_path: Path) -> dict[str, Any]:
        """Load and validate a YAML configuration file."""
        try:
            with open(file_path) as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(str(file_path), f"YAML parsing error: {e}") from e

        if config is None:
            logger.warning(f"Configuration file is empty: {file_path}")
            return {}

        if not isinstance(config, dict):
            raise ConfigurationError(
                str(file_path), "configuration file must contain a mapping"
            )

        logger.debug(f"Loaded configuration from {file_path}")
        return config

    def _resolve_env_vars(self, data: Any) -> Any:
        """Recursively resolve environment variables in configuration data.

        Supports ``${VAR_NAME}``, ``${VAR_NAME:-default}`` and ``$VAR_NAME``.
        Unknown variables without a default are left as written.
        """
        if isinstance(data, dict):
            return {key: self._resolve_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):

            def replace_env_var(match):
                if match.group(1):  # ${VAR_NAME:-default} or ${VAR_NAME}
                    var_name = match.group(1)
                    default_value = match.group(2)
                else:  # $VAR_NAME
                    var_name = match.group(3)
                    default_value = None

                env_value = os.environ.get(var_name)
                if env_value is None:
                    if default_value is not None:
                        return default_value
                    logger.info(
                        f"Environment variable '{var_name}' not found, keeping original value"
                    )
                    return match.group(0)
                return env_value

            pattern = r"\$\{([^}:]+)(?::-(.*?))?\}|\$([A-Za-z_][A-Za-z0-9_]*)"
            return re.sub(pattern, replace_env_var, data)
        else:
            return data

    def _load_config(self) -> dict[str, Any]:
        if not self.config_path.exists():
            if self._explicit:
                raise ConfigurationError(
                    str(self.config_path), "configuration file not found"
                )
            logger.debug(f"No {CONFIG_FILENAME} at {self.config_path}, using defaults")
            return {}
        return self._resolve_env_vars(self._load_yaml_file(self.config_path))

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value by dot-separated path.

        Examples:
            >>> builder.get("autobounds.docker_image", "autobounds/autolab:latest")
        """
        if not path:
            raise ValueError("Configuration path cannot be empty or None")

        value: Any = self.raw_config
        for key in path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def section(self) -> dict[str, Any]:
        data = self.get(CONFIG_SECTION, {})
        if not isinstance(data, dict):
            raise ConfigurationError(CONFIG_SECTION, "section must be a mapping")
        return data


def _parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "1", "yes", "on"):
        return True
    if text in ("false", "0", "no", "off"):
        return False
    raise ConfigurationError(key, f"'{value}' is not a boolean")


def _coerce(key: str, value: Any) -> Any:
    """Convert a raw YAML/env/CLI value to the type of settings field ``key``."""
    if key == "execution_mode":
        return ExecutionMode.parse(value)

    if key in ("path", "docker_image", "container_runtime"):
        text = "" if value is None else str(value).strip()
        if key == "docker_image" and not text:
            return DEFAULT_DOCKER_IMAGE
        if key == "container_runtime":
            text = text.lower() or "docker"
            if text not in SUPPORTED_RUNTIMES:
                raise ConfigurationError(
                    key, f"'{value}' is not one of: {', '.join(SUPPORTED_RUNTIMES)}"
                )
        return text

    if key == "mount_workspace":
        return _parse_bool(key, value)

    if key == "notebook_port":
        try:
            port = int(value)
        except (TypeError, ValueError):
            raise ConfigurationError(key, f"'{value}' is not an integer") from None
        if not 1 <= port <= 65535:
            raise ConfigurationError(key, f"{port} is outside 1-65535")
        return port

    if key == "probe_timeout":
        try:
            timeout = float(value)
        except (TypeError, ValueError):
            raise ConfigurationError(key, f"'{value}' is not a number") from None
        if timeout <= 0:
            raise ConfigurationError(key, "must be greater than zero")
        return timeout

    raise ConfigurationError(key, "unknown setting")


def load_settings(
    workspace: Path | None = None,
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> AutoboundsSettings:
    """Build :class:`AutoboundsSettings` from file, environment and overrides.

    Args:
        workspace: Workspace directory (default: current directory)
        config_path: Explicit YAML file; must exist when given
        overrides: Values from CLI options. ``None`` entries are ignored.

    Raises:
        ConfigurationError: If any layer supplies an invalid value
    """
    builder = ConfigBuilder(config_path, workspace=workspace)
    known = {f.name for f in fields(AutoboundsSettings)}
    values: dict[str, Any] = {}

    for key, value in builder.section().items():
        if key not in known:
            logger.warning(f"Ignoring unknown setting '{CONFIG_SECTION}.{key}'")
            continue
        values[key] = _coerce(key, value)

    for env_name, key in ENV_OVERRIDES.items():
        env_value = os.environ.get(env_name)
        if env_value is not None:
            values[key] = _coerce(key, env_value)

    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = _coerce(key, value)

    return replace(AutoboundsSettings(), **values)
