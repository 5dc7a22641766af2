"""Per-workspace persistent key-value state.

State lives in ``<workspace>/.autobounds/state.json``. The only key the
launcher writes today is :data:`SUPPRESS_PROMPT_KEY`, which is set when the
user dismisses the install recommendation and is only cleared by
``autobounds reset-prompt``.
"""

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from autobounds_launcher.utils.logger import get_logger

if TYPE_CHECKING:
    from autobounds_launcher.runtime.interfaces import StateStore

logger = get_logger("state")

STATE_DIRNAME = ".autobounds"
STATE_FILENAME = "state.json"

SUPPRESS_PROMPT_KEY = "autobounds:suppressInstallPrompt"


class WorkspaceState:
    """JSON-file backed state for a single workspace.

    Every write is flushed to disk immediately. Reads go through the file each
    time so that two launcher processes in the same workspace see each other's
    updates.
    """

    def __init__(self, workspace: Path):
        self.workspace = Path(workspace)
        self.path = self.workspace / STATE_DIRNAME / STATE_FILENAME

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable state file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring state file {self.path}: expected a JSON object")
            return {}
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        tmp_path.replace(self.path)

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def update(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug(f"Set {key}={value!r} in {self.path}")

    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns True if it was present."""
        data = self._read()
        if key not in data:
            return False
        del data[key]
        self._write(data)
        logger.debug(f"Removed {key} from {self.path}")
        return True

    def keys(self) -> list[str]:
        return sorted(self._read())


def is_prompt_suppressed(state: "StateStore") -> bool:
    return bool(state.get(SUPPRESS_PROMPT_KEY, False))


def suppress_prompt(state: "StateStore") -> None:
    state.update(SUPPRESS_PROMPT_KEY, True)


def clear_prompt_suppression(state: "StateStore") -> bool:
    return state.delete(SUPPRESS_PROMPT_KEY)
