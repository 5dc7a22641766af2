"""
Pytest configuration and shared test utilities.

Provides fakes for the resolver's capability interfaces (process runner,
notifier, terminal launcher) so resolution logic can be tested without
spawning processes or touching a terminal.
"""

import subprocess
from contextlib import contextmanager
from pathlib import Path

import pytest

from autobounds_launcher.runtime.resolver import AvailabilityResolver
from autobounds_launcher.state import WorkspaceState
from autobounds_launcher.utils.config import AutoboundsSettings

# ===================================================================
# Capability fakes
# ===================================================================


class FakeRunner:
    """Process runner driven by a table of per-executable outcomes.

    Each outcome is either an exception instance (raised) or a
    ``(returncode, stdout, stderr)`` tuple. Executables without an entry
    behave as if they were not installed.
    """

    def __init__(self, outcomes=None, pull_returncode=0, pull_output=("pulling\n",)):
        self.outcomes = dict(outcomes or {})
        self.pull_returncode = pull_returncode
        self.pull_output = pull_output
        self.calls: list[list[str]] = []
        self.streamed: list[list[str]] = []

    def run(self, command, timeout):
        self.calls.append(list(command))
        outcome = self.outcomes.get(command[0])
        if outcome is None:
            raise FileNotFoundError(2, "No such file or directory", command[0])
        if isinstance(outcome, BaseException):
            raise outcome
        returncode, stdout, stderr = outcome
        return subprocess.CompletedProcess(command, returncode, stdout, stderr)

    def stream(self, command, on_output):
        self.streamed.append(list(command))
        if isinstance(self.pull_returncode, BaseException):
            raise self.pull_returncode
        for chunk in self.pull_output:
            on_output(chunk)
        return self.pull_returncode

    def executables(self):
        return [call[0] for call in self.calls]


class FakeNotifier:
    """Records everything the resolver shows the user."""

    def __init__(self, selection=None):
        self.selection = selection
        self.lines: list[str] = []
        self.appended: list[str] = []
        self.infos: list[str] = []
        self.errors: list[str] = []
        self.warnings: list[tuple[str, list[str]]] = []
        self.progress_titles: list[str] = []
        self.opened: list[str] = []

    def log(self, message):
        self.lines.append(message)

    def append(self, text):
        self.appended.append(text)

    def show_info(self, message):
        self.infos.append(message)

    def show_error(self, message):
        self.errors.append(message)

    def show_warning(self, message, choices):
        self.warnings.append((message, list(choices)))
        return self.selection

    @contextmanager
    def progress(self, title):
        self.progress_titles.append(title)
        yield

    def open_external(self, url):
        self.opened.append(url)
        return True


class FakeLauncher:
    def __init__(self, returncode=0):
        self.returncode = returncode
        self.launched: list[tuple[list[str], Path | None]] = []

    def launch(self, command, cwd=None):
        self.launched.append((list(command), cwd))
        return self.returncode


# ===================================================================
# Fixtures
# ===================================================================


@pytest.fixture(autouse=True)
def clean_autobounds_env(monkeypatch):
    """Keep the developer's AUTOBOUNDS_* variables out of every test."""
    import os

    for name in list(os.environ):
        if name.startswith("AUTOBOUNDS_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("DEBUG", raising=False)


@pytest.fixture
def workspace(tmp_path):
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def state(workspace):
    return WorkspaceState(workspace)


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def launcher():
    return FakeLauncher()


@pytest.fixture
def make_resolver(workspace, state, launcher):
    """Factory: ``make_resolver(runner, notifier, **settings)``."""

    def _make(runner, notifier, **settings):
        return AvailabilityResolver(
            settings=AutoboundsSettings(**settings),
            runner=runner,
            notifier=notifier,
            state=state,
            launcher=launcher,
            workspace=workspace,
        )

    return _make


@pytest.fixture
def fake_runner_cls():
    return FakeRunner


@pytest.fixture
def fake_notifier_cls():
    return FakeNotifier


@pytest.fixture
def latin1_tool(tmp_path):
    """Executable that ignores its arguments, prints a non-UTF-8 byte and exits 0."""
    script = tmp_path / "latin1-tool"
    script.write_bytes(b"#!/bin/sh\nprintf 'autobounds 1.0 \\251 ACME\\n'\n")
    script.chmod(0o755)
    return script
