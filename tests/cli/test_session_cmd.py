"""Tests for the repl and notebook session commands."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from autobounds_launcher.cli.main import cli


@pytest.fixture
def cli_runner():
    return CliRunner()


def fake_run(docker_available=True, session_returncode=0):
    """subprocess.run replacement covering both the probe and the session."""

    def _run(command, **kwargs):
        if command[1:] == ["--version"]:
            if not docker_available:
                raise FileNotFoundError(2, "No such file or directory", command[0])
            return MagicMock(returncode=0, stdout="Docker version 27.0.3", stderr="")
        return MagicMock(returncode=session_returncode)

    return _run


def session_call(mock_run):
    calls = [c for c in mock_run.call_args_list if c.args[0][1:] != ["--version"]]
    assert len(calls) == 1
    return calls[0]


class TestReplCommand:
    @patch("subprocess.run")
    def test_repl_runs_container(self, mock_run, cli_runner, workspace):
        mock_run.side_effect = fake_run()

        result = cli_runner.invoke(cli, ["--workspace", str(workspace), "repl"])

        assert result.exit_code == 0
        call = session_call(mock_run)
        assert call.args[0] == [
            "docker",
            "run",
            "--rm",
            "-it",
            "-v",
            f"{workspace.resolve()}:/workspace",
            "-w",
            "/workspace",
            "autobounds/autolab:latest",
            "python",
        ]
        assert call.kwargs["cwd"] == workspace.resolve()
        assert "Starting repl session" in result.output

    @patch("subprocess.run")
    def test_repl_no_mount_and_image(self, mock_run, cli_runner, workspace):
        mock_run.side_effect = fake_run()

        result = cli_runner.invoke(
            cli, ["--workspace", str(workspace), "repl", "--no-mount", "--image", "custom:1"]
        )

        assert result.exit_code == 0
        assert session_call(mock_run).args[0] == ["docker", "run", "--rm", "-it", "custom:1", "python"]

    @patch("subprocess.run")
    def test_exit_code_is_propagated(self, mock_run, cli_runner, workspace):
        mock_run.side_effect = fake_run(session_returncode=3)

        result = cli_runner.invoke(cli, ["--workspace", str(workspace), "repl"])

        assert result.exit_code == 3

    @patch("subprocess.run")
    def test_refused_without_runtime(self, mock_run, cli_runner, workspace):
        mock_run.side_effect = fake_run(docker_available=False)

        result = cli_runner.invoke(cli, ["--workspace", str(workspace), "repl"])

        assert result.exit_code == 1
        assert "Docker is required for repl sessions" in result.output
        assert mock_run.call_count == 1

    @patch("subprocess.run")
    def test_refused_even_when_local_mode(self, mock_run, cli_runner, workspace, monkeypatch):
        monkeypatch.setenv("AUTOBOUNDS_EXECUTION_MODE", "local")
        mock_run.side_effect = fake_run(docker_available=False)

        result = cli_runner.invoke(cli, ["--workspace", str(workspace), "repl"])

        assert result.exit_code == 1

    @patch("subprocess.run")
    def test_launch_oserror_aborts(self, mock_run, cli_runner, workspace):
        def _run(command, **kwargs):
            if command[1:] == ["--version"]:
                return MagicMock(returncode=0, stdout="Docker version 27", stderr="")
            raise PermissionError(13, "Permission denied", "docker")

        mock_run.side_effect = _run

        result = cli_runner.invoke(cli, ["--workspace", str(workspace), "repl"])

        assert result.exit_code == 1
        assert "Failed to start repl session" in result.output


class TestNotebookCommand:
    @patch("subprocess.run")
    def test_notebook_default_port(self, mock_run, cli_runner, workspace):
        mock_run.side_effect = fake_run()

        result = cli_runner.invoke(cli, ["--workspace", str(workspace), "notebook"])

        assert result.exit_code == 0
        command = session_call(mock_run).args[0]
        assert command[4:6] == ["-p", "8888:8888"]
        assert "--port=8888" in command
        assert "--NotebookApp.notebook_dir=/workspace" in command
        assert "http://localhost:8888" in result.output

    @patch("subprocess.run")
    def test_notebook_port_option(self, mock_run, cli_runner, workspace):
        mock_run.side_effect = fake_run()

        result = cli_runner.invoke(cli, ["--workspace", str(workspace), "notebook", "--port", "9999"])

        assert result.exit_code == 0
        command = session_call(mock_run).args[0]
        assert "9999:9999" in command
        assert "--port=9999" in command

    @patch("subprocess.run")
    def test_notebook_port_from_config(self, mock_run, cli_runner, workspace):
        (workspace / "autobounds.yml").write_text("autobounds:\n  notebook_port: 8890\n")
        mock_run.side_effect = fake_run()

        result = cli_runner.invoke(cli, ["--workspace", str(workspace), "notebook"])

        assert result.exit_code == 0
        assert "8890:8890" in session_call(mock_run).args[0]

    def test_notebook_rejects_bad_port(self, cli_runner, workspace):
        result = cli_runner.invoke(cli, ["--workspace", str(workspace), "notebook", "--port", "0"])

        assert result.exit_code == 2
