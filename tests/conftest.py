import json

import pytest
from click.testing import CliRunner

from zed_devcontainer.services.exceptions import ProcessLaunchError
from zed_devcontainer.services.process import ProcessResult


class FakeProcessRunner:
    """Scripted stand-in for ProcessRunner.

    Responses are keyed by ``(binary, verb)`` where verb is the first
    argument after the binary. A response may be a ProcessResult, an
    exception to raise, or a callable taking the full argv.
    """

    def __init__(self, available=("docker",)):
        self.available = set(available)
        self.responses = {}
        self.calls = []
        self.timeouts = []

    def respond(self, binary, verb, response):
        self.responses[(binary, verb)] = response

    def launch(self, args, timeout=None):
        self.calls.append(list(args))
        self.timeouts.append(timeout)
        binary = args[0]
        if binary not in self.available:
            raise ProcessLaunchError(f"[Errno 2] No such file or directory: '{binary}'")

        response = self.responses.get((binary, args[1] if len(args) > 1 else None))
        if response is None:
            return ProcessResult(returncode=0)
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(args)
        return response

    def calls_for(self, verb):
        """All recorded calls whose verb matches."""
        return [call for call in self.calls if len(call) > 1 and call[1] == verb]


@pytest.fixture
def fake_runner():
    """Provides a fake process runner where only docker is installed."""
    return FakeProcessRunner()


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def make_project(tmp_path):
    """Creates a project directory with a devcontainer.json."""

    def _make(config, location=".devcontainer/devcontainer.json", name="project"):
        project_path = tmp_path / name
        config_path = project_path / location
        config_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(config, str):
            config_path.write_text(config)
        else:
            config_path.write_text(json.dumps(config))
        return project_path

    return _make
