"""Tests for ContainerService."""

import pytest

from zed_devcontainer.core.constants import PROVISION_TIMEOUT
from zed_devcontainer.models.container import ContainerState, ContainerSummary, RunArguments, RuntimeHandle
from zed_devcontainer.services.container_service import (
    ContainerService,
    parse_container_list,
    parse_running_state,
)
from zed_devcontainer.services.exceptions import (
    ContainerCreateError,
    ContainerInspectError,
    ContainerListError,
    ContainerStartError,
    HookError,
    ProcessLaunchError,
)
from zed_devcontainer.services.process import ProcessResult


@pytest.fixture
def service(fake_runner):
    return ContainerService(RuntimeHandle("docker"), fake_runner)


class TestParsing:
    """Test cases for runtime output parsing."""

    def test_parse_container_list_drops_bad_lines(self):
        """Test that only two-field lines are kept."""
        containers = parse_container_list("abc123|mycontainer\nbad-line\nxyz789|other")

        assert containers == [
            ContainerSummary(id="abc123", name="mycontainer"),
            ContainerSummary(id="xyz789", name="other"),
        ]

    def test_parse_container_list_extra_fields_dropped(self):
        """Test that lines with more than two fields are skipped."""
        assert parse_container_list("a|b|c\n\n") == []

    @pytest.mark.parametrize("output,expected", [
        ("true", ContainerState.RUNNING),
        ("true\n", ContainerState.RUNNING),
        ("false\n", ContainerState.STOPPED),
        ("", ContainerState.STOPPED),
        ("TRUE", ContainerState.STOPPED),
        ("Error: no such object", ContainerState.STOPPED),
    ])
    def test_parse_running_state(self, output, expected):
        """Test that only a literal "true" means running."""
        assert parse_running_state(output) is expected


class TestContainerService:
    """Test cases for ContainerService."""

    def test_create_success(self, service, fake_runner):
        """Test that create runs the built arguments and returns the name."""
        run_args = RunArguments("zed-devcontainer-demo", ["run", "-d", "--name", "zed-devcontainer-demo", "alpine"])

        assert service.create(run_args) == "zed-devcontainer-demo"
        assert fake_runner.calls == [["docker", "run", "-d", "--name", "zed-devcontainer-demo", "alpine"]]
        assert fake_runner.timeouts == [PROVISION_TIMEOUT]

    def test_create_nonzero_exit(self, service, fake_runner):
        """Test that create reports the runtime's stderr."""
        fake_runner.respond("docker", "run", ProcessResult(125, stderr="Unable to find image 'nope:latest'"))

        with pytest.raises(ContainerCreateError, match="Failed to create container: Unable to find image"):
            service.create(RunArguments("x", ["run", "nope"]))

    def test_create_launch_failure(self, service, fake_runner):
        """Test that create wraps launch errors."""
        fake_runner.available = set()

        with pytest.raises(ContainerCreateError, match="No such file or directory"):
            service.create(RunArguments("x", ["run", "alpine"]))

    def test_list_containers(self, service, fake_runner):
        """Test the ps invocation and its parsing."""
        fake_runner.respond("docker", "ps", ProcessResult(0, stdout="abc123|web\n"))

        assert service.list_containers() == [ContainerSummary("abc123", "web")]
        assert fake_runner.calls == [["docker", "ps", "--format", "{{.ID}}|{{.Names}}"]]

    def test_list_containers_nonzero_exit_parses_stdout(self, service, fake_runner):
        """Test that a failing ps is not an error."""
        fake_runner.respond("docker", "ps", ProcessResult(1, stderr="Cannot connect"))

        assert service.list_containers() == []

    def test_list_containers_launch_failure(self, service, fake_runner):
        """Test that ps launch failures raise ContainerListError."""
        fake_runner.respond("docker", "ps", ProcessLaunchError("Permission denied"))

        with pytest.raises(ContainerListError, match="Failed to list containers: Permission denied"):
            service.list_containers()

    def test_inspect(self, service, fake_runner):
        """Test the inspect invocation."""
        fake_runner.respond("docker", "inspect", ProcessResult(0, stdout="true\n"))

        assert service.inspect("abc123") is ContainerState.RUNNING
        assert fake_runner.calls == [["docker", "inspect", "--format", "{{.State.Running}}", "abc123"]]

    def test_inspect_failure_is_stopped(self, service, fake_runner):
        """Test that a failing inspect reports stopped."""
        fake_runner.respond("docker", "inspect", ProcessResult(1, stderr="No such object"))

        assert service.inspect("missing") is ContainerState.STOPPED

    def test_inspect_launch_failure(self, service, fake_runner):
        """Test that inspect launch errors raise."""
        fake_runner.available = set()

        with pytest.raises(ContainerInspectError):
            service.inspect("abc123")

    def test_start(self, service, fake_runner):
        """Test the start invocation."""
        service.start("abc123")
        assert fake_runner.calls == [["docker", "start", "abc123"]]

    def test_start_failure(self, service, fake_runner):
        """Test that a failing start raises with stderr."""
        fake_runner.respond("docker", "start", ProcessResult(1, stderr="No such container: abc123"))

        with pytest.raises(ContainerStartError, match="Failed to start container: No such container"):
            service.start("abc123")

    def test_exec_shell(self, service, fake_runner):
        """Test running a shell command in a container."""
        fake_runner.respond("docker", "exec", ProcessResult(0, stdout="hi\n"))

        assert service.exec_shell("box", "echo hi") == "hi\n"
        assert fake_runner.calls == [["docker", "exec", "box", "sh", "-c", "echo hi"]]

    def test_exec_shell_launch_failure(self, service, fake_runner):
        """Test that exec launch errors become hook errors."""
        fake_runner.respond("docker", "exec", ProcessLaunchError("Permission denied"))

        with pytest.raises(HookError, match="Failed to execute command in container: Permission denied"):
            service.exec_shell("box", "true")

    def test_podman_binary(self, fake_runner):
        """Test that the bound runtime binary is used for every call."""
        fake_runner.available = {"podman"}
        ContainerService(RuntimeHandle("podman"), fake_runner).start("abc")

        assert fake_runner.calls == [["podman", "start", "abc"]]
