"""Container lifecycle operations through the runtime CLI."""

import logging
from typing import Optional

from ..core.constants import (
    INSPECT_RUNNING_FORMAT,
    PROVISION_TIMEOUT,
    PS_FORMAT,
)
from ..models.container import ContainerState, ContainerSummary, RunArguments, RuntimeHandle
from .exceptions import (
    ContainerCreateError,
    ContainerInspectError,
    ContainerListError,
    ContainerStartError,
    HookError,
    ProcessLaunchError,
)
from .process import ProcessResult, ProcessRunner

logger = logging.getLogger(__name__)


def parse_container_list(output: str) -> list[ContainerSummary]:
    """Parse ``ps`` output in ``ID|NAME`` format.

    Lines that do not split into exactly two fields are skipped.
    """
    containers = []
    for line in output.splitlines():
        parts = line.split("|")
        if len(parts) == 2:
            containers.append(ContainerSummary(id=parts[0], name=parts[1]))
    return containers


def parse_running_state(output: str) -> ContainerState:
    """Interpret ``inspect`` output; anything but ``true`` counts as stopped."""
    if output.strip() == "true":
        return ContainerState.RUNNING
    return ContainerState.STOPPED


class ContainerService:
    """Service for container operations against one runtime binary.

    Launch failures (binary gone, permissions, timeout) and commands that run
    but exit nonzero both raise the verb's error; the former carries the OS
    error, the latter the runtime's stderr.
    """

    def __init__(self, runtime: RuntimeHandle, runner: Optional[ProcessRunner] = None):
        """Initialize the service.

        Args:
            runtime: Runtime selected by RuntimeDetector
            runner: Process runner (defaults to a real subprocess runner)
        """
        self.runtime = runtime
        self.runner = runner or ProcessRunner()

    def _run(self, args: list[str], timeout: Optional[float] = None) -> ProcessResult:
        return self.runner.launch([self.runtime.binary] + args, timeout=timeout)

    def create(self, run_args: RunArguments) -> str:
        """Create and start a detached container.

        Args:
            run_args: Arguments from ArgumentBuilder

        Returns:
            Name of the created container

        Raises:
            ContainerCreateError: If the runtime cannot be launched or rejects the run
        """
        try:
            result = self._run(run_args.args, timeout=PROVISION_TIMEOUT)
        except ProcessLaunchError as e:
            raise ContainerCreateError(str(e)) from e

        if not result.ok:
            raise ContainerCreateError(result.stderr)

        logger.info(f"Created container: {run_args.container_name}")
        return run_args.container_name

    def list_containers(self) -> list[ContainerSummary]:
        """List running containers.

        Returns:
            (id, name) records in the order the runtime printed them

        Raises:
            ContainerListError: If the runtime cannot be launched
        """
        try:
            result = self._run(["ps", "--format", PS_FORMAT])
        except ProcessLaunchError as e:
            raise ContainerListError(str(e)) from e

        return parse_container_list(result.stdout)

    def inspect(self, container_id: str) -> ContainerState:
        """Get the running state of a container.

        A failing ``inspect`` (unknown container, daemon error) reports
        STOPPED rather than raising.

        Raises:
            ContainerInspectError: If the runtime cannot be launched
        """
        try:
            result = self._run(["inspect", "--format", INSPECT_RUNNING_FORMAT, container_id])
        except ProcessLaunchError as e:
            raise ContainerInspectError(str(e)) from e

        state = parse_running_state(result.stdout)
        logger.debug(f"Container {container_id} is {state.value}")
        return state

    def start(self, container_id: str) -> None:
        """Start a stopped container.

        Raises:
            ContainerStartError: If the runtime cannot be launched or the start fails
        """
        try:
            result = self._run(["start", container_id])
        except ProcessLaunchError as e:
            raise ContainerStartError(str(e)) from e

        if not result.ok:
            raise ContainerStartError(result.stderr)

        logger.info(f"Started container: {container_id}")

    def exec_shell(self, container_id: str, command: str) -> str:
        """Run a shell command inside a running container.

        Args:
            container_id: Container ID or name
            command: Command line for ``sh -c``

        Returns:
            Standard output of the command

        Raises:
            HookError: If the runtime cannot be launched or the command fails
        """
        try:
            result = self._run(
                ["exec", container_id, "sh", "-c", command], timeout=PROVISION_TIMEOUT
            )
        except ProcessLaunchError as e:
            raise HookError(f"Failed to execute command in container: {e}") from e

        if not result.ok:
            raise HookError(f"Command failed: {result.stderr}")

        return result.stdout
