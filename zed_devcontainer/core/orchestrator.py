"""Open, rebuild and attach operations exposed to the editor."""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from ..models.container import ContainerSummary, RuntimeHandle
from ..models.output import ArgumentCompletion, CommandOutput
from ..services.container_service import ContainerService
from ..services.exceptions import HookError, MissingArgumentError, UnknownCommandError
from ..services.process import ProcessRunner
from ..services.runtime_detector import RuntimeDetector
from .argument_builder import ArgumentBuilder
from .config_loader import ConfigLoader
from .constants import ATTACH_COMMAND, OPEN_COMMAND, REBUILD_COMMAND
from .hook_runner import HookRunner

logger = logging.getLogger(__name__)


def connect_instructions(runtime: RuntimeHandle, container: str) -> str:
    """Zed remote-development steps for entering a container."""
    return (
        "To connect to this container using Zed's remote development:\n"
        "1. Open Command Palette (Cmd/Ctrl+Shift+P)\n"
        "2. Run 'projects: Open Remote'\n"
        f"3. Connect using: ssh root@localhost -o ProxyCommand=\"{runtime} exec -i {container} sh\"\n"
    )


class DevcontainerOrchestrator:
    """Sequences config loading, runtime detection and container lifecycle.

    Nothing is cached between operations: each one reloads the configuration
    and re-detects the runtime.
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        preferred_runtime: Optional[str] = None,
        loader: Optional[ConfigLoader] = None,
        builder: Optional[ArgumentBuilder] = None,
    ):
        """Initialize the orchestrator.

        Args:
            runner: Process runner shared by every runtime call
            preferred_runtime: Restrict detection to "docker" or "podman"
            loader: Configuration loader
            builder: Run argument builder
        """
        self.runner = runner or ProcessRunner()
        self.preferred_runtime = preferred_runtime
        self.loader = loader or ConfigLoader()
        self.builder = builder or ArgumentBuilder()

    def detect_runtime(self) -> RuntimeHandle:
        return RuntimeDetector(self.runner).detect(self.preferred_runtime)

    def container_service(self, runtime: RuntimeHandle) -> ContainerService:
        return ContainerService(runtime, self.runner)

    def open(self, project_args: Sequence[str]) -> CommandOutput:
        """Create a devcontainer for a project and run its postCreateCommand.

        Every step up to container creation aborts on error. A failing
        postCreateCommand only adds a warning line to the report.

        Args:
            project_args: Project path tokens, joined with spaces

        Raises:
            MissingArgumentError: If no path was given
            DevcontainerError: If loading, detection, building or creation fails
        """
        if not project_args:
            raise MissingArgumentError("Please provide a project path")

        project_path = " ".join(project_args)
        config = self.loader.load(project_path)
        runtime = self.detect_runtime()

        lines = [f"Opening devcontainer for project: {project_path}\n\n"]
        lines.append(f"Container runtime: {runtime}\n")
        if config.name is not None:
            lines.append(f"Devcontainer name: {config.name}\n")
        if config.image is not None:
            lines.append(f"Using image: {config.image}\n")

        lines.append("\nCreating container...\n")
        run_args = self.builder.build(config, project_path)
        service = self.container_service(runtime)
        container_name = service.create(run_args)
        lines.append(f"Container created: {container_name}\n")

        lines.append("\nRunning post-create commands...\n")
        try:
            HookRunner(service).run_post_create(container_name, config)
        except HookError as e:
            logger.warning(f"Post-create command failed in {container_name}: {e}")
            lines.append(f"Warning: Post-create command failed: {e}\n")

        lines.append("\n✓ Container is ready!\n\n")
        lines.append(connect_instructions(runtime, container_name))
        lines.append("\nOr use the /devcontainer-attach command with the container name.")

        return CommandOutput.single_section("".join(lines), "Devcontainer Open")

    def rebuild(self, worktree_root: Optional[Union[str, Path]]) -> CommandOutput:
        """Check that the configuration and runtime are usable and explain how to rebuild.

        The existing container is left alone; the user re-runs open.

        Raises:
            MissingArgumentError: If there is no worktree
            DevcontainerError: If loading or detection fails
        """
        if worktree_root is None:
            raise MissingArgumentError("No worktree available")

        self.loader.load(worktree_root)
        self.detect_runtime()

        text = (
            "Rebuilding devcontainer...\n\n"
            "This feature will:\n"
            "1. Stop the current container\n"
            "2. Remove the container\n"
            "3. Create a new container with updated configuration\n\n"
            "Note: Manual rebuild is required. Use /devcontainer-open to create a new container.\n"
        )
        return CommandOutput.single_section(text, "Devcontainer Rebuild")

    def attach(self, container_args: Sequence[str]) -> CommandOutput:
        """Make sure a container is running and explain how to connect.

        A stopped container is started first. No hooks run here.

        Args:
            container_args: Container ID or name tokens, joined with spaces

        Raises:
            MissingArgumentError: If no container was given
            ContainerStartError: If a stopped container cannot be started
            DevcontainerError: If detection or inspection fails
        """
        if not container_args:
            raise MissingArgumentError("Please provide a container name or ID")

        container_id = " ".join(container_args)
        runtime = self.detect_runtime()
        service = self.container_service(runtime)

        state = service.inspect(container_id)

        lines = [f"Container: {container_id}\n"]
        lines.append(f"Status: {state.value}\n\n")

        if not state.is_running:
            lines.append("Container is not running. Starting it...\n")
            service.start(container_id)
            lines.append("Container started.\n\n")

        lines.append(connect_instructions(runtime, container_id))
        return CommandOutput.single_section("".join(lines), "Devcontainer Attach")

    def list_running_containers(self) -> list[ContainerSummary]:
        """List containers the runtime reports as running."""
        runtime = self.detect_runtime()
        return self.container_service(runtime).list_containers()

    def complete_attach_argument(self) -> list[ArgumentCompletion]:
        """Offer each running container as an attach argument."""
        containers = self.list_running_containers()
        return [
            ArgumentCompletion(
                label=f"{container.name} ({container.id})",
                new_text=container.id,
                run_command=True,
            )
            for container in containers
        ]

    def run_command(
        self,
        name: str,
        args: Sequence[str],
        worktree_root: Optional[Union[str, Path]] = None,
    ) -> CommandOutput:
        """Dispatch a slash command by name."""
        if name == OPEN_COMMAND:
            return self.open(args)
        if name == REBUILD_COMMAND:
            return self.rebuild(worktree_root)
        if name == ATTACH_COMMAND:
            return self.attach(args)
        raise UnknownCommandError(name)

    def complete_argument(self, name: str, args: Sequence[str]) -> list[ArgumentCompletion]:
        """Argument completions for a slash command."""
        if name in (OPEN_COMMAND, REBUILD_COMMAND):
            return []
        if name == ATTACH_COMMAND:
            return self.complete_attach_argument()
        raise UnknownCommandError(name)
