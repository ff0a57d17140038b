"""Translating a devcontainer configuration into runtime ``run`` arguments."""

from pathlib import Path
from typing import Union

from ..models.config import DevcontainerConfig
from ..models.container import RunArguments
from ..services.exceptions import NoImageSpecifiedError, UnsupportedBuildSourceError
from .constants import CONTAINER_PREFIX, DEFAULT_WORKSPACE_TARGET, KEEPALIVE_COMMAND


def container_name_for(config: DevcontainerConfig) -> str:
    """Derive the container name from the configuration name."""
    if config.name is not None:
        return f"{CONTAINER_PREFIX}-{config.name.replace(' ', '-')}"
    return CONTAINER_PREFIX


def default_workspace_mount(project_path: Union[str, Path]) -> str:
    """Bind mount of the project at /workspace."""
    return f"type=bind,source={project_path},target={DEFAULT_WORKSPACE_TARGET}"


class ArgumentBuilder:
    """Builds the argument list for a detached, named ``run``."""

    def build(self, config: DevcontainerConfig, project_path: Union[str, Path]) -> RunArguments:
        """Build ``run`` arguments for a configuration.

        The resulting order is: ``run -d --name``, the workspace mount, the
        extra mounts, the port mappings, ``runArgs``, the image and finally a
        keep-alive command so the container outlives this call.

        Args:
            config: Loaded configuration
            project_path: Project root on the host

        Returns:
            Container name and arguments (without the runtime binary)

        Raises:
            UnsupportedBuildSourceError: If only a dockerfile is configured
            NoImageSpecifiedError: If neither image nor dockerfile is configured
        """
        container_name = container_name_for(config)
        args = ["run", "-d", "--name", container_name]

        workspace_mount = config.workspace_mount
        if workspace_mount is None:
            workspace_mount = default_workspace_mount(project_path)
        args.extend(["--mount", workspace_mount])

        for mount in config.mounts:
            args.extend(["--mount", mount])

        for port in config.forward_ports:
            args.extend(["-p", f"{port}:{port}"])

        args.extend(config.run_args)

        if config.image is not None:
            args.append(config.image)
        elif config.dockerfile is not None:
            raise UnsupportedBuildSourceError(config.dockerfile)
        else:
            raise NoImageSpecifiedError()

        args.extend(KEEPALIVE_COMMAND)
        return RunArguments(container_name=container_name, args=args)
