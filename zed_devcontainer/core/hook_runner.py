"""Running lifecycle commands inside containers."""

import logging
from typing import Optional

from ..models.config import DevcontainerConfig
from ..models.hooks import HookCommand
from ..services.container_service import ContainerService

logger = logging.getLogger(__name__)


class HookRunner:
    """Executes postCreate/postStart/postAttach commands through ``exec``."""

    def __init__(self, container_service: ContainerService):
        self.container_service = container_service

    def run_hook(self, container_id: str, hook: Optional[HookCommand]) -> Optional[str]:
        """Run one hook command inside a container.

        Args:
            container_id: Container ID or name
            hook: Hook to run; None or an unsupported shape is a no-op

        Returns:
            Command output, or None if nothing ran

        Raises:
            HookError: If the command fails
        """
        if hook is None:
            return None

        command = hook.shell_command()
        if command is None:
            logger.debug(f"Skipping unsupported {hook.kind.value} hook")
            return None

        logger.info(f"Running in {container_id}: {command}")
        return self.container_service.exec_shell(container_id, command)

    def run_post_create(self, container_id: str, config: DevcontainerConfig) -> Optional[str]:
        """Run postCreateCommand, if any."""
        return self.run_hook(container_id, config.post_create_hook)
