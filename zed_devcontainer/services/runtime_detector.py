"""Container runtime detection."""

import logging
from typing import Optional

from ..core.constants import SUPPORTED_RUNTIMES
from ..models.container import RuntimeHandle
from .exceptions import NoRuntimeAvailableError, ProcessLaunchError, ProcessTimeoutError
from .process import ProcessRunner

logger = logging.getLogger(__name__)


class RuntimeDetector:
    """Finds a container runtime binary that can be invoked on this host."""

    def __init__(self, runner: Optional[ProcessRunner] = None):
        self.runner = runner or ProcessRunner()

    def detect(self, preferred: Optional[str] = None) -> RuntimeHandle:
        """Pick the runtime to use for one operation.

        A runtime is usable when ``<runtime> --version`` can be launched. Its
        exit status is ignored.

        Args:
            preferred: Only try this runtime instead of docker then podman

        Returns:
            Handle bound to the first launchable runtime

        Raises:
            NoRuntimeAvailableError: If no candidate can be launched
        """
        candidates = (preferred,) if preferred else SUPPORTED_RUNTIMES
        for binary in candidates:
            if self.is_launchable(binary):
                logger.info(f"Using container runtime: {binary}")
                return RuntimeHandle(binary)

        if preferred:
            raise NoRuntimeAvailableError(
                f"Container runtime '{preferred}' not found. Please install it or choose another runtime."
            )
        raise NoRuntimeAvailableError()

    def is_launchable(self, binary: str) -> bool:
        """Check whether ``binary --version`` starts at all."""
        try:
            self.runner.launch([binary, "--version"])
            return True
        except ProcessTimeoutError:
            # It started, it just hung
            return True
        except ProcessLaunchError as e:
            logger.debug(f"Runtime '{binary}' not available: {e}")
            return False
