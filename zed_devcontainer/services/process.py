"""Subprocess launching for container runtime commands."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_TIMEOUT
from .exceptions import ProcessLaunchError, ProcessTimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Captured outcome of a finished subprocess."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Whether the process exited with status 0."""
        return self.returncode == 0


class ProcessRunner:
    """Runs commands to completion and captures their output.

    This is the only place that touches ``subprocess``; everything above it
    talks to ``launch`` so it can be replaced with a fake in tests.
    """

    def __init__(self, timeout: Optional[float] = DEFAULT_TIMEOUT):
        """Initialize the runner.

        Args:
            timeout: Default timeout in seconds for each command (None waits forever)
        """
        self.timeout = timeout

    def launch(self, args: list[str], timeout: Optional[float] = None) -> ProcessResult:
        """Run a command and wait for it to finish.

        A nonzero exit status is not an error at this level; callers decide
        what the status means.

        Args:
            args: Program followed by its arguments
            timeout: Timeout in seconds overriding the runner default

        Returns:
            Exit status and decoded output

        Raises:
            ProcessTimeoutError: If the command runs past its timeout
            ProcessLaunchError: If the program cannot be started
        """
        effective_timeout = timeout if timeout is not None else self.timeout
        logger.debug(f"Running: {' '.join(args)}")
        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=effective_timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ProcessTimeoutError(
                f"'{args[0]}' timed out after {effective_timeout} seconds"
            ) from e
        except OSError as e:
            raise ProcessLaunchError(str(e)) from e

        logger.debug(f"{args[0]} exited with {completed.returncode}")
        return ProcessResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
