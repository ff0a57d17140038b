"""Container runtime models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


@dataclass(frozen=True)
class RuntimeHandle:
    """The container engine binary selected for one operation."""
    binary: str  # "docker" or "podman"

    def __str__(self) -> str:
        return self.binary


class ContainerState(Enum):
    """Observed running state of a container."""
    RUNNING = "Running"
    STOPPED = "Stopped"

    @property
    def is_running(self) -> bool:
        return self is ContainerState.RUNNING


@dataclass(frozen=True)
class ContainerSummary:
    """One row of ``ps`` output."""
    id: str
    name: str


@dataclass
class RunArguments:
    """Arguments for the runtime's ``run`` verb and the name they create."""
    container_name: str
    args: List[str] = field(default_factory=list)
