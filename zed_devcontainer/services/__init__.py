"""Service layer for talking to the container runtime."""

from .container_service import ContainerService
from .process import ProcessResult, ProcessRunner
from .runtime_detector import RuntimeDetector
from .exceptions import (
    DevcontainerError,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    BuildSourceError,
    UnsupportedBuildSourceError,
    NoImageSpecifiedError,
    ServiceError,
    ProcessLaunchError,
    ProcessTimeoutError,
    NoRuntimeAvailableError,
    ContainerCreateError,
    ContainerStartError,
    ContainerInspectError,
    ContainerListError,
    HookError,
    MissingArgumentError,
    UnknownCommandError,
)

__all__ = [
    "ContainerService",
    "ProcessResult",
    "ProcessRunner",
    "RuntimeDetector",
    "DevcontainerError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "BuildSourceError",
    "UnsupportedBuildSourceError",
    "NoImageSpecifiedError",
    "ServiceError",
    "ProcessLaunchError",
    "ProcessTimeoutError",
    "NoRuntimeAvailableError",
    "ContainerCreateError",
    "ContainerStartError",
    "ContainerInspectError",
    "ContainerListError",
    "HookError",
    "MissingArgumentError",
    "UnknownCommandError",
]
