"""Custom exceptions for zed-devcontainer."""

from typing import Optional


class DevcontainerError(Exception):
    """Base exception for all devcontainer errors."""

    pass


class ConfigError(DevcontainerError):
    """Exception raised when devcontainer.json cannot be loaded."""

    pass


class ConfigNotFoundError(ConfigError):
    """Exception raised when no devcontainer.json exists in the project."""

    def __init__(self, message: str = "No devcontainer.json found in project"):
        super().__init__(message)


class ConfigParseError(ConfigError):
    """Exception raised when devcontainer.json exists but is invalid."""

    def __init__(self, detail: str, path: Optional[str] = None):
        self.detail = detail
        self.path = path
        super().__init__(f"Failed to parse devcontainer.json: {detail}")


class BuildSourceError(DevcontainerError):
    """Exception raised when the configuration has no usable image."""

    pass


class UnsupportedBuildSourceError(BuildSourceError):
    """Exception raised for dockerfile-only configurations."""

    def __init__(self, dockerfile: str):
        self.dockerfile = dockerfile
        super().__init__(
            "Building from Dockerfile not yet implemented. Please build the image "
            "manually and specify it in 'image' field. "
            f"Dockerfile: {dockerfile}"
        )


class NoImageSpecifiedError(BuildSourceError):
    """Exception raised when neither image nor dockerfile is set."""

    def __init__(self):
        super().__init__("No image or dockerfile specified in devcontainer.json")


class ServiceError(DevcontainerError):
    """Base exception for container runtime operations."""

    pass


class ProcessLaunchError(ServiceError):
    """Exception raised when a subprocess cannot be launched at all."""

    pass


class ProcessTimeoutError(ProcessLaunchError):
    """Exception raised when a subprocess does not finish in time."""

    pass


class NoRuntimeAvailableError(ServiceError):
    """Exception raised when no container runtime can be invoked."""

    def __init__(
        self,
        message: str = "Neither docker nor podman found. Please install a container runtime.",
    ):
        super().__init__(message)


class ContainerCreateError(ServiceError):
    """Exception raised when the runtime fails to create a container."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to create container: {detail}")


class ContainerStartError(ServiceError):
    """Exception raised when the runtime fails to start a container."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to start container: {detail}")


class ContainerInspectError(ServiceError):
    """Exception raised when the runtime cannot be invoked to inspect a container."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to inspect container: {detail}")


class ContainerListError(ServiceError):
    """Exception raised when the runtime cannot be invoked to list containers."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to list containers: {detail}")


class HookError(ServiceError):
    """Exception raised when a lifecycle command fails inside a container."""

    pass


class MissingArgumentError(DevcontainerError):
    """Exception raised when a required command argument is omitted."""

    pass


class UnknownCommandError(DevcontainerError):
    """Exception raised for an unrecognised slash command name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'unknown slash command: "{name}"')
