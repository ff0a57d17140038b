"""Constants used throughout zed-devcontainer."""


# Configuration discovery, in priority order
CONFIG_CANDIDATES = [
    ".devcontainer/devcontainer.json",
    ".devcontainer.json",
]

# Container runtimes, in detection order
SUPPORTED_RUNTIMES = ("docker", "podman")

# Container configuration
CONTAINER_PREFIX = "zed-devcontainer"
DEFAULT_WORKSPACE_TARGET = "/workspace"
KEEPALIVE_COMMAND = ["sleep", "infinity"]

# Runtime CLI output formats
PS_FORMAT = "{{.ID}}|{{.Names}}"
INSPECT_RUNNING_FORMAT = "{{.State.Running}}"

# Timeout values
DEFAULT_TIMEOUT = 120  # 2 minutes
PROVISION_TIMEOUT = 600  # 10 minutes, covers image pulls and setup commands

# Environment overrides for the command line
RUNTIME_ENV_VAR = "DEVCONTAINER_RUNTIME"
TIMEOUT_ENV_VAR = "DEVCONTAINER_TIMEOUT"

# Slash command names exposed to the editor
OPEN_COMMAND = "devcontainer-open"
REBUILD_COMMAND = "devcontainer-rebuild"
ATTACH_COMMAND = "devcontainer-attach"
