"""devcontainer.json configuration model."""

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .hooks import HookCommand

Port = Annotated[int, Field(strict=True, ge=0, le=65535)]


class DevcontainerConfig(BaseModel):
    """Parsed devcontainer.json.

    Every key is optional so an incomplete file can still be loaded and
    shown. Whether an image is usable is only checked when a container is
    about to be created.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    name: Optional[str] = Field(None, description="Display name, also used for the container name")
    image: Optional[str] = Field(None, description="Image reference to run")
    dockerfile: Optional[str] = Field(None, description="Dockerfile path (not buildable yet)")
    context: Optional[str] = Field(None, description="Build context for the dockerfile")
    workspace_folder: Optional[str] = None
    workspace_mount: Optional[str] = Field(None, description="Overrides the default workspace bind mount")
    mounts: List[str] = Field(default_factory=list)
    run_args: List[str] = Field(default_factory=list, description="Extra arguments for 'run'")
    post_create_command: Optional[Any] = None
    post_start_command: Optional[Any] = None
    post_attach_command: Optional[Any] = None
    forward_ports: List[Port] = Field(default_factory=list)
    remote_user: Optional[str] = None

    @property
    def post_create_hook(self) -> Optional[HookCommand]:
        """postCreateCommand as a hook, or None when absent."""
        return self._hook(self.post_create_command)

    @property
    def post_start_hook(self) -> Optional[HookCommand]:
        """postStartCommand as a hook, or None when absent."""
        return self._hook(self.post_start_command)

    @property
    def post_attach_hook(self) -> Optional[HookCommand]:
        """postAttachCommand as a hook, or None when absent."""
        return self._hook(self.post_attach_command)

    @staticmethod
    def _hook(value: Any) -> Optional[HookCommand]:
        if value is None:
            return None
        return HookCommand.from_value(value)

    def to_json(self, indent: int = 2) -> str:
        """Serialize back to camelCase JSON, omitting unset keys."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
