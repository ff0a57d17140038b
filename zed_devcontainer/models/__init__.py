"""Models for zed-devcontainer."""

from .config import DevcontainerConfig
from .container import ContainerState, ContainerSummary, RunArguments, RuntimeHandle
from .hooks import HookCommand, HookKind
from .output import ArgumentCompletion, CommandOutput, OutputSection

__all__ = [
    'DevcontainerConfig',
    'ContainerState',
    'ContainerSummary',
    'RunArguments',
    'RuntimeHandle',
    'HookCommand',
    'HookKind',
    'ArgumentCompletion',
    'CommandOutput',
    'OutputSection'
]
