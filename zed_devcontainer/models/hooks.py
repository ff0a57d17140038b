"""Lifecycle hook command models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class HookKind(Enum):
    """Shape of a lifecycle command in devcontainer.json."""
    SHELL = "shell"
    ARGV = "argv"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class HookCommand:
    """A postCreate/postStart/postAttach command.

    devcontainer.json allows a single shell string or a list of tokens. Any
    other JSON shape is kept as UNSUPPORTED and never runs.
    """

    kind: HookKind
    command: Optional[str] = None
    tokens: tuple[str, ...] = ()

    @classmethod
    def from_value(cls, value: Any) -> 'HookCommand':
        """Create from a raw JSON value."""
        if isinstance(value, str):
            return cls(kind=HookKind.SHELL, command=value)
        if isinstance(value, list):
            # Non-string tokens are dropped rather than stringified
            tokens = tuple(token for token in value if isinstance(token, str))
            return cls(kind=HookKind.ARGV, tokens=tokens)
        return cls(kind=HookKind.UNSUPPORTED)

    def shell_command(self) -> Optional[str]:
        """Command line to pass to ``sh -c``, or None when nothing should run.

        Token lists are flattened with single spaces, not passed as argv.
        """
        if self.kind is HookKind.SHELL:
            return self.command
        if self.kind is HookKind.ARGV:
            return " ".join(self.tokens)
        return None
