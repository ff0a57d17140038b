"""Command output models returned to the editor."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class OutputSection:
    """A labelled range of the output text, in UTF-8 byte offsets."""
    start: int
    end: int
    label: str


@dataclass
class CommandOutput:
    """Report produced by a slash command."""

    text: str
    sections: List[OutputSection] = field(default_factory=list)

    @classmethod
    def single_section(cls, text: str, label: str) -> 'CommandOutput':
        """Create output with one section covering the whole text."""
        end = len(text.encode("utf-8"))
        return cls(text=text, sections=[OutputSection(0, end, label)])

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'text': self.text,
            'sections': [
                {'range': [s.start, s.end], 'label': s.label}
                for s in self.sections
            ],
        }


@dataclass(frozen=True)
class ArgumentCompletion:
    """A suggested argument for a slash command."""
    label: str
    new_text: str
    run_command: bool = False
