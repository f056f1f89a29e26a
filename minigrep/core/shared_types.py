from dataclasses import dataclass
from pathlib import Path

from minigrep.core.common.enums import ErrorKind

@dataclass(frozen=True)
class PathError:
    """
    Value Object describing a non-fatal failure tied to one path.
    Collected during a run and surfaced next to the matches, never raised.
    """
    path: Path
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class WalkError(PathError):
    """A directory or entry the walker could not open or stat."""


class ReadError(PathError):
    """A candidate file that could not be read as text."""
