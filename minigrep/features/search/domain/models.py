import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from minigrep.core.common.exceptions import EmptyQueryError, RootNotFoundError
from minigrep.core.config.settings import settings
from minigrep.core.shared_types import PathError

@dataclass(frozen=True)
class Query:
    """
    The literal text to look for, and how to compare it.
    Fixed for the whole run.
    """
    text: str
    ignore_case: bool = False

    def __post_init__(self):
        if not self.text:
            raise EmptyQueryError("Query cannot be empty.")


@dataclass(frozen=True)
class SearchRequest:
    """
    User intent to search a file or a directory tree.
    The root is checked once here, before any traversal starts.
    """
    query: Query
    root: Path = settings.DEFAULT_ROOT
    include_hidden: bool = settings.INCLUDE_HIDDEN

    def __post_init__(self):
        # Single stat: any failure to resolve the root (missing, name too long,
        # no search permission on a parent) is fatal
        try:
            mode = self.root.stat().st_mode
        except OSError as e:
            raise RootNotFoundError(f"Search root not found: {self.root} ({e.strerror or e})") from e

        if not (stat.S_ISREG(mode) or stat.S_ISDIR(mode)):
            raise RootNotFoundError(f"Search root is neither a file nor a directory: {self.root}")


@dataclass(frozen=True)
class MatchRecord:
    """
    One matching line, annotated with where it came from.
    """
    source_path: Path
    line_number: int
    line_text: str

    def __str__(self) -> str:
        return f"{self.source_path}:{self.line_number}:{self.line_text}"


@dataclass
class SearchSummary:
    """
    Counters kept while a run streams. No match history is stored.
    """
    files_scanned: int = 0
    files_matched: int = 0
    matches: int = 0
    errors: List[PathError] = field(default_factory=list)
