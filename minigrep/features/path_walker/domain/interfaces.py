from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterator, Optional

from minigrep.core.shared_types import WalkError

ErrorHandler = Callable[[WalkError], None]

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Abstracts the listing strategy from the search engine.
    """
    @abstractmethod
    def walk(self, root: Path, on_error: Optional[ErrorHandler] = None) -> Iterator[Path]:
        """
        Yields candidate file paths one by one.
        Failures on individual paths are passed to `on_error` and the walk
        continues; they are never raised.
        """
        pass
