from abc import ABC, abstractmethod
from pathlib import Path

class ITextReader(ABC):
    @abstractmethod
    def read_text(self, path: Path) -> str:
        """
        Reads the whole file as text.

        Raises:
            OSError: the file cannot be opened or read.
            NotValidTextError: the bytes are not text in the configured encoding.
        """
        pass
