from pathlib import Path
from typing import Optional

from minigrep.core.common.exceptions import NotValidTextError
from minigrep.core.config.settings import settings
from ..domain.interfaces import ITextReader

class LocalTextReader(ITextReader):
    def __init__(self, encoding: Optional[str] = None):
        self.encoding = encoding or settings.FILE_ENCODING

    def read_text(self, path: Path) -> str:
        """
        Opens, fully reads and closes the file before returning, so at most
        one handle is open at a time.
        """
        with open(path, "rb") as f:
            raw = f.read()

        # NUL bytes are a reliable sign of binary content
        if b"\x00" in raw:
            raise NotValidTextError("binary file (contains NUL bytes)")

        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise NotValidTextError(f"not valid {self.encoding} text (byte offset {e.start})")
