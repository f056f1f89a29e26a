import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from minigrep.core.common.enums import ErrorKind
from minigrep.core.shared_types import WalkError
from ..domain.interfaces import ErrorHandler, IFileWalker
from ..domain.models import DirectoryFrame
from .ignore_rules import IgnoreRules

logger = logging.getLogger(__name__)

class LocalFileWalker(IFileWalker):
    """
    Depth-first walker over the local filesystem.

    Entries are visited in lexicographic order of name at every level, with
    subdirectories descended at the position they sort to. Symlinked
    directories are never entered; symlinks to files are yielded.
    """

    def __init__(self, include_hidden: bool = True):
        self.include_hidden = include_hidden

    def walk(self, root: Path, on_error: Optional[ErrorHandler] = None) -> Iterator[Path]:
        report = on_error or (lambda error: None)

        if root.is_dir():
            yield from self._walk_directory(root, report)
        elif root.is_file():
            yield root
        else:
            report(WalkError(root, ErrorKind.PATH_UNREADABLE, "not a regular file or directory"))

    def _walk_directory(self, root: Path, report: ErrorHandler) -> Iterator[Path]:
        # Explicit stack: one frame per directory on the current descent path
        stack: List[DirectoryFrame] = []
        frame = self._open_frame(root, report)
        if frame is not None:
            stack.append(frame)

        while stack:
            entry = stack[-1].next_entry()
            if entry is None:
                stack.pop()
                continue

            path = Path(entry.path)
            if IgnoreRules.should_ignore(path, self.include_hidden):
                logger.debug(f"Skipping hidden entry: {path}")
                continue

            try:
                if entry.is_dir(follow_symlinks=False):
                    child = self._open_frame(path, report)
                    if child is not None:
                        stack.append(child)
                    continue

                if entry.is_file():
                    yield path
                elif entry.is_symlink() and not path.exists():
                    report(WalkError(path, ErrorKind.PATH_UNREADABLE, "broken symbolic link"))
                else:
                    # Symlinked directories and special files (fifo, socket, device)
                    logger.debug(f"Not descending into / reading: {path}")
            except OSError as e:
                report(WalkError(path, ErrorKind.PATH_UNREADABLE, e.strerror or str(e)))

    def _open_frame(self, directory: Path, report: ErrorHandler) -> Optional[DirectoryFrame]:
        """
        Lists one directory and closes the handle straight away, so an
        abandoned walk never leaves a listing open.
        """
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug(f"Cannot list directory {directory}: {e}")
            report(WalkError(directory, ErrorKind.PATH_UNREADABLE, e.strerror or str(e)))
            return None

        return DirectoryFrame(entries=entries)
