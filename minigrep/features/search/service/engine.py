import logging
from typing import Callable, Iterator, List, Optional

from minigrep.core.common.enums import ErrorKind
from minigrep.core.common.exceptions import NotValidTextError
from minigrep.core.shared_types import PathError, ReadError
from minigrep.features.line_scanner.service.scanner import scan
from minigrep.features.path_walker.data.file_walker import LocalFileWalker
from minigrep.features.path_walker.domain.interfaces import IFileWalker

from ..data.text_reader import LocalTextReader
from ..domain.interfaces import ITextReader
from ..domain.models import MatchRecord, SearchRequest, SearchSummary

logger = logging.getLogger(__name__)

class SearchRun:
    """
    A lazy stream of MatchRecords for one SearchRequest.

    Nothing is read until iteration starts. Walk and read errors are
    collected in `errors` (and passed to `on_error`) as they happen, next to
    the matches already produced. Iterating again restarts the search.
    """

    def __init__(
        self,
        request: SearchRequest,
        walker: IFileWalker,
        reader: ITextReader,
        on_error: Optional[Callable[[PathError], None]] = None,
    ):
        self.request = request
        self.walker = walker
        self.reader = reader
        self.on_error = on_error
        self.summary = SearchSummary()
        self._active: Optional[Iterator[MatchRecord]] = None

    @property
    def errors(self) -> List[PathError]:
        return self.summary.errors

    def __iter__(self) -> Iterator[MatchRecord]:
        self.close()
        self.summary = SearchSummary()
        self._active = self._generate()
        return self._active

    def close(self) -> None:
        """Stops the current iteration, if any, releasing what it holds."""
        if self._active is not None:
            self._active.close()
            self._active = None

    def _record_error(self, error: PathError) -> None:
        logger.debug(f"Skipping {error.path}: {error.message}")
        self.summary.errors.append(error)
        if self.on_error is not None:
            self.on_error(error)

    def _generate(self) -> Iterator[MatchRecord]:
        query = self.request.query
        summary = self.summary
        logger.info(f"Searching for {query.text!r} under: {self.request.root}")

        for file_path in self.walker.walk(self.request.root, self._record_error):
            try:
                content = self.reader.read_text(file_path)
            except NotValidTextError as e:
                self._record_error(ReadError(file_path, ErrorKind.NOT_VALID_TEXT, str(e)))
                continue
            except OSError as e:
                self._record_error(ReadError(file_path, ErrorKind.PATH_UNREADABLE, e.strerror or str(e)))
                continue

            summary.files_scanned += 1
            file_had_match = False

            for line_number, line_text in scan(content, query.text, query.ignore_case):
                if not file_had_match:
                    summary.files_matched += 1
                    file_had_match = True
                summary.matches += 1
                yield MatchRecord(source_path=file_path, line_number=line_number, line_text=line_text)

        logger.info(
            f"Search complete. {summary.matches} matches in "
            f"{summary.files_matched}/{summary.files_scanned} files, {len(summary.errors)} errors."
        )


class SearchEngine:
    """
    Orchestrates PathWalker, the text reader and LineScanner.
    """

    def __init__(self, walker: Optional[IFileWalker] = None, reader: Optional[ITextReader] = None):
        self.walker = walker
        self.reader = reader or LocalTextReader()

    def run(
        self,
        request: SearchRequest,
        on_error: Optional[Callable[[PathError], None]] = None,
    ) -> SearchRun:
        """
        Returns the lazy match stream for `request`.
        Fatal conditions were already rejected when the request was built.
        """
        walker = self.walker or LocalFileWalker(include_hidden=request.include_hidden)
        return SearchRun(request, walker, self.reader, on_error=on_error)
