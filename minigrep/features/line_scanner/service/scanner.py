from typing import Iterator, List, Tuple

from ..data.matchers import build_matcher
from ..domain.interfaces import Span
from ..domain.models import LineMatch

def split_lines(content: str) -> Iterator[Tuple[int, str]]:
    """
    Lazily yields (line_number, line) pairs, numbering from 1.

    Lines end at "\\n"; a "\\r" left before it is dropped so CRLF files
    report clean text. The last line is yielded even without a terminator,
    a trailing terminator does not add an empty line, and empty content
    yields nothing.
    """
    start = 0
    line_number = 0
    length = len(content)

    while start < length:
        end = content.find("\n", start)
        if end == -1:
            end = length
        line = content[start:end]
        if line.endswith("\r"):
            line = line[:-1]
        line_number += 1
        yield line_number, line
        start = end + 1


def scan(content: str, query: str, ignore_case: bool = False) -> Iterator[LineMatch]:
    """
    Yields every line of `content` containing `query`, in ascending order.

    Each call builds a fresh generator, so scanning the same content twice
    yields the same sequence. The reported text is always the original line.
    """
    matcher = build_matcher(query, ignore_case)

    for line_number, line in split_lines(content):
        if matcher.matches(line):
            yield LineMatch(line_number=line_number, line_text=line)


def match_spans(line: str, query: str, ignore_case: bool = False) -> List[Span]:
    """
    Character offsets of each occurrence of `query` in `line`, used to
    highlight matches. With `ignore_case` the offsets still index the
    original, unfolded line.
    """
    return build_matcher(query, ignore_case).spans(line)
