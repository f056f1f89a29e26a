from abc import ABC, abstractmethod
from typing import List, Tuple

Span = Tuple[int, int]

class ILineMatcher(ABC):
    """
    Contract for deciding whether one line contains the query.
    Implementations prepare the query once and are then applied per line.
    """
    @abstractmethod
    def matches(self, line: str) -> bool:
        """Returns True if the query occurs as a contiguous substring of the line."""
        pass

    @abstractmethod
    def spans(self, line: str) -> List[Span]:
        """
        Returns the (start, end) character offsets of every non-overlapping
        occurrence, left to right, as offsets into the original line.
        """
        pass
