from dataclasses import dataclass
from os import DirEntry
from typing import List

@dataclass
class DirectoryFrame:
    """
    One level of the depth-first descent: the sorted entries of a single
    directory and the position of the next entry to visit.
    """
    entries: List[DirEntry]
    position: int = 0

    def next_entry(self):
        if self.position >= len(self.entries):
            return None
        entry = self.entries[self.position]
        self.position += 1
        return entry
