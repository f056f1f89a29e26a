from typing import List

from ..domain.interfaces import ILineMatcher, Span

def find_all(haystack: str, needle: str) -> List[Span]:
    found = []
    start = haystack.find(needle)
    while start != -1:
        end = start + len(needle)
        found.append((start, end))
        start = haystack.find(needle, end)
    return found


class ExactMatcher(ILineMatcher):
    """Plain case-sensitive substring containment."""

    def __init__(self, query: str):
        self.query = query

    def matches(self, line: str) -> bool:
        return self.query in line

    def spans(self, line: str) -> List[Span]:
        return find_all(line, self.query)


class CaseFoldMatcher(ILineMatcher):
    """
    Case-insensitive containment using Unicode full case folding.
    str.casefold() is locale independent and handles cases lower() gets
    wrong, e.g. "Straße" and "STRASSE" compare equal.
    """

    def __init__(self, query: str):
        self.folded_query = query.casefold()

    def matches(self, line: str) -> bool:
        return self.folded_query in line.casefold()

    def spans(self, line: str) -> List[Span]:
        # Folding can change lengths ("ß" -> "ss"), so fold per character and
        # remember which original character each folded one came from.
        folded_parts = []
        origin = []
        for index, char in enumerate(line):
            folded_char = char.casefold()
            folded_parts.append(folded_char)
            origin.extend([index] * len(folded_char))
        folded = "".join(folded_parts)

        result: List[Span] = []
        for start, end in find_all(folded, self.folded_query):
            span = (origin[start], origin[end - 1] + 1)
            # Two hits inside one expanded character collapse into one span
            if result and span[0] < result[-1][1]:
                continue
            result.append(span)
        return result


def build_matcher(query: str, ignore_case: bool) -> ILineMatcher:
    if ignore_case:
        return CaseFoldMatcher(query)
    return ExactMatcher(query)
