from typing import NamedTuple

class LineMatch(NamedTuple):
    # A single matching line inside one text buffer
    line_number: int  # 1-based
    line_text: str    # Original text, terminator stripped, never case-folded
