# File: minigrep/core/common/enums.py

from enum import Enum, unique

@unique
class ErrorKind(str, Enum):
    ROOT_NOT_FOUND = "root_not_found"
    PATH_UNREADABLE = "path_unreadable"
    NOT_VALID_TEXT = "not_valid_text"
    EMPTY_QUERY = "empty_query"
