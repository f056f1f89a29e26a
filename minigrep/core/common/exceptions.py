# File: minigrep/core/common/exceptions.py

from .enums import ErrorKind


class EmptyQueryError(ValueError):
    """Raised before any traversal when the query text is empty."""
    kind = ErrorKind.EMPTY_QUERY


class RootNotFoundError(FileNotFoundError):
    """
    The search root does not exist, or is neither a file nor a directory.
    Fatal: no matches are possible.
    """
    kind = ErrorKind.ROOT_NOT_FOUND


class NotValidTextError(ValueError):
    """File bytes do not decode under the configured encoding (or look binary)."""
    kind = ErrorKind.NOT_VALID_TEXT
