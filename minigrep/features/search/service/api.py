from pathlib import Path
from typing import Callable, Optional, Union

from minigrep.core.config.settings import settings
from minigrep.core.shared_types import PathError

from ..domain.models import Query, SearchRequest
from .engine import SearchEngine, SearchRun

def search(
    query: str,
    root: Union[str, Path, None] = None,
    ignore_case: bool = False,
    include_hidden: Optional[bool] = None,
    on_error: Optional[Callable[[PathError], None]] = None,
) -> SearchRun:
    """
    Standalone API: search `root` (default: the configured default root)
    for lines containing `query`.

    Raises:
        EmptyQueryError: `query` is empty.
        RootNotFoundError: `root` does not exist or is not a file/directory.
    """
    request = SearchRequest(
        query=Query(text=query, ignore_case=ignore_case),
        root=Path(root) if root is not None else settings.DEFAULT_ROOT,
        include_hidden=settings.INCLUDE_HIDDEN if include_hidden is None else include_hidden,
    )
    return engine.run(request, on_error=on_error)

# Singleton Instance for easy import
engine = SearchEngine()
