import os
from pathlib import Path

import pytest

from minigrep.core.common.enums import ErrorKind
from minigrep.core.common.exceptions import EmptyQueryError, RootNotFoundError
from minigrep.core.shared_types import ReadError, WalkError
from minigrep.features.search.domain.interfaces import ITextReader
from minigrep.features.search.domain.models import MatchRecord, Query, SearchRequest
from minigrep.features.search.service.api import search
from minigrep.features.search.service.engine import SearchEngine


def as_tuples(records, root):
    return [(r.source_path.relative_to(root).as_posix(), r.line_number, r.line_text) for r in records]


class FlakyReader(ITextReader):
    """Fails on chosen files, reads the rest from disk."""

    def __init__(self, failing):
        self.failing = set(failing)

    def read_text(self, path: Path) -> str:
        if path in self.failing:
            raise PermissionError(13, "Permission denied", str(path))
        return path.read_text()


# --- single file ---

def test_single_file_root(tmp_path):
    foo = tmp_path / "foo.txt"
    foo.write_text("alpha\nbeta\nalpha")

    records = list(search("alpha", root=foo))

    assert records == [
        MatchRecord(foo, 1, "alpha"),
        MatchRecord(foo, 3, "alpha"),
    ]


def test_match_record_output_format(tmp_path):
    record = MatchRecord(Path("src") / "foo.txt", 12, "  alpha: beta")

    assert str(record) == f"{Path('src') / 'foo.txt'}:12:  alpha: beta"


# --- directory trees ---

def test_tree_matches_follow_traversal_order(corpus):
    run = search("alpha", root=corpus)

    assert as_tuples(run, corpus) == [
        (".dot/x.txt", 1, "alpha in dot dir"),
        ("a.txt", 1, "alpha"),
        ("a.txt", 3, "alpha"),
        ("b/.hidden.txt", 1, "alpha hidden"),
        ("b/c.txt", 2, "the alpha line"),
    ]
    assert run.errors == [
        ReadError(corpus / "z.bin", ErrorKind.NOT_VALID_TEXT, "binary file (contains NUL bytes)")
    ]


def test_ignore_case_tree(corpus):
    run = search("ALPHA", root=corpus, ignore_case=True, include_hidden=False)

    assert as_tuples(run, corpus) == [
        ("a.txt", 1, "alpha"),
        ("a.txt", 3, "alpha"),
        ("b/c.txt", 2, "the alpha line"),
        ("d.txt", 2, "ALPHA"),
    ]


def test_no_matches_is_not_an_error(corpus):
    (corpus / "z.bin").unlink()

    run = search("no such text anywhere", root=corpus)

    assert list(run) == []
    assert run.errors == []
    assert run.summary.files_scanned == 5


def test_unreadable_subdirectory_keeps_other_matches(tmp_path, deny_listing):
    """
    One unreadable subdirectory and one readable file:
    matches from the file plus exactly one error for the directory.
    """
    (tmp_path / "locked").mkdir()
    (tmp_path / "locked" / "secret.txt").write_text("alpha\n")
    (tmp_path / "open.txt").write_text("alpha\n")
    deny_listing(tmp_path / "locked")

    run = search("alpha", root=tmp_path)

    assert as_tuples(run, tmp_path) == [("open.txt", 1, "alpha")]
    assert run.errors == [
        WalkError(tmp_path / "locked", ErrorKind.PATH_UNREADABLE, "Permission denied")
    ]


def test_read_failure_is_recorded_and_run_continues(corpus):
    engine = SearchEngine(reader=FlakyReader([corpus / "a.txt", corpus / "z.bin"]))
    request = SearchRequest(Query("alpha"), root=corpus, include_hidden=False)

    run = engine.run(request)

    assert as_tuples(run, corpus) == [("b/c.txt", 2, "the alpha line")]
    assert [(e.path.name, e.kind) for e in run.errors] == [
        ("a.txt", ErrorKind.PATH_UNREADABLE),
        ("z.bin", ErrorKind.PATH_UNREADABLE),
    ]


def test_invalid_utf8_file_is_not_valid_text(tmp_path):
    (tmp_path / "latin1.txt").write_bytes("café alpha\n".encode("latin-1"))
    (tmp_path / "utf8.txt").write_text("café alpha\n", encoding="utf-8")

    run = search("alpha", root=tmp_path)

    assert as_tuples(run, tmp_path) == [("utf8.txt", 1, "café alpha")]
    assert len(run.errors) == 1
    assert run.errors[0].kind == ErrorKind.NOT_VALID_TEXT
    assert run.errors[0].path == tmp_path / "latin1.txt"


# --- fatal conditions ---

def test_empty_query_rejected_before_traversal(corpus, monkeypatch):
    def no_listing(*args, **kwargs):
        raise AssertionError("traversal must not start for an empty query")

    monkeypatch.setattr(os, "scandir", no_listing)

    with pytest.raises(EmptyQueryError):
        search("", root=corpus)


def test_missing_root_is_fatal(tmp_path):
    with pytest.raises(RootNotFoundError):
        search("alpha", root=tmp_path / "missing")


# --- streaming contract ---

def test_matches_stream_before_walk_finishes(corpus):
    visited = []

    class RecordingWalker:
        def walk(self, root, on_error=None):
            for name in ["a.txt", "b/c.txt", "d.txt"]:
                visited.append(name)
                yield root / name

    engine = SearchEngine(walker=RecordingWalker())
    matches = iter(engine.run(SearchRequest(Query("alpha"), root=corpus)))

    first = next(matches)

    assert first == MatchRecord(corpus / "a.txt", 1, "alpha")
    assert visited == ["a.txt"]
    matches.close()


def test_errors_are_reported_as_they_happen(corpus):
    seen = []
    run = search("alpha", root=corpus, on_error=seen.append)

    records = iter(run)
    next(records)
    assert seen == []

    list(records)
    assert [e.path.name for e in seen] == ["z.bin"]


def test_summary_counts(corpus):
    run = search("alpha", root=corpus)
    list(run)

    assert run.summary.files_scanned == 5
    assert run.summary.files_matched == 4
    assert run.summary.matches == 5
    assert len(run.summary.errors) == 1


def test_iterating_again_restarts_the_run(corpus):
    run = search("alpha", root=corpus)

    first = list(run)
    second = list(run)

    assert first == second
    assert len(run.errors) == 1


def test_close_stops_the_run(corpus):
    run = search("alpha", root=corpus)
    records = iter(run)
    next(records)

    run.close()

    assert list(records) == []


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs os.mkfifo")
def test_fifo_in_tree_is_never_opened(corpus):
    """
    Opening a FIFO with no writer blocks forever; finishing the run shows
    the engine never tried.
    """
    os.mkfifo(corpus / "b" / "pipe")

    run = search("alpha", root=corpus)

    assert len(list(run)) == 5
    assert [e.path.name for e in run.errors] == ["z.bin"]
