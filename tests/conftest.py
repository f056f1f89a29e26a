# File: tests/conftest.py

import os
import sys

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())


@pytest.fixture
def corpus(tmp_path):
    """
    Builds a small tree whose sorted depth-first order is known:

    corpus/
      .dot/x.txt        "alpha in dot dir"
      a.txt             "alpha / beta / alpha"
      b/.hidden.txt     "alpha hidden"
      b/c.txt           "gamma / the alpha line"
      d.txt             "delta / ALPHA"
      z.bin             binary (NUL bytes)
    """
    root = tmp_path / "corpus"
    root.mkdir()

    (root / ".dot").mkdir()
    (root / ".dot" / "x.txt").write_text("alpha in dot dir\n")

    (root / "a.txt").write_text("alpha\nbeta\nalpha")

    (root / "b").mkdir()
    (root / "b" / ".hidden.txt").write_text("alpha hidden\n")
    (root / "b" / "c.txt").write_text("gamma\nthe alpha line\n")

    (root / "d.txt").write_text("delta\nALPHA\n")
    (root / "z.bin").write_bytes(b"alpha\x00\x01\x02binary")

    return root


@pytest.fixture
def deny_listing(monkeypatch):
    """
    Makes os.scandir fail with EACCES for the given directories.
    Works the same when the suite runs as root, where chmod is ignored.
    """
    real_scandir = os.scandir
    denied = set()

    def fake_scandir(path="."):
        if os.fspath(path) in denied:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    def deny(*paths):
        denied.update(os.fspath(p) for p in paths)

    return deny
