"""Tests for the storage root layout and the content comparator."""

import tempfile
from pathlib import Path

import pytest

from snapvcs.core.comparator import contents_equal
from snapvcs.core.errors import PathOutsideWorkTreeError
from snapvcs.core.storage import StorageRoot


@pytest.fixture
def work_dir():
    """Create a temporary working directory."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


def test_ensure_creates_layout(work_dir):
    storage = StorageRoot(work_dir)
    assert not storage.exists()

    storage.ensure()

    assert storage.exists()
    assert storage.root_dir == storage.work_dir / "vcs"
    assert storage.commits_dir.is_dir()
    assert storage.log_file.is_file()
    assert storage.tracked_file.is_file()
    assert storage.config_file.is_file()


def test_ensure_is_idempotent(work_dir):
    storage = StorageRoot(work_dir)
    storage.ensure()
    storage.log_file.write_text("keep me\n")

    storage.ensure()

    assert storage.log_file.read_text() == "keep me\n"


def test_resolve_work_path_normalizes(work_dir):
    storage = StorageRoot(work_dir)
    assert storage.resolve_work_path("a.txt") == "a.txt"
    assert storage.resolve_work_path("./src/../a.txt") == "a.txt"
    assert storage.resolve_work_path(storage.work_dir / "src" / "b.txt") == "src/b.txt"


@pytest.mark.parametrize("path", ["../outside.txt", ".", "vcs", "vcs/log"])
def test_resolve_work_path_rejects_paths_outside_work_tree(work_dir, path):
    storage = StorageRoot(work_dir)
    with pytest.raises(PathOutsideWorkTreeError):
        storage.resolve_work_path(path)


class TestContentsEqual:
    """Byte comparison of files and directories."""

    def test_identical_files(self, work_dir):
        (work_dir / "a").write_bytes(b"same")
        (work_dir / "b").write_bytes(b"same")
        assert contents_equal(work_dir / "a", work_dir / "b")

    def test_different_files(self, work_dir):
        (work_dir / "a").write_bytes(b"v1")
        (work_dir / "b").write_bytes(b"v2")
        assert not contents_equal(work_dir / "a", work_dir / "b")

    def test_missing_path_is_never_equal(self, work_dir):
        (work_dir / "a").write_bytes(b"v1")
        assert not contents_equal(work_dir / "a", work_dir / "missing")
        assert not contents_equal(work_dir / "missing", work_dir / "a")
        assert not contents_equal(work_dir / "missing", work_dir / "missing")

    def test_file_against_directory(self, work_dir):
        (work_dir / "a").write_bytes(b"v1")
        (work_dir / "d").mkdir()
        assert not contents_equal(work_dir / "a", work_dir / "d")

    def test_directory_trees(self, work_dir):
        for name in ("left", "right"):
            (work_dir / name / "sub").mkdir(parents=True)
            (work_dir / name / "sub" / "f.txt").write_text("content")
        assert contents_equal(work_dir / "left", work_dir / "right")

        (work_dir / "right" / "sub" / "f.txt").write_text("changed")
        assert not contents_equal(work_dir / "left", work_dir / "right")

        (work_dir / "right" / "sub" / "f.txt").write_text("content")
        (work_dir / "right" / "extra.txt").write_text("new")
        assert not contents_equal(work_dir / "left", work_dir / "right")
