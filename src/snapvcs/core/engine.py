"""Commit and checkout of tracked-file snapshots."""

import logging
import shutil
import uuid
from pathlib import Path
from typing import List

from snapvcs.core.commit_log import CommitLog
from snapvcs.core.comparator import contents_equal
from snapvcs.core.config import ConfigStore
from snapvcs.core.errors import (
    CommitNotFoundError,
    EmptyMessageError,
    MissingArgumentError,
    NoChangesError,
    NothingTrackedError,
)
from snapvcs.core.registry import TrackedFileRegistry
from snapvcs.core.storage import StorageRoot
from snapvcs.models.commit import Commit, utc_now

logger = logging.getLogger(__name__)


def _copy_entry(source: Path, target: Path) -> None:
    """Copy a file or directory tree, replacing files and merging directories."""
    target.parent.mkdir(parents=True, exist_ok=True)
    if source.is_dir():
        if target.exists() and not target.is_dir():
            target.unlink()
        shutil.copytree(source, target, dirs_exist_ok=True)
    else:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        shutil.copy2(source, target)


def _same_content(current: Path, committed: Path) -> bool:
    """A path absent from both the working directory and the snapshot is unchanged."""
    if not current.exists() and not committed.exists():
        return True
    return contents_equal(current, committed)


def _remove_entry(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


class CommitEngine:
    """Creates commits from the current content of the tracked paths."""

    def __init__(self, storage: StorageRoot):
        self.storage = storage
        self.registry = TrackedFileRegistry(storage)
        self.log = CommitLog(storage)
        self.config = ConfigStore(storage)

    def commit(self, message: str) -> Commit:
        """Snapshot every tracked path and append a commit record.

        The snapshot is fully written before the log is appended, so a
        failed copy never leaves a log entry pointing at a partial
        snapshot.

        Raises:
            EmptyMessageError: If message is empty or None.
            NothingTrackedError: If no path is tracked.
            NoChangesError: If no tracked path differs from the latest
                commit's snapshot.
            OSError: If the snapshot cannot be written.
        """
        if not message:
            raise EmptyMessageError()

        tracked = self.registry.list()
        if not tracked:
            raise NothingTrackedError()

        previous = self.log.latest()
        if previous is not None and self._unchanged_since(previous, tracked):
            raise NoChangesError()

        commit_id = str(uuid.uuid4())
        snapshot_dir = self.storage.commit_dir(commit_id)
        snapshot_dir.mkdir(parents=True)
        try:
            self._write_snapshot(tracked, snapshot_dir)
        except OSError:
            shutil.rmtree(snapshot_dir, ignore_errors=True)
            raise

        commit = Commit(
            id=commit_id,
            message=message,
            author=self.config.load().author,
            timestamp=utc_now(),
        )
        self.log.append(commit)
        logger.info("Created commit %s with %d tracked paths", commit_id, len(tracked))
        return commit

    def _unchanged_since(self, previous: Commit, tracked: List[str]) -> bool:
        previous_dir = self.storage.commit_dir(previous.id)
        return all(
            _same_content(self.storage.work_path(path), previous_dir / path)
            for path in tracked
        )

    def _write_snapshot(self, tracked: List[str], snapshot_dir: Path) -> None:
        for path in tracked:
            source = self.storage.work_path(path)
            if not source.exists():
                logger.warning("Tracked path %s is missing, not included in snapshot", path)
                continue
            logger.debug("Copying %s into %s", path, snapshot_dir.name)
            _copy_entry(source, snapshot_dir / path)


class CheckoutEngine:
    """Restores the working directory from a commit snapshot."""

    def __init__(self, storage: StorageRoot):
        self.storage = storage
        self.registry = TrackedFileRegistry(storage)

    def resolve(self, commit_id: str) -> Path:
        """Snapshot directory for commit_id.

        Raises:
            CommitNotFoundError: If the id does not name a snapshot directory.
        """
        if "/" in commit_id or "\\" in commit_id or commit_id in (".", ".."):
            raise CommitNotFoundError(commit_id)
        snapshot_dir = self.storage.commit_dir(commit_id)
        if not snapshot_dir.is_dir():
            raise CommitNotFoundError(commit_id)
        return snapshot_dir

    def checkout(self, commit_id: str) -> str:
        """Replace the tracked paths with the content of a snapshot.

        Every currently tracked path is deleted, then every entry of the
        snapshot is copied back into the working directory. Untracked
        files are left alone. The registry itself is not rolled back.

        Raises:
            MissingArgumentError: If commit_id is empty or None.
            CommitNotFoundError: If no snapshot exists for commit_id.
        """
        if not commit_id:
            raise MissingArgumentError("Commit id")
        snapshot_dir = self.resolve(commit_id)

        for path in self.registry.list():
            logger.debug("Removing tracked path %s", path)
            _remove_entry(self.storage.work_path(path))

        for entry in sorted(snapshot_dir.iterdir()):
            logger.debug("Restoring %s from %s", entry.name, commit_id)
            _copy_entry(entry, self.storage.work_dir / entry.name)

        logger.info("Checked out commit %s", commit_id)
        return commit_id
