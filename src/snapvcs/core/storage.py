"""On-disk layout of a snapvcs repository."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from snapvcs.core.errors import PathOutsideWorkTreeError

logger = logging.getLogger(__name__)

STORAGE_DIR_NAME = "vcs"


class StorageRoot:
    """Handle on the working directory and the storage root beneath it.

    Layout::

        <root>/commits/<commit-id>/...   one snapshot per commit
        <root>/log                       commit records, append only
        <root>/tracked                   tracked paths, one per line
        <root>/config                    key=value user settings
    """

    def __init__(
        self,
        work_dir: Union[str, Path],
        root_dir: Optional[Union[str, Path]] = None,
    ):
        self.work_dir = Path(os.path.abspath(work_dir))
        if root_dir is None:
            self.root_dir = self.work_dir / STORAGE_DIR_NAME
        else:
            self.root_dir = Path(os.path.abspath(root_dir))
        self.commits_dir = self.root_dir / "commits"
        self.log_file = self.root_dir / "log"
        self.tracked_file = self.root_dir / "tracked"
        self.config_file = self.root_dir / "config"

    def exists(self) -> bool:
        """Check if the storage root has been initialized."""
        return self.root_dir.is_dir() and self.commits_dir.is_dir()

    def ensure(self) -> None:
        """Create any missing directory or file of the layout."""
        if not self.exists():
            logger.debug("Initializing storage root at %s", self.root_dir)
        self.commits_dir.mkdir(parents=True, exist_ok=True)
        for path in (self.log_file, self.tracked_file, self.config_file):
            path.touch(exist_ok=True)

    def commit_dir(self, commit_id: str) -> Path:
        """Snapshot directory for a commit id."""
        return self.commits_dir / commit_id

    def work_path(self, relative: str) -> Path:
        """Absolute location of a tracked path in the working directory."""
        return self.work_dir / relative

    def resolve_work_path(self, path: Union[str, Path]) -> str:
        """Normalize a user supplied path to a POSIX path relative to work_dir.

        Raises:
            PathOutsideWorkTreeError: If the path leaves the working
                directory, names the working directory itself, or points
                into the storage root.
        """
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.work_dir / candidate
        candidate = Path(os.path.normpath(candidate))

        try:
            relative = candidate.relative_to(self.work_dir)
        except ValueError:
            raise PathOutsideWorkTreeError(str(path)) from None

        if not relative.parts:
            raise PathOutsideWorkTreeError(str(path))
        if candidate == self.root_dir or self.root_dir in candidate.parents:
            raise PathOutsideWorkTreeError(str(path))
        return relative.as_posix()
