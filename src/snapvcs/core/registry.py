"""Registry of the working-directory paths that get snapshotted."""

import logging
from pathlib import Path
from typing import List, Union

from snapvcs.core.errors import AlreadyTrackedError, PathNotFoundError
from snapvcs.core.storage import StorageRoot

logger = logging.getLogger(__name__)


class TrackedFileRegistry:
    """Ordered set of tracked paths persisted one per line.

    Paths are stored relative to the working directory. Entries are only
    ever added; a tracked path stays tracked after the file disappears.
    """

    def __init__(self, storage: StorageRoot):
        self.storage = storage
        self.tracked_file = storage.tracked_file

    def list(self) -> List[str]:
        """Return tracked paths in the order they were added."""
        if not self.tracked_file.exists():
            self.tracked_file.parent.mkdir(parents=True, exist_ok=True)
            self.tracked_file.touch()
            return []

        paths: List[str] = []
        for line in self.tracked_file.read_text(encoding="utf-8").splitlines():
            if line and line not in paths:
                paths.append(line)
        return paths

    def __contains__(self, path: str) -> bool:
        return path in self.list()

    def track(self, path: Union[str, Path]) -> str:
        """Start tracking a path and return its normalized form.

        Raises:
            PathNotFoundError: If the path does not exist on disk.
            AlreadyTrackedError: If the path is tracked already.
            PathOutsideWorkTreeError: If the path is not inside the
                working directory.
        """
        relative = self.storage.resolve_work_path(path)
        if not self.storage.work_path(relative).exists():
            raise PathNotFoundError(str(path))

        paths = self.list()
        if relative in paths:
            raise AlreadyTrackedError(relative)

        paths.append(relative)
        self._save(paths)
        logger.debug("Tracking %s (%d tracked paths)", relative, len(paths))
        return relative

    def _save(self, paths: List[str]) -> None:
        self.tracked_file.write_text(
            "".join(f"{path}\n" for path in paths), encoding="utf-8"
        )
