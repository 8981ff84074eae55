"""Append-only commit log."""

import logging
from typing import List, Optional

from pydantic import ValidationError as ModelValidationError

from snapvcs.core.errors import CorruptLogError
from snapvcs.core.storage import StorageRoot
from snapvcs.models.commit import Commit

logger = logging.getLogger(__name__)


class CommitLog:
    """Commit records stored one per line in append order.

    File order is the source of truth for "latest"; history listings
    re-sort by timestamp.
    """

    def __init__(self, storage: StorageRoot):
        self.log_file = storage.log_file

    def append(self, commit: Commit) -> None:
        """Append a commit record. Existing lines are never rewritten."""
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_file, "a", encoding="utf-8", newline="\n") as f:
            f.write(commit.to_line() + "\n")
        logger.debug("Appended commit %s to %s", commit.id, self.log_file)

    def all(self) -> List[Commit]:
        """Parse every non-empty line of the log in file order."""
        if not self.log_file.exists():
            return []

        commits = []
        text = self.log_file.read_text(encoding="utf-8")
        for line_number, line in enumerate(text.split("\n"), start=1):
            if not line:
                continue
            try:
                commits.append(Commit.from_line(line))
            except (ValueError, ModelValidationError) as e:
                raise CorruptLogError(line_number, str(e)) from e
        return commits

    def latest(self) -> Optional[Commit]:
        """Last appended commit, regardless of timestamps."""
        commits = self.all()
        return commits[-1] if commits else None

    def history(self) -> List[Commit]:
        """Commits newest first by timestamp; ties keep log order."""
        return sorted(self.all(), key=lambda c: c.timestamp, reverse=True)

    def __len__(self) -> int:
        return len(self.all())
