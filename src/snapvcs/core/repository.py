"""snapvcs repository: wires the storage components together."""

from pathlib import Path
from typing import List, Optional, Union

from snapvcs.core.commit_log import CommitLog
from snapvcs.core.config import ConfigStore
from snapvcs.core.engine import CheckoutEngine, CommitEngine
from snapvcs.core.registry import TrackedFileRegistry
from snapvcs.core.storage import StorageRoot
from snapvcs.models.commit import Commit
from snapvcs.models.config import Config


class SvcsRepository:
    """Manages the snapshot repository of one working directory."""

    def __init__(
        self,
        work_dir: Union[str, Path],
        root_dir: Optional[Union[str, Path]] = None,
    ):
        self.storage = StorageRoot(work_dir, root_dir)
        self.registry = TrackedFileRegistry(self.storage)
        self.commit_log = CommitLog(self.storage)
        self.config_store = ConfigStore(self.storage)
        self.commit_engine = CommitEngine(self.storage)
        self.checkout_engine = CheckoutEngine(self.storage)

    @property
    def work_dir(self) -> Path:
        return self.storage.work_dir

    def exists(self) -> bool:
        """Check if the repository storage exists."""
        return self.storage.exists()

    def init(self) -> None:
        """Create the storage layout. Safe to call on every invocation."""
        self.storage.ensure()

    def config(self) -> Config:
        return self.config_store.load()

    def set_username(self, username: str) -> Config:
        return self.config_store.set_username(username)

    def tracked_files(self) -> List[str]:
        return self.registry.list()

    def add(self, path: Union[str, Path]) -> str:
        return self.registry.track(path)

    def commit(self, message: str) -> Commit:
        return self.commit_engine.commit(message)

    def checkout(self, commit_id: str) -> str:
        return self.checkout_engine.checkout(commit_id)

    def history(self) -> List[Commit]:
        """Commits newest first by timestamp."""
        return self.commit_log.history()
