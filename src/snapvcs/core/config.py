"""Persistence for the user configuration."""

import logging

from snapvcs.core.storage import StorageRoot
from snapvcs.models.config import Config

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads and writes the key=value config file of a storage root."""

    def __init__(self, storage: StorageRoot):
        self.config_file = storage.config_file

    def load(self) -> Config:
        if not self.config_file.exists():
            return Config()

        values = {}
        for line in self.config_file.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            key, sep, value = line.partition("=")
            if not sep:
                logger.warning("Ignoring malformed config line: %r", line)
                continue
            values[key.strip()] = value

        username = values.get("username")
        return Config(username=username or None)

    def save(self, config: Config) -> None:
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(config.to_text(), encoding="utf-8")

    def set_username(self, username: str) -> Config:
        """Persist a new username and return the updated config."""
        config = self.load().model_copy(update={"username": username})
        self.save(config)
        logger.debug("Username set to %r", username)
        return config
