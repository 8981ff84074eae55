"""Config model for the snapvcs user configuration."""

from typing import Optional

from pydantic import BaseModel


class Config(BaseModel):
    """User configuration persisted as key=value lines."""

    username: Optional[str] = None

    @property
    def author(self) -> str:
        """Name stamped on new commits; empty when no username is configured."""
        return self.username or ""

    def to_text(self) -> str:
        if self.username is None:
            return ""
        return f"username={self.username}\n"
