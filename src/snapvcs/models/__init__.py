"""Data models for snapvcs."""

from .commit import Commit
from .config import Config

__all__ = ["Commit", "Config"]
