"""Commit model for the snapvcs commit log."""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, Field

# Log lines are TAB separated; these characters would break the record.
_ESCAPES = {"\\": "\\\\", "\t": "\\t", "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {"\\": "\\", "t": "\t", "n": "\n", "r": "\r"}
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def escape_field(value: str) -> str:
    """Escape a value so it fits in a single TAB-separated log field."""
    return "".join(_ESCAPES.get(char, char) for char in value)


def unescape_field(value: str) -> str:
    """Reverse escape_field. Unknown escape sequences are kept verbatim."""
    result = []
    chars = iter(value)
    for char in chars:
        if char != "\\":
            result.append(char)
            continue
        following = next(chars, "")
        result.append(_UNESCAPES.get(following, "\\" + following))
    return "".join(result)


def utc_now() -> datetime:
    """Current UTC time truncated to the millisecond precision of the log."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class Commit(BaseModel):
    """Represents a commit in the snapvcs commit log."""

    id: str = Field(min_length=1)
    message: str = Field(min_length=1)
    author: str = ""
    timestamp: datetime

    model_config = {"frozen": True}

    @property
    def timestamp_ms(self) -> int:
        """Timestamp as integer epoch milliseconds."""
        timestamp = self.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return (timestamp - _EPOCH) // timedelta(milliseconds=1)

    def to_line(self) -> str:
        """Serialize to one log line: id, author, timestamp, message."""
        return "\t".join(
            [
                escape_field(self.id),
                escape_field(self.author),
                str(self.timestamp_ms),
                escape_field(self.message),
            ]
        )

    @classmethod
    def from_line(cls, line: str) -> "Commit":
        """Parse a log line produced by to_line.

        Raises:
            ValueError: If the line does not hold four fields or the
                timestamp is not an integer.
        """
        parts = line.split("\t", 3)
        if len(parts) != 4:
            raise ValueError(f"expected 4 fields, found {len(parts)}")

        commit_id, author, timestamp, message = parts
        return cls(
            id=unescape_field(commit_id),
            author=unescape_field(author),
            timestamp=_EPOCH + timedelta(milliseconds=int(timestamp)),
            message=unescape_field(message),
        )

    def render(self) -> str:
        """Human readable block used by the history listing."""
        return f"commit {self.id}\nAuthor: {self.author}\n{self.message}\n"
