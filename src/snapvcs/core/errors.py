"""Exceptions raised by the snapvcs core.

Every error carries its user-facing message, so ``str(error)`` is what the
CLI prints. ValidationError covers bad input, StateError covers requests
that conflict with what is on disk. Both are reported without aborting
the process; OSError from the filesystem is left to propagate.
"""


class SvcsError(Exception):
    """Base class for reportable snapvcs errors."""


class ValidationError(SvcsError, ValueError):
    """A required argument is missing or malformed."""


class StateError(SvcsError):
    """The repository state does not allow the requested operation."""


class MissingArgumentError(ValidationError):
    def __init__(self, what: str):
        self.what = what
        super().__init__(f"{what} was not passed.")


class EmptyMessageError(MissingArgumentError):
    def __init__(self):
        super().__init__("Message")


class UnknownCommandError(ValidationError):
    def __init__(self, command: str):
        self.command = command
        super().__init__(f"'{command}' is not a SVCS command.")


class PathNotFoundError(StateError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Can't find '{path}'.")


class AlreadyTrackedError(StateError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The file '{path}' is tracked.")


class PathOutsideWorkTreeError(StateError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"'{path}' is outside the working directory.")


class NothingTrackedError(StateError):
    def __init__(self):
        super().__init__("Nothing to commit.")


class NoChangesError(StateError):
    def __init__(self):
        super().__init__("Nothing to commit.")


class CommitNotFoundError(StateError):
    def __init__(self, commit_id: str):
        self.commit_id = commit_id
        super().__init__("Commit does not exist.")


class CorruptLogError(StateError):
    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        super().__init__(f"Commit log is corrupt at line {line_number}: {reason}")
