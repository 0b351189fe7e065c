"""Exceptions raised by dynamsg."""

from pathlib import Path


class DynamsgError(Exception):
    """Base class for dynamsg errors."""


class MessagReadError(DynamsgError):
    """A message file could not be opened or read."""

    def __init__(self, filepath, cause: OSError):
        self.filepath = Path(filepath)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"{self.filepath}: {reason}")
