"""Errors raised by the mkcd pipeline.

Every error carries a user-facing message; the CLI prints it prefixed with
``Error:`` and exits non-zero. The underlying platform error, when there is
one, is chained via ``__cause__``.
"""

from pathlib import Path


class MkcdError(Exception):
    """Base class for all mkcd failures."""


class HomeDirUnavailable(MkcdError):
    """The current user's home directory could not be determined."""


class PathResolutionError(MkcdError):
    """A path could not be converted to an absolute path."""


class NotADirectory(MkcdError):
    """The target path exists but is not a directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"'{path}' exists but is not a directory")


class DirectoryCreationError(MkcdError):
    """Creating the directory tree failed."""
