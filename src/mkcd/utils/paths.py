"""Path utilities for expanding, resolving and materializing directories."""

import os
import stat
from pathlib import Path

from mkcd.exceptions import (
    DirectoryCreationError,
    HomeDirUnavailable,
    NotADirectory,
    PathResolutionError,
)

HOME_MARKER = "~"
DIR_MODE = 0o755


def home_dir() -> str:
    """Return the current user's home directory.

    Raises:
        HomeDirUnavailable: If the platform cannot determine it
    """
    # An empty $HOME makes Path.home() return "/" instead of failing
    if os.name == "posix" and os.environ.get("HOME") == "":
        raise HomeDirUnavailable("could not determine home directory: $HOME is empty")

    try:
        home = str(Path.home())
    except (RuntimeError, KeyError) as e:
        raise HomeDirUnavailable(f"could not determine home directory: {e}") from e

    if not home:
        raise HomeDirUnavailable("could not determine home directory")
    return home


def expand_tilde(path: str) -> str:
    """Expand a leading ~ to the current user's home directory.

    ``~`` alone becomes the home directory; ``~/rest`` becomes the home
    directory joined with ``rest``. Anything else is returned unchanged.

    Args:
        path: Raw path as given by the user

    Returns:
        The expanded path

    Raises:
        HomeDirUnavailable: If the path needs the home directory and it
            cannot be determined
    """
    if not path.startswith(HOME_MARKER):
        return path

    home = home_dir()
    if len(path) == 1:
        return home

    # ~user is not looked up; it is treated as a subdirectory of $HOME
    rest = path[1:].lstrip(os.sep + (os.altsep or ""))
    return os.path.normpath(os.path.join(home, rest))


def resolve_path(path: str) -> Path:
    """Expand ~ and convert a path to an absolute one.

    Relative paths are resolved against the current working directory.
    Normalization is lexical: ``..`` is collapsed textually and symlinks
    are not followed.

    Args:
        path: Path string that may contain ~ or be relative

    Returns:
        Absolute Path object
    """
    try:
        expanded = expand_tilde(path)
    except HomeDirUnavailable as e:
        raise HomeDirUnavailable(f"failed to expand tilde: {e}") from e

    try:
        return Path(os.path.abspath(expanded))
    except OSError as e:
        raise PathResolutionError(f"failed to resolve absolute path: {e}") from e


def expand_path(path: str) -> Path:
    """Expand and normalize a path, resolving ~ and relative paths."""
    return resolve_path(path)


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, creating it and its parents if necessary.

    An existing directory is left untouched.

    Args:
        path: Absolute directory path to ensure exists

    Returns:
        The path that was ensured

    Raises:
        NotADirectory: If the path exists but is not a directory
        DirectoryCreationError: If the directory tree could not be created
    """
    try:
        mode = path.stat().st_mode
    except OSError:
        mode = None

    if mode is not None:
        if not stat.S_ISDIR(mode):
            raise NotADirectory(path)
        return path

    try:
        _make_dirs(path)
    except OSError as e:
        raise DirectoryCreationError(f"error creating directory: {e}") from e

    return path


def _make_dirs(path: Path) -> None:
    # Path.mkdir(parents=True) only applies mode to the leaf
    missing = []
    current = path
    while not current.exists():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent

    for directory in reversed(missing):
        directory.mkdir(mode=DIR_MODE, exist_ok=True)
