"""Resolve a directory argument and make sure the directory exists."""

from dataclasses import dataclass
from pathlib import Path

from mkcd.utils.paths import ensure_dir, resolve_path


@dataclass
class MkcdResult:
    """Outcome of a single mkcd invocation."""

    input_path: str
    path: Path
    created: bool


def make_directory(dir_path: str) -> MkcdResult:
    """Resolve ``dir_path`` and create it (with parents) if it is missing.

    Args:
        dir_path: Directory argument as given by the user

    Returns:
        MkcdResult with the absolute path and whether it was created

    Raises:
        MkcdError: On the first failure in the pipeline
    """
    path = resolve_path(dir_path)
    existed = path.is_dir()
    ensure_dir(path)
    return MkcdResult(input_path=dir_path, path=path, created=not existed)


def run_mkcd(dir_path: str) -> Path:
    """Perform the mkcd operation and return the absolute path."""
    return make_directory(dir_path).path
