"""Core mkcd pipeline."""

from mkcd.core.mkcd import MkcdResult, make_directory, run_mkcd

__all__ = ["MkcdResult", "make_directory", "run_mkcd"]
