"""Shared pytest fixtures for mkcd tests."""

import os

import pytest


@pytest.fixture
def home_dir(tmp_path, monkeypatch):
    """Point $HOME at an isolated temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture
def work_dir(tmp_path, monkeypatch):
    """Run the test from an isolated working directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that change mkcd's configuration."""
    for name in ("MKCD_VERBOSE", "MKCD_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def no_home(monkeypatch):
    """Make the home directory lookup fail."""

    def _fail(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr("pathlib.Path.home", classmethod(_fail))


@pytest.fixture
def zero_umask():
    """Clear the process umask so requested modes apply unmasked."""
    old = os.umask(0)
    yield
    os.umask(old)
