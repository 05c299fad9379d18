"""Shared fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def git_identity(monkeypatch):
    """Give git plumbing commands an author without touching global config."""
    for role in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{role}_NAME", "Test User")
        monkeypatch.setenv(f"GIT_{role}_EMAIL", "test@example.com")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep CORKBOARD_* variables and a stray corkboard.yaml out of tests."""
    for key in list(os.environ):
        if key.startswith("CORKBOARD_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
