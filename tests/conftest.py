"""Shared pytest fixtures for the dice notation test suite."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory so no stray dice.toml is found."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
