"""
Shared pytest fixtures for context server tests.

Stores are built with a deterministic ID factory so assertions can name IDs.
"""

import itertools

import pytest

from context_server.samples import seed_sample_items
from context_server.store import ContextStore


class SequentialIds:
    """ID factory yielding id-1, id-2, ... for readable assertions."""

    def __init__(self, prefix: str = "id-"):
        self._counter = itertools.count(1)
        self._prefix = prefix

    def __call__(self) -> str:
        return f"{self._prefix}{next(self._counter)}"


@pytest.fixture
def store():
    """Empty store with sequential IDs."""
    return ContextStore(id_factory=SequentialIds())


@pytest.fixture
def seeded_store(store):
    """Store holding the three sample items."""
    seed_sample_items(store)
    return store


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config and error logs out of the real home directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("CONTEXT_SERVER_HOME", str(home))
    return home

