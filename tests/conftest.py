"""Test fixtures for the entity registry.

This module provides:
- A fresh InMemoryEntityRegistry per test
- A registry pre-populated with a single LINK entity
- An isolated process-wide default registry, restored after each test
- Factory helpers for building entity instances
"""

from typing import Any

import pytest

from entregistry import default
from entregistry.registry import InMemoryEntityRegistry
from entschema.entity import EntityInstance, EntityMutability


def make_link(uri: str = "http://a", **extra: Any) -> EntityInstance:
    """Create a mutable LINK instance pointing at `uri`."""
    return EntityInstance(type="LINK", mutability=EntityMutability.MUTABLE, data={"uri": uri, **extra})


@pytest.fixture
def registry() -> InMemoryEntityRegistry:
    """Provide an empty registry."""
    return InMemoryEntityRegistry()


@pytest.fixture
def link_key(registry: InMemoryEntityRegistry) -> str:
    """Create a LINK entity in `registry` and return its key."""
    return registry.create("LINK", "MUTABLE", {"uri": "http://a"})


@pytest.fixture
def default_registry(monkeypatch, tmp_path):
    """Install an empty default registry for the duration of a test.

    The working directory is moved to an empty temp dir so that a stray
    entregistry.toml cannot influence the default config.
    """
    monkeypatch.delenv("ENTREGISTRY_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    previous = default.set_default_registry(None)
    yield default.get_default_registry()
    default.set_default_registry(previous)
