"""Process-wide default registry.

Most callers only ever need one registry for the lifetime of the process.
The module-level functions here operate on that registry, which is created
on first use from `load_registry_config()`. Callers that need separate
registries, one per open document for instance, should create their own
`InMemoryEntityRegistry` or `EditorSession` instead.
"""

from typing import Mapping

from pydantic import JsonValue

from entregistry.config import load_registry_config
from entregistry.registry import InMemoryEntityRegistry
from entschema.entity import EntityInstance, EntityMutability

_default_registry: InMemoryEntityRegistry | None = None


def get_default_registry() -> InMemoryEntityRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = InMemoryEntityRegistry(load_registry_config())
    return _default_registry


def set_default_registry(registry: InMemoryEntityRegistry | None) -> InMemoryEntityRegistry | None:
    """Install `registry` as the process-wide registry and return the previous one.

    Passing None makes the next call to get_default_registry() build a fresh one.
    """
    global _default_registry
    previous = _default_registry
    _default_registry = registry
    return previous


def create(
    type: str,
    mutability: EntityMutability | str,
    data: Mapping[str, JsonValue] | None = None,
) -> str:
    """Create an entity in the default registry and return its key."""
    return get_default_registry().create(type, mutability, data)


def add(instance: EntityInstance) -> str:
    """Store an existing instance in the default registry under a new key."""
    return get_default_registry().add(instance)


def get(key: str) -> EntityInstance:
    """Return the instance for `key`; raises UnknownEntityError if it was never issued."""
    return get_default_registry().get(key)


def merge_data(key: str, patch: Mapping[str, JsonValue]) -> EntityInstance:
    """Overlay `patch` on the data at `key` and return the new instance."""
    return get_default_registry().merge_data(key, patch)


def replace_data(key: str, new_data: Mapping[str, JsonValue]) -> EntityInstance:
    """Replace the data at `key` wholesale and return the new instance."""
    return get_default_registry().replace_data(key, new_data)
