"""
Document Entity Registry.

Stores the immutable entity records (links, mentions, images, ...) that a
rich-text document attaches to ranges of its text, and hands out the opaque
keys the document keeps inline.

    from entregistry import create, get, merge_data

    key = create("LINK", "MUTABLE", {"uri": "http://a"})
    merge_data(key, {"target": "_blank"})
    get(key).data  # {"uri": "http://a", "target": "_blank"}

The module-level functions use a process-wide registry. Use
InMemoryEntityRegistry or EditorSession directly to give each document or
session its own.
"""

from entregistry.config import RegistryConfig, load_registry_config
from entregistry.default import (
    add,
    create,
    get,
    get_default_registry,
    merge_data,
    replace_data,
    set_default_registry,
)
from entregistry.registry import InMemoryEntityRegistry
from entregistry.session import EditorSession
from entschema import (
    EntityData,
    EntityInstance,
    EntityMutability,
    EntityRegistryInterface,
    EntityType,
    UnknownEntityError,
)

__all__ = [
    "EditorSession",
    "EntityData",
    "EntityInstance",
    "EntityMutability",
    "EntityRegistryInterface",
    "EntityType",
    "InMemoryEntityRegistry",
    "RegistryConfig",
    "UnknownEntityError",
    "add",
    "create",
    "get",
    "get_default_registry",
    "load_registry_config",
    "merge_data",
    "replace_data",
    "set_default_registry",
]

__version__ = "0.1.0"
