"""
Document Entity Schema - Base Models and Interfaces

This package contains only Pydantic models and ABC interfaces with no
functional code. It defines:

- The immutable entity instance record and its mutability policy
- Well-known entity type tags
- The entity registry interface
- The unknown-key error raised by registries

These are used by entregistry (the registry implementation) and can be
referenced by document models that attach entities to text.
"""

from entschema.entity import EntityData, EntityInstance, EntityMutability, EntityType
from entschema.errors import UnknownEntityError
from entschema.registry import EntityRegistryInterface

__all__ = [
    "EntityData",
    "EntityInstance",
    "EntityMutability",
    "EntityRegistryInterface",
    "EntityType",
    "UnknownEntityError",
]

__version__ = "0.1.0"
