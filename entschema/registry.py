"""Entity registry interface definition."""

from abc import ABC, abstractmethod
from typing import Iterable, Mapping, Sequence

from pydantic import JsonValue

from entschema.entity import EntityInstance, EntityMutability


class EntityRegistryInterface(ABC):
    """Abstract interface for a registry of entity instances keyed by opaque strings.

    Keys are minted only by the registry. Instances are never removed; an
    update stores a new instance under the same key.
    """

    @abstractmethod
    def create(
        self,
        type: str,
        mutability: EntityMutability | str,
        data: Mapping[str, JsonValue] | None = None,
    ) -> str:
        """Build an instance from its fields, store it, and return its new key.

        Construction errors from EntityInstance propagate unchanged.
        """

    @abstractmethod
    def add(self, instance: EntityInstance) -> str:
        """Store an existing instance under a freshly minted key and return the key."""

    @abstractmethod
    def get(self, key: str) -> EntityInstance:
        """Return the current instance for `key`.

        Raises UnknownEntityError if the key was never issued by this registry.
        """

    @abstractmethod
    def merge_data(self, key: str, patch: Mapping[str, JsonValue]) -> EntityInstance:
        """Overlay `patch` on the data of the instance at `key`.

        Stores and returns the new instance. Raises UnknownEntityError for
        an unknown key.
        """

    @abstractmethod
    def replace_data(self, key: str, new_data: Mapping[str, JsonValue]) -> EntityInstance:
        """Replace the data of the instance at `key` wholesale.

        Stores and returns the new instance. Raises UnknownEntityError for
        an unknown key.
        """

    def add_batch(self, instances: Iterable[EntityInstance]) -> list[str]:
        """Add each instance in order and return the new keys in the same order."""
        return [self.add(instance) for instance in instances]

    def get_batch(self, keys: Sequence[str]) -> list[EntityInstance]:
        """Look up several keys; the first unknown key raises UnknownEntityError."""
        return [self.get(key) for key in keys]
