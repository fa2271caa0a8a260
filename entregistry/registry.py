"""In-memory entity registry.

The registry owns every entity instance a document refers to. Documents store
only the opaque keys this registry mints; renderers and editors resolve those
keys back to instances with `get()`.

Keys are the decimal value of a per-registry counter, optionally prefixed by
`RegistryConfig.key_prefix`. The counter only ever increases, so a key is
never issued twice by the same registry, and nothing is ever removed: an
update stores a new instance under the same key and leaves the old instance
untouched for anyone still holding it.

Thread safety: Not thread-safe. The registry assumes one writer at a time,
as in an editor's event loop. Wrap calls in a lock if that does not hold.
"""

from typing import Iterator, Mapping

from pydantic import JsonValue

from entregistry.config import RegistryConfig
from entregistry.logging import setup_logging
from entschema.entity import EntityInstance, EntityMutability
from entschema.errors import UnknownEntityError
from entschema.registry import EntityRegistryInterface


class InMemoryEntityRegistry(EntityRegistryInterface):
    """Entity registry backed by a dict keyed by minted key.

    Example:
        ```python
        registry = InMemoryEntityRegistry()
        key = registry.create("LINK", "MUTABLE", {"uri": "http://a"})
        registry.merge_data(key, {"target": "_blank"})
        registry.get(key).data  # {"uri": "http://a", "target": "_blank"}
        ```
    """

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self.config = config or RegistryConfig()
        self._instances: dict[str, EntityInstance] = {}
        self._instance_key = 0
        self.logger = setup_logging(level=self.config.log_level, name=__name__)

    def _mint_key(self) -> str:
        self._instance_key += 1
        return f"{self.config.key_prefix}{self._instance_key}"

    def create(
        self,
        type: str,
        mutability: EntityMutability | str,
        data: Mapping[str, JsonValue] | None = None,
    ) -> str:
        """Create an entity instance and store it for later retrieval.

        Args:
            type: Entity type tag, e.g. "LINK".
            mutability: One of MUTABLE, IMMUTABLE, SEGMENTED.
            data: Entity metadata. Defaults to an empty dict.

        Returns:
            The new key, for the document model to store alongside the text.

        Raises:
            pydantic.ValidationError: If `mutability` is not one of the three
                policies or `data` holds non-JSON values. The registry itself
                performs no checks, and no key is minted in that case.
        """
        instance = EntityInstance(type=type, mutability=mutability, data=data)
        return self.add(instance)

    def add(self, instance: EntityInstance) -> str:
        """Store an existing instance under a new key.

        Used when restoring entities from a serialized document; the caller
        must rewrite its inline references to the returned key.
        """
        key = self._mint_key()
        self._instances[key] = instance
        self.logger.debug("Added %s entity under key %r", instance.type, key)
        return key

    def get(self, key: str) -> EntityInstance:
        """Return the current instance for `key`.

        Raises:
            UnknownEntityError: If this registry never issued `key`.
        """
        try:
            return self._instances[key]
        except KeyError:
            raise UnknownEntityError(key) from None

    def merge_data(self, key: str, patch: Mapping[str, JsonValue]) -> EntityInstance:
        """Merge `patch` into the data of the instance at `key`.

        Instances are immutable, so this stores and returns a new one.
        """
        instance = self.get(key).merged_with(patch)
        self._instances[key] = instance
        self.logger.debug("Merged data into entity %r", key)
        return instance

    def replace_data(self, key: str, new_data: Mapping[str, JsonValue]) -> EntityInstance:
        """Completely replace the data of the instance at `key`."""
        instance = self.get(key).with_data(new_data)
        self._instances[key] = instance
        self.logger.debug("Replaced data of entity %r", key)
        return instance

    @property
    def last_key(self) -> str | None:
        """The most recently minted key, or None if nothing was added yet."""
        if self._instance_key == 0:
            return None
        return f"{self.config.key_prefix}{self._instance_key}"

    def keys(self) -> list[str]:
        return list(self._instances)

    def items(self) -> list[tuple[str, EntityInstance]]:
        return list(self._instances.items())

    def __contains__(self, key: object) -> bool:
        return key in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._instances))
