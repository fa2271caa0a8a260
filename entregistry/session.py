from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from entregistry.config import RegistryConfig
from entregistry.registry import InMemoryEntityRegistry


class EditorSession(BaseModel):
    """Owner of the entity registry for one editing session.

    Documents edited in the same session share `entities`; separate sessions
    get separate registries and so cannot resolve each other's keys.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = "default"
    entities: InMemoryEntityRegistry

    @classmethod
    def new(cls, name: str = "default", config: RegistryConfig | None = None) -> "EditorSession":
        return cls(name=name, entities=InMemoryEntityRegistry(config))
