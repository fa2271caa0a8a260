"""Entity records attached to spans of document text.

This module defines the value types stored in an entity registry:

- **EntityInstance**: Immutable record of an entity's type, mutability and data
- **EntityMutability**: Policy describing how editors treat edits over an entity
- **EntityType**: Well-known entity type tags (the set is open)
- **EntityData**: The JSON-like payload carried by an entity

A document model stores entity keys inline with its text ranges; the records
themselves live in a registry and are looked up by key. For example, a `LINK`
entity carries a `uri` in its data, and a renderer turns the text that refers
to it into an anchor.

Instances are frozen Pydantic models and their data is read-only all the way
down: mappings are exposed as `MappingProxyType` and lists as tuples. An update
never touches an existing instance: `with_data()` and `merged_with()` return a
new one, so a document snapshot holding the old instance keeps seeing the old
data. `model_dump()` gives back plain dicts and lists.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, Field, JsonValue, TypeAdapter, field_serializer, field_validator

EntityData = dict[str, JsonValue]
"""Entity payload: string keys mapped to strings, numbers, booleans, None,
or nested lists and mappings of the same."""

_DATA_ADAPTER: TypeAdapter[EntityData] = TypeAdapter(EntityData)


def _thaw(value: Any) -> Any:
    """Turn read-only mappings and tuples back into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(v) for v in value]
    return value


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def _frozen_data(data: Mapping[str, Any]) -> Mapping[str, JsonValue]:
    return _freeze(_DATA_ADAPTER.validate_python(_thaw(data)))


class EntityMutability(str, Enum):
    """How an editor should treat user edits that touch an entity's text.

    The registry stores this value but never enforces it.
    """

    MUTABLE = "MUTABLE"
    """The text may be edited freely and stays attached to the entity."""

    IMMUTABLE = "IMMUTABLE"
    """Any edit inside the range removes the entity from the whole range."""

    SEGMENTED = "SEGMENTED"
    """The range is made of segments that are removed one at a time."""


class EntityType(str, Enum):
    """Common entity type tags.

    Document models may use any other string as an entity type; these are
    provided so that the usual ones are spelled consistently.
    """

    LINK = "LINK"
    TOKEN = "TOKEN"
    PHOTO = "PHOTO"
    IMAGE = "IMAGE"
    MENTION = "MENTION"


class EntityInstance(BaseModel, frozen=True):
    """An immutable entity record: type, mutability and data payload.

    Attributes:
        type: Classification tag, e.g. "LINK" or "MENTION".
        mutability: Edit policy for the entity's text range.
        data: Arbitrary JSON-like metadata, opaque to the registry. Held as a
            read-only mapping; nested mappings are read-only too and nested
            lists become tuples.

    Example:
        ```python
        link = EntityInstance(type="LINK", mutability="MUTABLE", data={"uri": "http://a"})
        newer = link.merged_with({"target": "_blank"})
        assert link.data == {"uri": "http://a"}
        ```
    """

    type: str = Field(description="Entity type tag, e.g. 'LINK'.")
    mutability: EntityMutability = Field(description="Edit policy for the entity's text range.")
    data: EntityData = Field(
        default_factory=dict,
        validate_default=True,
        description="Metadata for the entity, e.g. {'uri': '...'} for a link.",
    )

    @field_validator("data", mode="before")
    @classmethod
    def _plain_data(cls, value: Any) -> Any:
        return {} if value is None else _thaw(value)

    @field_validator("data", mode="after")
    @classmethod
    def _read_only_data(cls, value: EntityData) -> Any:
        return _freeze(value)

    @field_serializer("data")
    def _serialize_data(self, value: Mapping[str, JsonValue]) -> EntityData:
        return _thaw(value)

    def get_type(self) -> str:
        return self.type

    def get_mutability(self) -> EntityMutability:
        return self.mutability

    def get_data(self) -> Mapping[str, JsonValue]:
        return self.data

    def with_data(self, data: Mapping[str, JsonValue]) -> "EntityInstance":
        """Return a copy of this instance whose data is replaced by `data`.

        The mapping is validated and copied, so later changes to the
        caller's dict do not reach the new instance.
        """
        return self.model_copy(update={"data": _frozen_data(data)})

    def merged_with(self, patch: Mapping[str, JsonValue]) -> "EntityInstance":
        """Return a copy of this instance with `patch` overlaid on its data.

        Keys in `patch` win; keys only present in the current data are kept.
        """
        return self.with_data({**self.data, **patch})
