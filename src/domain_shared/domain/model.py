"""Identity, entity and value-object contracts.

Contracts are ``Protocol`` classes: concrete domain types implement them
directly instead of inheriting from a base hierarchy.  The equality rules
are conventions each implementer honours, never checked at runtime:

*  **Value objects** compare (and hash) on *all* attributes and never
   change after construction.  ``@dataclass(frozen=True)`` gives both.
*  **Identities** are value objects wrapping one natural key.
*  **Entities** *have* an identity and compare (and hash) on it alone,
   whatever their other attributes hold.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, runtime_checkable

from domain_shared.core.ids import new_id


@runtime_checkable
class ValueObject(Protocol):
    """Immutable object defined by its attributes, not by an identity."""

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...


@runtime_checkable
class Identity(ValueObject, Protocol):
    """Value object that uniquely identifies an entity."""

    @property
    def value(self) -> Any: ...


IdT = TypeVar("IdT", bound=Identity)
IdT_co = TypeVar("IdT_co", bound=Identity, covariant=True)
EntityIdT = TypeVar("EntityIdT", bound="EntityId")


@runtime_checkable
class Entity(Protocol[IdT_co]):
    """Object defined by the continuity of its identity.

    Implementers must compare equal iff ``self.id == other.id`` and
    derive ``__hash__`` from ``id`` only.
    """

    @property
    def id(self) -> IdT_co: ...


@dataclass(frozen=True)
class EntityId:
    """Concrete identity wrapping a single opaque value.

    Subclass per entity type so IDs of different entities never compare
    equal by accident::

        @dataclass(frozen=True)
        class OrderId(EntityId):
            pass
    """

    value: Any

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls: type[EntityIdT]) -> EntityIdT:
        """Create an identity wrapping a fresh UUID4 string."""
        return cls(new_id())
