"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they are of the same class
and have the same identity, regardless of their attributes.

Example:
    @dataclass(eq=False)
    class Customer(UuidEntity):
        name: str

        def rename(self, name: str) -> None:
            guard.not_none_or_whitespace(name, "name")
            self.name = name

Subclasses use @dataclass(eq=False) so identity equality is kept.
"""

from abc import ABC
from collections.abc import Hashable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from . import guard
from .value_object import ValueObject


@dataclass(frozen=True, eq=False)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap an integer or UUID.
    They provide type safety to prevent mixing up IDs of different entities.

    Example:
        @dataclass(frozen=True, eq=False)
        class OrderId(EntityId):
            pass

        OrderId(42) == InvoiceId(42)  # False, different kinds
    """

    value: int | UUID

    def __post_init__(self) -> None:
        guard.not_none(self.value, "value")
        if isinstance(self.value, int):
            guard.greater_than(
                self.value, 0, f"{self.__class__.__name__} must be positive", "value"
            )

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create an identifier backed by a fresh UUID."""
        return cls(uuid4())

    def to_primitive(self) -> int | str:
        """Convert to primitive for serialization."""
        if isinstance(self.value, int):
            return self.value
        return str(self.value)


IdType = TypeVar("IdType", bound=Hashable)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Audited (created/updated timestamps and actors)

    Subclasses must assign an 'id' of type IdType exactly once. Audit
    fields stay None until mark_created() is called by the caller that
    persists the entity.
    """

    id: IdType
    created_at: datetime | None = None
    updated_at: datetime | None = None
    created_by: UUID | None = None
    updated_by: UUID | None = None

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError(f"{self.__class__.__name__}.id cannot be reassigned")
        super().__setattr__(name, value)

    def mark_created(self, created_at: datetime, created_by: UUID | None = None) -> None:
        """
        Set the creation audit fields.

        The update fields are set to the same values, so a freshly created
        entity reports created_at == updated_at.

        Args:
            created_at: When the entity was created (UTC)
            created_by: ID of the acting user, if any
        """
        self.created_at = created_at
        self.updated_at = created_at
        self.created_by = created_by
        self.updated_by = created_by

    def mark_updated(self, updated_at: datetime, updated_by: UUID | None = None) -> None:
        """
        Set the update audit fields, leaving the creation fields untouched.

        Args:
            updated_at: When the entity was modified (UTC)
            updated_by: ID of the acting user, if any
        """
        self.updated_at = updated_at
        self.updated_by = updated_by

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Entity) or type(other) is not type(self):
            return False
        return bool(self.id == other.id)

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"


@dataclass(eq=False)
class UuidEntity(Entity[UUID]):
    """Entity whose identifier defaults to a freshly generated UUID."""

    id: UUID = field(default_factory=uuid4, kw_only=True)
