"""Protocol for aggregate repositories."""

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar
from uuid import UUID

from shared_domain.domain.common import AggregateRoot

AggregateT = TypeVar("AggregateT", bound=AggregateRoot[Any])
IdT = TypeVar("IdT", contravariant=True)


class RepositoryProtocol(Protocol[AggregateT, IdT]):
    """
    Standard CRUD operations for one aggregate type.

    Specific aggregate repositories extend this protocol with their own
    query methods. Every method is a coroutine; cancelling the awaiting
    task cancels the operation.
    """

    async def get_by_id(self, id: IdT) -> AggregateT | None:
        """
        Find an aggregate by ID.

        Args:
            id: The aggregate ID

        Returns:
            Aggregate if found, None otherwise
        """
        ...

    async def get_all(self) -> list[AggregateT]:
        """Return every aggregate of this type."""
        ...

    async def add(self, aggregate: AggregateT) -> None:
        """Track a new aggregate for insertion."""
        ...

    async def add_many(self, aggregates: Iterable[AggregateT]) -> None:
        """Track several new aggregates for insertion."""
        ...

    async def update(self, aggregate: AggregateT) -> None:
        """Track a modified aggregate."""
        ...

    async def update_many(self, aggregates: Iterable[AggregateT]) -> None:
        """Track several modified aggregates."""
        ...

    async def remove(self, aggregate: AggregateT) -> None:
        """Track an aggregate for deletion."""
        ...

    async def remove_many(self, aggregates: Iterable[AggregateT]) -> None:
        """Track several aggregates for deletion."""
        ...

    async def remove_by_id(self, id: IdT) -> None:
        """
        Delete an aggregate by ID.

        Args:
            id: The aggregate ID
        """
        ...


class UuidRepositoryProtocol(RepositoryProtocol[AggregateT, UUID], Protocol[AggregateT]):
    """Repository for aggregates identified by a UUID."""
