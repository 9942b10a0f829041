"""
Unit of Work interface.

The Unit of Work pattern maintains a list of objects affected by a business
transaction and coordinates the writing out of changes and the collection
of the domain events raised during it.

Example:
    async def place_order(command: PlaceOrder, repo: OrderRepo, uow: UnitOfWork) -> UUID:
        async with uow:
            await uow.begin_transaction()
            order = Order.place(command.customer_id, command.lines)
            await repo.add(order)
            await uow.save_changes()
            await uow.commit_transaction()
        for event in await uow.get_and_clear_pending_events():
            await dispatcher.publish(event)
        return order.id
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from types import TracebackType
from typing import Any, Self

import structlog

from shared_domain.domain.common import AggregateRoot, DomainEvent

logger = structlog.get_logger(__name__)


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Persists tracked changes
    - Manages the surrounding transaction
    - Drains domain events from the aggregates it tracks
    - Can be used as an async context manager

    Infrastructure layer provides concrete implementations. Every
    operation is a coroutine; cancelling the awaiting task cancels it.
    """

    @abstractmethod
    async def save_changes(self) -> int:
        """
        Persist all pending changes to the underlying store.

        Returns:
            Number of affected records
        """
        raise NotImplementedError

    @abstractmethod
    async def begin_transaction(self) -> None:
        """Begin a new transaction."""
        raise NotImplementedError

    @abstractmethod
    async def commit_transaction(self) -> None:
        """Commit the current transaction."""
        raise NotImplementedError

    @abstractmethod
    async def rollback_transaction(self) -> None:
        """
        Rollback the current transaction.

        This discards all changes made within the unit of work.
        """
        raise NotImplementedError

    @abstractmethod
    def _tracked_aggregates(self) -> Iterable[AggregateRoot[Any]]:
        """Return the aggregates touched by this unit of work, in tracking order."""
        raise NotImplementedError

    async def get_and_clear_pending_events(self) -> list[DomainEvent]:
        """
        Collect and clear domain events from every tracked aggregate.

        Events keep their raise order within an aggregate, and aggregates
        keep their tracking order.
        """
        events: list[DomainEvent] = []
        for aggregate in self._tracked_aggregates():
            events.extend(aggregate.dequeue_events())
        logger.debug("pending_events_collected", event_count=len(events))
        return events

    async def __aenter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            await self.rollback_transaction()
