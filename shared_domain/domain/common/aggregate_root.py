"""
Base class for Aggregate Roots.

Aggregate Roots are the entry point to an aggregate - a cluster of domain
objects that are treated as a single unit. All external references should
go through the aggregate root, and all invariants are enforced here.

Example:
    @dataclass(eq=False)
    class Order(UuidAggregateRoot):
        customer_id: UUID
        lines: list[OrderLine] = field(default_factory=list)

        def add_line(self, line: OrderLine) -> None:
            self.lines.append(line)
            self._raise_event(OrderLineAdded(order_id=self.id, sku=line.sku))
"""

from dataclasses import dataclass, field
from typing import Generic
from uuid import UUID, uuid4

import structlog

from .domain_event import DomainEvent
from .entity import Entity, IdType

logger = structlog.get_logger(__name__)


@dataclass(eq=False, repr=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots are:
    - Entry point to an aggregate (cluster of related entities)
    - Responsible for maintaining invariants
    - The only entity referenced from outside the aggregate
    - The sole source of their domain events

    Events are kept in raise order and never deduplicated: raising the
    same event type twice keeps both occurrences. The infrastructure layer
    (e.g., the Unit of Work) drains them with dequeue_events() after the
    aggregate is persisted; the aggregate never publishes them itself.
    """

    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def _raise_event(self, event: DomainEvent) -> None:
        """
        Record a domain event to be dispatched later.

        Only the aggregate's own behavior methods call this, so every event
        originates from a meaningful state transition.
        """
        self._domain_events.append(event)

    def dequeue_events(self) -> tuple[DomainEvent, ...]:
        """
        Return all pending domain events and clear the queue.

        Calling this on an aggregate with no pending events returns an
        empty tuple.
        """
        events = tuple(self._domain_events)
        self._domain_events.clear()
        if events:
            logger.debug(
                "domain_events_dequeued",
                aggregate_type=self.__class__.__name__,
                aggregate_id=str(self.id),
                event_count=len(events),
            )
        return events

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        """Return pending events without clearing them."""
        return tuple(self._domain_events)

    @property
    def has_pending_events(self) -> bool:
        """Whether any event has been raised since the last dequeue."""
        return bool(self._domain_events)


@dataclass(eq=False)
class UuidAggregateRoot(AggregateRoot[UUID]):
    """Aggregate root whose identifier defaults to a freshly generated UUID."""

    id: UUID = field(default_factory=uuid4, kw_only=True)
