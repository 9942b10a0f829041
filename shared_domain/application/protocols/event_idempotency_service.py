"""Protocol for tracking which handlers already processed an event."""

from typing import Protocol
from uuid import UUID


class EventIdempotencyServiceProtocol(Protocol):
    """
    Idempotency tracking for domain event handlers.

    Implementations keep a durable ProcessedEvent record keyed by
    (event_id, handler_type).
    """

    async def has_been_processed(self, event_id: UUID, handler_type: str) -> bool:
        """
        Check whether a handler already processed an event.

        Args:
            event_id: The domain event ID
            handler_type: Name of the handler

        Returns:
            True if a record exists for the pair
        """
        ...

    async def mark_as_processed(self, event_id: UUID, event_type: str, handler_type: str) -> None:
        """
        Record that a handler processed an event.

        Args:
            event_id: The domain event ID
            event_type: The domain event type name
            handler_type: Name of the handler
        """
        ...
