"""
ProcessedEvent record for event handler idempotency.

Infrastructure stores one record per (event_id, handler_type) pair so a
handler can skip events it has already handled.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Self
from uuid import UUID, uuid4

from . import guard


@dataclass(frozen=True)
class ProcessedEvent:
    """
    Marks a domain event as handled by a specific handler.

    Attributes:
        id: Record identifier
        event_id: ID of the handled domain event
        event_type: Type name of the handled domain event
        handler_type: Name of the handler that processed it
        processed_at: When the handler finished (UTC)
    """

    id: UUID
    event_id: UUID
    event_type: str
    handler_type: str
    processed_at: datetime

    @classmethod
    def create(cls, event_id: UUID, event_type: str, handler_type: str) -> Self:
        """
        Register the processing of a domain event by a handler.

        Args:
            event_id: ID of the handled event
            event_type: Type name of the handled event
            handler_type: Name of the handler

        Returns:
            New ProcessedEvent stamped with the current time
        """
        guard.not_none(event_id, "event_id")
        guard.not_none_or_whitespace(event_type, "event_type")
        guard.not_none_or_whitespace(handler_type, "handler_type")
        return cls(
            id=uuid4(),
            event_id=event_id,
            event_type=event_type,
            handler_type=handler_type,
            processed_at=datetime.now(UTC),
        )
