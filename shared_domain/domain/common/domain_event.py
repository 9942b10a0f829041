"""
Base class for Domain Events.

Domain Events represent something significant that happened in the domain.
They are immutable records of past occurrences that other parts of the
system can react to.

Example:
    @dataclass(frozen=True, kw_only=True)
    class OrderPlaced(DomainEvent):
        version: ClassVar[int] = 2

        order_id: OrderId
        total: Decimal

    # In a test with a deterministic clock:
    event = OrderPlaced(order_id=order_id, total=total).with_occurred_on(fixed_time)
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import ClassVar, Self
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """
    Base class for Domain Events.

    Domain Events are:
    - Immutable (frozen dataclass)
    - Named in past tense (OrderPlaced, not PlaceOrder)
    - Self-contained (carry all data needed to understand what happened)
    - Distinct occurrences (every instance gets its own event_id)

    Subclasses should be decorated with @dataclass(frozen=True, kw_only=True)
    and define their specific attributes. Override ``version`` when the
    payload shape changes.
    """

    version: ClassVar[int] = 1

    event_id: UUID = field(default_factory=uuid4)
    occurred_on: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    def with_occurred_on(self, occurred_on: datetime) -> Self:
        """Return a copy that occurred at ``occurred_on``; every other field is kept."""
        return replace(self, occurred_on=occurred_on)

    def to_dict(self) -> dict[str, object]:
        """Convert event to dictionary for serialization."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        result["event_type"] = self.event_type
        result["version"] = self.version
        return result
