"""Tests for the DomainEvent base class."""

from dataclasses import FrozenInstanceError, dataclass
from datetime import UTC, datetime, timedelta
from typing import ClassVar
from uuid import UUID, uuid4

import pytest

from shared_domain.domain.common import DomainEvent, EntityId


@dataclass(frozen=True, eq=False)
class OrderId(EntityId):
    pass


@dataclass(frozen=True, kw_only=True)
class OrderPlaced(DomainEvent):
    order_id: UUID


@dataclass(frozen=True, kw_only=True)
class OrderShipped(DomainEvent):
    version: ClassVar[int] = 2

    order_id: OrderId
    carrier: str


def test_new_event_has_generated_id() -> None:
    event = OrderPlaced(order_id=uuid4())

    assert isinstance(event.event_id, UUID)
    assert event.event_id.int != 0


def test_identical_events_are_distinct_occurrences() -> None:
    order_id = uuid4()
    a = OrderPlaced(order_id=order_id)
    b = OrderPlaced(order_id=order_id)

    assert a.event_id != b.event_id
    assert a != b


def test_event_type_is_class_name() -> None:
    assert OrderPlaced(order_id=uuid4()).event_type == "OrderPlaced"
    assert OrderShipped(order_id=OrderId(1), carrier="DHL").event_type == "OrderShipped"


def test_event_type_cannot_be_set() -> None:
    event = OrderPlaced(order_id=uuid4())
    with pytest.raises(AttributeError):
        event.event_type = "Something"  # type: ignore[misc]


def test_default_version_is_1() -> None:
    assert OrderPlaced(order_id=uuid4()).version == 1


def test_version_can_be_overridden_per_kind() -> None:
    assert OrderShipped(order_id=OrderId(1), carrier="DHL").version == 2
    assert OrderPlaced.version == 1


def test_occurred_on_defaults_to_now_utc() -> None:
    before = datetime.now(UTC)
    event = OrderPlaced(order_id=uuid4())
    after = datetime.now(UTC)

    assert event.occurred_on.tzinfo is UTC
    assert before <= event.occurred_on <= after


def test_with_occurred_on_only_changes_timestamp(fixed_time: datetime) -> None:
    original = OrderPlaced(order_id=uuid4())

    event = original.with_occurred_on(fixed_time)

    assert event.occurred_on == fixed_time
    assert event.event_id == original.event_id
    assert event.order_id == original.order_id
    assert event.event_type == original.event_type
    assert original.occurred_on != fixed_time


def test_occurred_on_can_be_supplied(fixed_time: datetime) -> None:
    event = OrderPlaced(order_id=uuid4(), occurred_on=fixed_time - timedelta(days=1))
    assert event.occurred_on == fixed_time - timedelta(days=1)


def test_event_is_frozen() -> None:
    event = OrderPlaced(order_id=uuid4())
    with pytest.raises(FrozenInstanceError):
        event.order_id = uuid4()  # type: ignore[misc]


def test_to_dict(fixed_time: datetime) -> None:
    event = OrderShipped(order_id=OrderId(42), carrier="DHL").with_occurred_on(fixed_time)

    data = event.to_dict()

    assert data == {
        "event_id": str(event.event_id),
        "occurred_on": "2025-06-15T12:00:00+00:00",
        "order_id": 42,
        "carrier": "DHL",
        "event_type": "OrderShipped",
        "version": 2,
    }
