"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- AggregateRoot: Consistency boundaries with domain events
- DomainEvent: Notifications of significant domain occurrences
- guard: Precondition and invariant checks
"""

from . import guard
from .aggregate_root import AggregateRoot, UuidAggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId, UuidEntity
from .exceptions import (
    BusinessRuleViolationError,
    DomainError,
    InvalidArgumentError,
    MissingArgumentError,
)
from .processed_event import ProcessedEvent
from .tenant_entity import TenantEntity
from .value_object import ValueObject

__all__ = [
    "AggregateRoot",
    "BusinessRuleViolationError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "InvalidArgumentError",
    "MissingArgumentError",
    "ProcessedEvent",
    "TenantEntity",
    "UuidAggregateRoot",
    "UuidEntity",
    "ValueObject",
    "guard",
]
