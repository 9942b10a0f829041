"""Ports implemented by the persistence and session layers."""

from .current_tenant_provider import CurrentTenantProviderProtocol
from .current_user_provider import CurrentUserProviderProtocol
from .event_idempotency_service import EventIdempotencyServiceProtocol
from .repository import RepositoryProtocol, UuidRepositoryProtocol

__all__ = [
    "CurrentTenantProviderProtocol",
    "CurrentUserProviderProtocol",
    "EventIdempotencyServiceProtocol",
    "RepositoryProtocol",
    "UuidRepositoryProtocol",
]
