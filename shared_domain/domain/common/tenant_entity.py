"""Capability protocol for entities that belong to a tenant's private data set."""

from typing import Protocol, runtime_checkable
from uuid import UUID


@runtime_checkable
class TenantEntity(Protocol):
    """
    Marks an aggregate or entity as tenant-owned.

    Infrastructure checks ``isinstance(obj, TenantEntity)`` to apply
    data-isolation filtering.
    """

    @property
    def tenant_id(self) -> UUID:
        """The ID of the owning tenant."""
        ...
