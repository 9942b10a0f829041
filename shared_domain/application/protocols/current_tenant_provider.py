"""Protocol for resolving the tenant of the current session."""

from typing import Protocol
from uuid import UUID


class CurrentTenantProviderProtocol(Protocol):
    """Holds the current tenant ID for one logical session or request."""

    @property
    def tenant_id(self) -> UUID | None:
        """The current tenant's ID, or None outside a tenant scope."""
        ...

    def set_tenant_id(self, tenant_id: UUID | None) -> None:
        """
        Update the current tenant ID.

        Args:
            tenant_id: The tenant ID, or None to clear it
        """
        ...
