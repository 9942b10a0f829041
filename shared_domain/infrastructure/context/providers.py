"""
Current user and tenant providers scoped to the running context.

Each asyncio task runs in a copy of its parent's context, so a value set
while handling one request is never visible to another request running
concurrently.

Example:
    tenant_provider = ContextVarCurrentTenantProvider()

    async def dispatch(request: Request, call_next: CallNext) -> Response:
        tenant_provider.set_tenant_id(UUID(request.headers["X-Tenant-Id"]))
        return await call_next(request)
"""

from contextvars import ContextVar
from uuid import UUID

import structlog

logger = structlog.get_logger(__name__)

current_user_id_context: ContextVar[UUID | None] = ContextVar("current_user_id", default=None)
current_tenant_id_context: ContextVar[UUID | None] = ContextVar(
    "current_tenant_id", default=None
)


class ContextVarCurrentUserProvider:
    """CurrentUserProviderProtocol implementation over a context variable."""

    @property
    def user_id(self) -> UUID | None:
        return current_user_id_context.get()

    def set_user_id(self, user_id: UUID | None) -> None:
        current_user_id_context.set(user_id)
        logger.debug("current_user_set", user_id=str(user_id) if user_id else None)


class ContextVarCurrentTenantProvider:
    """CurrentTenantProviderProtocol implementation over a context variable."""

    @property
    def tenant_id(self) -> UUID | None:
        return current_tenant_id_context.get()

    def set_tenant_id(self, tenant_id: UUID | None) -> None:
        current_tenant_id_context.set(tenant_id)
        logger.debug("current_tenant_set", tenant_id=str(tenant_id) if tenant_id else None)
