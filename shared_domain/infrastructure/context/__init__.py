"""Session context providers backed by context variables."""

from .providers import ContextVarCurrentTenantProvider, ContextVarCurrentUserProvider

__all__ = [
    "ContextVarCurrentTenantProvider",
    "ContextVarCurrentUserProvider",
]
