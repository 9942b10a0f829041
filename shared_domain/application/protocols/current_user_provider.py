"""Protocol for resolving the acting user of the current session."""

from typing import Protocol
from uuid import UUID


class CurrentUserProviderProtocol(Protocol):
    """Holds the current user ID for one logical session or request."""

    @property
    def user_id(self) -> UUID | None:
        """The current user's ID, or None for anonymous/system work."""
        ...

    def set_user_id(self, user_id: UUID | None) -> None:
        """
        Update the current user ID.

        Args:
            user_id: The user ID, or None to clear it
        """
        ...
