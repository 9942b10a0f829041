"""Pytest configuration and fixtures."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest


@pytest.fixture
def fixed_time() -> datetime:
    """A deterministic UTC timestamp."""
    return datetime(2025, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def actor_id() -> UUID:
    """ID of the user performing an operation."""
    return uuid4()
