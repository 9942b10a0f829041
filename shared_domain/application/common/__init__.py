"""
Application common module.

Contains base classes for the application layer:
- UnitOfWork: Coordinates persistence and collects domain events
"""

from .unit_of_work import UnitOfWork

__all__ = [
    "UnitOfWork",
]
